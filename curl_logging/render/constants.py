"""Layout constants for rendered commands and summaries."""

# Separator between curl segments: " \", newline, two-space indent
LINE_CONTINUATION = " \\\n  "

BODY_UNAVAILABLE_SEGMENT = "[Content body not available for logging]"

# Undecodable body bytes are replaced rather than failing the render
BODY_ENCODING = "utf-8"

RESPONSE_SUMMARY_TEMPLATE = (
    "HTTP Response from {url} in {elapsed_ms}ms - Status: {status_code}\n"
    "Headers:\n{headers}\n"
    "Body:\n{body}"
)
