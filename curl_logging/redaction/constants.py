"""Built-in sensitive names for the redaction layer.

Centralizes the fixed baseline of header, query-parameter and JSON body
field names that are always treated as sensitive.
"""

DEFAULT_PLACEHOLDER = "[REDACTED]"

# Headers that must never appear in logs (matched case-insensitively)
BUILTIN_SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "x-api-key",
        "api-key",
        "apikey",
        "x-auth-token",
        "x-access-token",
        "x-token",
        "bearer",
        "cookie",
        "set-cookie",
        "x-csrf-token",
        "x-xsrf-token",
    }
)

BUILTIN_SENSITIVE_QUERY_PARAMS = frozenset(
    {
        "api_key",
        "apikey",
        "api-key",
        "access_token",
        "accesstoken",
        "access-token",
        "token",
        "auth",
        "auth_token",
        "authtoken",
        "password",
        "pwd",
        "pass",
        "secret",
        "client_secret",
        "clientsecret",
        "key",
        "code",
        "refresh_token",
        "refreshtoken",
    }
)

# Order matters: patterns are applied left to right
BUILTIN_SENSITIVE_BODY_FIELDS: tuple[str, ...] = (
    "password",
    "pwd",
    "pass",
    "secret",
    "api_key",
    "apikey",
    "api-key",
    "access_token",
    "accesstoken",
    "access-token",
    "refresh_token",
    "refreshtoken",
    "refresh-token",
    "token",
    "auth",
    "authorization",
    "client_secret",
    "clientsecret",
    "client-secret",
    "private_key",
    "privatekey",
    "private-key",
    "code",
    "otp",
    "pin",
    "cvv",
    "cvc",
    "card_number",
    "cardnumber",
    "card-number",
    "credit_card",
    "creditcard",
    "credit-card",
    "cc_number",
    "ccnumber",
    "account_number",
    "accountnumber",
    "routing_number",
    "routingnumber",
    "ssn",
    "social_security",
    "socialsecurity",
    "username",
    "user_name",
    "user",
    "login",
    "email",
    "phone",
    "mobile",
    "x-api-key",
    "bearer",
    "signature",
    "cert",
    "certificate",
)
