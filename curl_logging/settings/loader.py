"""YAML configuration loader for curl logging."""

from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from curl_logging.redaction.policy import RedactionPolicy
from curl_logging.settings.app import CurlLoggingSettings


logger = structlog.get_logger()

# Settings may be nested under this key when embedded in a larger file
CONFIG_SECTION = "curl_logging"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[dict[str, str]], file_path: str) -> None:
        """Initialize the error.

        Args:
            errors: List of validation error details.
            file_path: Path to the file that failed validation.
        """
        self.errors = errors
        self.file_path = file_path
        super().__init__(f"Validation failed for {file_path}: {len(errors)} errors")


def load_settings(path: Path | str) -> CurlLoggingSettings:
    """Load settings from a YAML file.

    Values in the file take precedence over CURL_LOGGING_* environment
    variables; anything the file leaves out falls back to the environment
    and then to defaults.

    Example YAML:

        curl_logging:
          enable_redaction: true
          log_response: false
          excluded_headers:
            - User-Agent
          additional_sensitive_body_fields:
            - tenant_secret

    Args:
        path: Path to the YAML file.

    Returns:
        Validated settings.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If YAML parsing fails.
        ConfigValidationError: If validation fails.
    """
    file_path = Path(path)
    log = logger.bind(component="config", path=str(file_path))

    parsed = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    section = parsed.get(CONFIG_SECTION, parsed) if isinstance(parsed, dict) else parsed
    if section is None:
        section = {}
    if not isinstance(section, dict):
        errors = [{"loc": "", "msg": "Expected a mapping", "type": "dict_type"}]
        log.error("config_validation_failed", errors=errors)
        raise ConfigValidationError(errors, str(file_path))

    try:
        settings = CurlLoggingSettings(**section)
        settings.to_policy()
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(loc) for loc in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        log.error("config_validation_failed", errors=errors)
        raise ConfigValidationError(errors, str(file_path)) from e

    log.info("config_loaded", keys=sorted(section))
    return settings


def load_policy(path: Path | str) -> RedactionPolicy:
    """Load a redaction policy from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Immutable redaction policy.
    """
    return load_settings(path).to_policy()
