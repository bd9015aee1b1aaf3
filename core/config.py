# =============================================================================
# core/config.py  -  Startup configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the RestCSV settings from the process environment exactly once, at
#   server startup, into an immutable Settings value.
#
# ENVIRONMENT VARIABLES:
#   RESTCSV_API_KEY   (required)  Bearer token sent with every request.
#   RESTCSV_BASE_URL  (optional)  Defaults to https://restcsv.com/api
#   RESTCSV_TIMEOUT   (optional)  Per-request timeout in seconds (default 30)
#
#   Entry points call load_dotenv() before load_settings(), so a local .env
#   file works the same way as exported variables.
#
# FAIL FAST:
#   A missing API key raises MissingApiKeyError.  The server entry point
#   calls load_settings() before it starts the stdio transport, so no tool
#   can ever be invoked without a credential.
# =============================================================================

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://restcsv.com/api"
DEFAULT_TIMEOUT = 30.0


class MissingApiKeyError(RuntimeError):
    """Raised when RESTCSV_API_KEY is not set."""


@dataclass(frozen=True)
class Settings:
    """Static configuration for the HTTP gateway."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks.
        return (f"Settings(api_key='***', base_url={self.base_url!r}, "
                f"timeout={self.timeout!r})")


def load_settings(environ=None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from.  Defaults to os.environ.

    Raises:
        MissingApiKeyError: RESTCSV_API_KEY is unset or blank.
        ValueError: RESTCSV_TIMEOUT is not a positive number.
    """
    env = os.environ if environ is None else environ

    api_key = env.get("RESTCSV_API_KEY", "").strip()
    if not api_key:
        raise MissingApiKeyError("RESTCSV_API_KEY environment variable not set.")

    base_url = env.get("RESTCSV_BASE_URL", "").strip() or DEFAULT_BASE_URL

    raw_timeout = env.get("RESTCSV_TIMEOUT", "").strip()
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"RESTCSV_TIMEOUT must be a number, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ValueError(f"RESTCSV_TIMEOUT must be positive, got {raw_timeout!r}")

    return Settings(api_key=api_key, base_url=base_url.rstrip("/"), timeout=timeout)
