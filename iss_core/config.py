# =============================================================================
# iss_core/config.py  -  Process configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Collects the environment-derived settings once, at process start, into an
#   immutable Settings object.  The server entry point builds it (after
#   load_dotenv() has populated os.environ from a .env file) and hands it to
#   the tool factories that need it.
#
# WHY NOT READ os.environ INSIDE THE HANDLERS?
#   A handler that receives its settings can be exercised with a fake API
#   key and a fake transport; one that reads the environment cannot.
#
# VARIABLES:
#   SERPAPI_KEY       API key for SerpAPI.  Not validated here: a missing key
#                     surfaces as a request-time failure from SerpAPI.
#   SERPAPI_TIMEOUT   Seconds before the outbound search call is abandoned.
#   SERPAPI_ENDPOINT  Search endpoint (override for proxies / tests).
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_SERPAPI_ENDPOINT = "https://serpapi.com/search.json"
DEFAULT_SERPAPI_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    """Settings shared by the tools for the lifetime of the process."""

    serpapi_key: Optional[str] = None
    serpapi_endpoint: str = DEFAULT_SERPAPI_ENDPOINT
    serpapi_timeout: float = DEFAULT_SERPAPI_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from environment variables.

        Args:
            environ: Mapping to read from.  Defaults to os.environ.

        Raises:
            ValueError: If SERPAPI_TIMEOUT is set but is not a positive number.
        """
        env = os.environ if environ is None else environ

        timeout_raw = env.get("SERPAPI_TIMEOUT")
        if timeout_raw:
            timeout = float(timeout_raw)
            if timeout <= 0:
                raise ValueError(f"SERPAPI_TIMEOUT must be positive, got {timeout_raw!r}")
        else:
            timeout = DEFAULT_SERPAPI_TIMEOUT

        return cls(
            serpapi_key=env.get("SERPAPI_KEY") or None,
            serpapi_endpoint=env.get("SERPAPI_ENDPOINT") or DEFAULT_SERPAPI_ENDPOINT,
            serpapi_timeout=timeout,
        )
