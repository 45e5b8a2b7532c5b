# =============================================================================
# iss_core/weather.py  -  Weather Lookup via SerpAPI
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "what is the weather in <place> on <date>?" by asking Google
#   through SerpAPI and reading the weather answer box out of the result.
#
# KEY DESIGN DECISIONS:
#
# 1. THE SEPARATION OF "FETCH" AND "EXTRACT":
#    - fetch_search_results() makes exactly one HTTP request and returns the
#      raw JSON.  No retry, no cache.
#    - extract_reading() turns that JSON into a WeatherReading, or None when
#      the answer box (or one of its fields) is missing.
#    extract_reading() never raises: "Google had no answer" is a normal
#    outcome, distinct from "the request failed".
#
# 2. BOUNDED TIMEOUT:
#    Every request runs under Settings.serpapi_timeout.  A timeout is a
#    request failure like any other.
#
# 3. INJECTABLE TRANSPORT:
#    The caller may pass an httpx transport (tests use httpx.MockTransport).
#    Production code leaves it as None and gets the real network.
# =============================================================================

import logging
from datetime import date
from typing import Any, Optional

import httpx

from iss_core.config import Settings
from iss_core.errors import WeatherLookupError
from iss_core.models import AnswerBox, WeatherReading

logger = logging.getLogger(__name__)

# Fixed locale / engine parameters sent with every search.
SEARCH_PARAMS: dict[str, str] = {
    "engine": "google",
    "google_domain": "google.com",
    "gl": "us",
    "hl": "en",
}


def build_query(location_name: str, day: date) -> str:
    """Build the natural-language query Google answers with a weather box."""
    return f"what is the weather in {location_name} on {day.isoformat()}"


async def fetch_search_results(
    query: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict[str, Any]:
    """Run one SerpAPI search and return the decoded JSON body.

    Args:
        query: Free-text search query.
        settings: Supplies the API key, endpoint and timeout.
        transport: Optional httpx transport override.

    Raises:
        WeatherLookupError: On network failure, timeout, non-2xx status, a
            body that is not a JSON object, or an in-band SerpAPI error.
    """
    params = dict(SEARCH_PARAMS, q=query)
    if settings.serpapi_key:
        params["api_key"] = settings.serpapi_key

    async with httpx.AsyncClient(timeout=settings.serpapi_timeout, transport=transport) as client:
        try:
            response = await client.get(settings.serpapi_endpoint, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise WeatherLookupError(f"SerpAPI request failed: {e}") from e
        except ValueError as e:
            raise WeatherLookupError(f"SerpAPI returned invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise WeatherLookupError("SerpAPI returned an unexpected response body")

    # SerpAPI reports some failures (bad key, exhausted plan) in the body.
    if payload.get("error"):
        raise WeatherLookupError(f"SerpAPI error: {payload['error']}")

    logger.debug("SerpAPI answered %r with keys %s", query, sorted(payload))
    return payload


def extract_reading(payload: Any) -> Optional[WeatherReading]:
    """Project temperature / wind / precipitation out of a search result.

    Returns None when there is no answer box or it lacks any of the three.
    """
    box = AnswerBox.from_payload(payload)
    if box is None:
        return None
    return box.to_reading()


async def lookup_weather(
    location_name: str,
    day: date,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[WeatherReading]:
    """Fetch and extract the weather for a place and a date."""
    payload = await fetch_search_results(build_query(location_name, day), settings, transport)
    return extract_reading(payload)
