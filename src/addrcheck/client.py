"""Address lookup against the geocoding search endpoint.

One GET per address, `limit=1`, and the best candidate's confidence score is
compared with the configured threshold. Every failure mode (network error,
timeout, non-2xx status, unexpected JSON) ends up as `False`: callers cannot
tell an unknown address from one that could not be checked.
"""
from typing import Any
import logging
import httpx

from .config import Settings, load_settings


logger = logging.getLogger("addrcheck.client")


def build_query(street_address: str, postal_code: str, city: str) -> str:
    return f"{street_address}, {postal_code} {city}"


def score_from_response(payload: Any) -> float | None:
    """Return the first feature's `properties.score`, or None if there is none.

    Integers are accepted as scores; booleans and strings are not.
    """
    if not isinstance(payload, dict):
        return None
    features = payload.get("features")
    if not isinstance(features, list) or not features:
        return None
    first = features[0]
    if not isinstance(first, dict):
        return None
    props = first.get("properties")
    if not isinstance(props, dict):
        return None
    score = props.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return None
    return float(score)


def fetch_candidates(query: str, settings: Settings) -> Any:
    """Issue the search request and return the decoded JSON body."""
    r = httpx.get(
        settings.api_url,
        params={"q": query, "limit": 1},
        timeout=settings.timeout,
        follow_redirects=True,
    )
    r.raise_for_status()
    return r.json()


def verify_address(
    street_address: str,
    postal_code: str,
    city: str,
    settings: Settings | None = None,
) -> bool:
    settings = settings or load_settings()
    query = build_query(street_address, postal_code, city)
    try:
        payload = fetch_candidates(query, settings)
    except (httpx.HTTPError, ValueError) as e:
        # ValueError covers an unparsable JSON body
        logger.debug("lookup failed for %r: %s", query, e)
        return False

    score = score_from_response(payload)
    if score is None:
        logger.debug("no scored candidate for %r", query)
        return False
    return score >= settings.min_score
