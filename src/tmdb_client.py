"""
Thin TMDB REST client for movie search and popular-movie discovery.
"""

import requests
from loguru import logger

from errors import TransportError, EmptyResponseError
from utils import TMDB_API_BASE_URL, REQUEST_TIMEOUT

def _get_movies(endpoint, params, api_key):
    """
    GET a TMDB list endpoint and extract its results.

    Args:
        endpoint: Path below the API base URL, e.g. '/search/movie'
        params: Query parameters (without the API key)
        api_key: TMDB API key

    Returns:
        Dict with 'ok', 'items' and 'status_code'. A non-success status
        gives ok=False and no items.

    Raises:
        TransportError: the request could not be completed
        EmptyResponseError: success status but no results list in the body
    """
    url = f"{TMDB_API_BASE_URL}{endpoint}"
    try:
        response = requests.get(url, params={"api_key": api_key, **params}, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise TransportError(f"GET {endpoint} failed: {e}") from e

    if not response.ok:
        logger.debug(f"[TMDB] GET {endpoint} {params} -> {response.status_code}")
        return {"ok": False, "items": [], "status_code": response.status_code}

    try:
        data = response.json()
    except ValueError as e:
        raise EmptyResponseError(f"GET {endpoint} returned a non-JSON body") from e

    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list):
        raise EmptyResponseError(f"GET {endpoint} returned no results list")

    return {"ok": True, "items": results, "status_code": response.status_code}

def search_movies(query, api_key):
    """Search TMDB movies by title query."""
    return _get_movies("/search/movie", {"query": query}, api_key)

def discover_popular_movies(api_key):
    """Fetch the first page of movies sorted by popularity."""
    return _get_movies("/discover/movie", {"sort_by": "popularity.desc"}, api_key)
