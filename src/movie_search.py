"""
Movie search with fuzzy matching and typo tolerance.

A query is corrected, expanded into several TMDB searches that run
concurrently, and the merged results are ranked against what the user
actually typed.
"""

import concurrent.futures
from loguru import logger

from errors import TransportError, EmptyResponseError, SearchFailure
from query_processing import preprocess_search_term, generate_search_variations
from relevance_scoring import rank_movies
from tmdb_client import search_movies, discover_popular_movies
from search_metrics import record_search
from utils import (
    MAX_RESULTS, MAX_VARIATION_QUERIES, PREFIX_QUERY_LENGTH, MAX_FETCH_WORKERS,
    get_tmdb_api_key
)

# Single background worker so counter writes never hold up a search
counter_executor = concurrent.futures.ThreadPoolExecutor(max_workers=1, thread_name_prefix="search-counter")

def build_search_queries(processed_query):
    """
    Build the batch of TMDB search queries for one user query.

    The batch holds, in order: the processed query, up to
    MAX_VARIATION_QUERIES spelling variations, each word of a multi-word
    query, and a short prefix for very broad matches.

    Args:
        processed_query: Query after preprocess_search_term

    Returns:
        List of query strings
    """
    variations = generate_search_variations(processed_query)

    queries = [processed_query]
    queries.extend(variations[1:1 + MAX_VARIATION_QUERIES])
    if " " in processed_query:
        queries.extend(processed_query.split())
    queries.append(processed_query[:PREFIX_QUERY_LENGTH])
    return queries

def _fetch_query(query, api_key, search=search_movies):
    """Run one sub-search; failures give an empty list instead of raising."""
    try:
        response = search(query, api_key)
    except TransportError as e:
        logger.warning(f"[Search] Dropping '{query}': {e}")
        return []
    except EmptyResponseError as e:
        logger.warning(f"[Search] No results parsed for '{query}': {e}")
        return []

    if not response["ok"]:
        logger.warning(f"[Search] Dropping '{query}': status {response.get('status_code')}")
        return []
    return response["items"]

def fetch_all_queries(queries, api_key, search=search_movies, max_workers=MAX_FETCH_WORKERS):
    """
    Run all sub-searches concurrently and wait for every one to settle.

    Args:
        queries: Query strings to search for
        api_key: TMDB API key
        search: Catalog search function, see tmdb_client.search_movies
        max_workers: Thread pool size

    Returns:
        List of result lists, one per query and in the same order
    """
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_fetch_query, q, api_key, search) for q in queries]

    results = []
    for query, future in zip(queries, futures):
        try:
            results.append(future.result())
        except Exception as e:
            logger.warning(f"[Search] Unexpected failure for '{query}': {e}")
            results.append([])
    return results

def merge_results(result_lists):
    """
    Concatenate result lists and drop repeated movies.

    The first occurrence of each TMDB id wins and keeps its position.
    """
    seen_ids = set()
    unique_results = []
    for results in result_lists:
        for movie in results:
            movie_id = movie.get("id")
            if movie_id in seen_ids:
                continue
            seen_ids.add(movie_id)
            unique_results.append(movie)
    return unique_results

def fetch_popular_movies(api_key, discover=discover_popular_movies):
    """
    Popular movies shown when there is no query, in TMDB's order.

    Raises:
        SearchFailure: the request failed or returned an error status
    """
    try:
        response = discover(api_key)
    except TransportError as e:
        logger.error(f"[Search] Popular movies request failed: {e}")
        raise SearchFailure("Failed to fetch movies") from e
    except EmptyResponseError as e:
        logger.warning(f"[Search] Popular movies response had no results: {e}")
        return []

    if not response["ok"]:
        logger.error(f"[Search] Popular movies request returned status {response.get('status_code')}")
        raise SearchFailure("Failed to fetch movies")
    return response["items"]

def _report_top_result(query, movie, record):
    """Best-effort search counter update; never raises."""
    try:
        record(query, movie)
    except Exception as e:
        logger.warning(f"[Search] Could not record search '{query}': {e}")

def fuzzy_search_movies(query, api_key, search=search_movies, record=record_search,
                        max_results=MAX_RESULTS):
    """
    Perform fuzzy search for movies with typo tolerance.

    Args:
        query: Non-empty query as typed by the user
        api_key: TMDB API key
        search: Catalog search function
        record: Search counter callback taking (query, top_movie)
        max_results: Maximum number of movies to return

    Returns:
        Ranked list of movie dicts with 'relevance_score'. Empty when
        nothing matched or every sub-search failed. The top result is
        recorded on counter_executor without waiting for it.
    """
    processed_query = preprocess_search_term(query)
    queries = build_search_queries(processed_query)
    logger.info(f"[Search] '{query}' -> {len(queries)} TMDB searches for '{processed_query}'")

    unique_results = merge_results(fetch_all_queries(queries, api_key, search))

    # Score against the original query, not the corrected one
    ranked = rank_movies(unique_results, query, max_results)

    if ranked:
        counter_executor.submit(_report_top_result, query, ranked[0], record)
    return ranked

def run_search(query="", api_key=None, search=search_movies, discover=discover_popular_movies,
               record=record_search):
    """
    Entry point for the UI: popular movies for an empty query, ranked
    fuzzy results otherwise.

    Args:
        query: Query as typed by the user
        api_key: TMDB API key; read from secrets when omitted
        search: Catalog search function
        discover: Popular-movies function
        record: Search counter callback

    Returns:
        List of movie dicts

    Raises:
        SearchFailure: only when the popular-movies request for an empty
            query fails
        ConfigurationError: no TMDB API key is configured
    """
    if api_key is None:
        api_key = get_tmdb_api_key()

    if not query:
        return fetch_popular_movies(api_key, discover)
    return fuzzy_search_movies(query, api_key, search, record)
