"""
Utility functions and constants for the movie search app.
"""

import os
import streamlit as st

from errors import ConfigurationError

# TMDB endpoints
TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

# Search pipeline limits
MAX_RESULTS = 20
MAX_VARIATION_QUERIES = 3
PREFIX_QUERY_LENGTH = 3
MAX_FETCH_WORKERS = 8
REQUEST_TIMEOUT = 10

# Search metrics (Google Sheets)
SEARCH_METRICS_SHEET = "movie_search_metrics"
TRENDING_LIMIT = 5

# Additive relevance score components
RELEVANCE_WEIGHTS = {
    "exact_title": 100,
    "title_contains": 80,
    "title_prefix": 70,
    "overview_contains": 30,
    "word_similarity": 60,
    "word_similarity_threshold": 0.6,
    "title_similarity": 40,
    "title_similarity_threshold": 0.5,
    "fuzzy_overlap": 20,
    "vote_average": 1,
    "vote_count_per": 1000,
    "vote_count_cap": 5
}

def get_tmdb_api_key():
    """
    Get the TMDB API key from Streamlit secrets, falling back to the environment.

    Returns:
        API key string

    Raises:
        ConfigurationError: if the key is not configured anywhere
    """
    try:
        api_key = st.secrets["TMDB_API_KEY"]
    except (KeyError, FileNotFoundError):
        api_key = os.environ.get("TMDB_API_KEY")

    if not api_key:
        raise ConfigurationError("TMDB_API_KEY is not set in Streamlit secrets or the environment")
    return api_key

def get_poster_url(movie):
    """Full poster URL for a TMDB movie dict, or None when it has no poster."""
    poster_path = movie.get("poster_path") if movie else None
    if not poster_path:
        return None
    return f"{TMDB_IMAGE_BASE_URL}{poster_path}"

def get_release_year(movie):
    """Release year as a string, or 'N/A'."""
    release_date = movie.get("release_date") or ""
    return release_date.split("-")[0] if release_date else "N/A"

def format_rating(vote_average):
    """Rating to one decimal place, or 'N/A' for unrated movies."""
    return f"{vote_average:.1f}" if vote_average else "N/A"
