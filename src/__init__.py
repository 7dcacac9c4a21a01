"""
Movie Finder - Source Package

This package contains the core functionality for the movie search app:
- movie_search: Multi-query TMDB search, merging and the UI entry point
- query_processing: Typo corrections and spelling variations
- text_similarity: Edit distance and character overlap scores
- relevance_scoring: Relevance scoring and ranking of results
- tmdb_client: TMDB search and discover requests
- search_metrics: Google Sheets search counters and trending movies
- errors: Error types shared by the modules above
- utils: Utility functions and configuration constants
"""
