"""
Custom errors for the movie search pipeline.
Raised by the TMDB client and the search metrics store, handled by the orchestrator.
"""

class MovieSearchError(Exception):
    """Base error for the movie search pipeline."""
    pass


class ConfigurationError(MovieSearchError):
    """A required secret (e.g. the TMDB API key) is missing."""
    pass


# ---------------- Catalog (TMDB) ----------------

class TransportError(MovieSearchError):
    """A request could not be sent or no response was received."""
    pass


class EmptyResponseError(MovieSearchError):
    """Success status, but the body had no usable results list."""
    pass


class SearchFailure(MovieSearchError):
    """The popular-movies request behind an empty query failed."""
    pass


# ---------------- Search metrics ----------------

class CounterRecordError(MovieSearchError):
    """Recording a search to the metrics sheet failed."""
    pass
