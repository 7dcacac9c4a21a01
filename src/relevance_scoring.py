"""
Relevance scoring and ranking of TMDB search results.
"""

from text_similarity import similarity_ratio, fuzzy_match_score
from utils import RELEVANCE_WEIGHTS, MAX_RESULTS

def best_word_match_score(title_words, query_words, weights=RELEVANCE_WEIGHTS):
    """
    Best weighted similarity over all (title word, query word) pairs.

    Only pairs above the similarity threshold count. Empty tokens left by
    repeated spaces are not words and are skipped.
    """
    best = 0
    for title_word in title_words:
        if not title_word:
            continue
        for query_word in query_words:
            if not query_word:
                continue
            similarity = similarity_ratio(title_word, query_word)
            if similarity > weights["word_similarity_threshold"]:
                best = max(best, similarity * weights["word_similarity"])
    return best

def calculate_relevance_score(movie, query, weights=RELEVANCE_WEIGHTS):
    """
    Score how well a movie matches the query the user actually typed.

    All components are additive and independent: an exact title match also
    earns the contains and prefix bonuses. Popularity (rating and vote
    count) is added on top, so it can separate otherwise equal matches.

    Args:
        movie: TMDB movie dict (title, overview, vote_average, vote_count)
        query: Original, unnormalized query
        weights: Score weights, see RELEVANCE_WEIGHTS

    Returns:
        Float relevance score, never negative
    """
    query_lower = query.lower()
    title_lower = (movie.get("title") or "").lower()
    overview_lower = (movie.get("overview") or "").lower()

    score = 0

    if title_lower == query_lower:
        score += weights["exact_title"]
    if query_lower in title_lower:
        score += weights["title_contains"]
    if title_lower.startswith(query_lower):
        score += weights["title_prefix"]
    if query_lower in overview_lower:
        score += weights["overview_contains"]

    # Typo tolerance, word by word and over the whole title
    score += best_word_match_score(title_lower.split(" "), query_lower.split(" "), weights)

    title_similarity = similarity_ratio(title_lower, query_lower)
    if title_similarity > weights["title_similarity_threshold"]:
        score += title_similarity * weights["title_similarity"]

    score += fuzzy_match_score(title_lower, query_lower) * weights["fuzzy_overlap"]

    # Popularity boost
    score += (movie.get("vote_average") or 0) * weights["vote_average"]
    score += min((movie.get("vote_count") or 0) / weights["vote_count_per"], weights["vote_count_cap"])

    return score

def rank_movies(movies, query, max_results=MAX_RESULTS):
    """
    Attach relevance scores and return the best matches first.

    Args:
        movies: Deduplicated TMDB movie dicts
        query: Original, unnormalized query
        max_results: Maximum number of movies to return

    Returns:
        List of movie dict copies with a 'relevance_score' key, sorted by
        score descending (ties keep their incoming order)
    """
    scored = [
        {**movie, "relevance_score": calculate_relevance_score(movie, query)}
        for movie in movies
    ]
    scored.sort(key=lambda m: m["relevance_score"], reverse=True)
    return scored[:max_results]
