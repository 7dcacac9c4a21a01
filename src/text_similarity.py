"""
String similarity helpers used by relevance scoring.
"""

def levenshtein_distance(a, b):
    """
    Minimum number of single-character insertions, deletions and
    substitutions needed to turn one string into the other.
    """
    # matrix[i][j] is the distance between b[:i] and a[:j]
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,  # substitution
                    matrix[i][j - 1] + 1,      # insertion
                    matrix[i - 1][j] + 1       # deletion
                )

    return matrix[len(b)][len(a)]

def similarity_ratio(a, b):
    """
    Edit-distance similarity normalised by the longer string.

    Returns:
        Float between 0 and 1; two empty strings are identical (1.0)
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return (max_len - levenshtein_distance(a, b)) / max_len

def fuzzy_match_score(text, query):
    """
    Fraction of query characters found in order within text.

    Each query character is matched greedily at its earliest occurrence
    after the previous match.

    Args:
        text: Text to search in
        query: Characters to look for

    Returns:
        Float between 0 and 1; 0.0 for an empty query
    """
    if not query:
        return 0.0

    match_count = 0
    last_index = -1
    for char in query:
        index = text.find(char, last_index + 1)
        if index != -1:
            match_count += 1
            last_index = index

    return match_count / len(query)
