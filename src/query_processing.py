"""
Query preprocessing: typo correction and spelling variations for search fan-out.
"""

from types import MappingProxyType

# Common misspellings and aliases mapped to the title TMDB knows
SEARCH_CORRECTIONS = MappingProxyType({
    "spiderman": "spider-man",
    "xmen": "x-men",
    "batman": "batman",
    "superman": "superman",
    "ironman": "iron man",
    "kerete": "karate",
    "kerate": "karate",
    "karete": "karate",
    "dimon": "demon",
    "deamon": "demon",
    "daemon": "demon",
})

# Phonetically or visually similar spellings
CHARACTER_SUBSTITUTIONS = MappingProxyType({
    "i": ("e", "a"),
    "e": ("i", "a"),
    "a": ("e", "i"),
    "o": ("u", "a"),
    "u": ("o", "i"),
    "y": ("i", "e"),
    "c": ("k", "s"),
    "k": ("c", "ck"),
    "s": ("c", "z"),
    "z": ("s",),
    "ph": ("f",),
    "f": ("ph",),
    "tion": ("sion",),
    "sion": ("tion",),
})

def preprocess_search_term(term):
    """
    Map a known misspelling or alias to its canonical search term.

    The lookup is case-insensitive and ignores surrounding whitespace, but
    an unmatched term is returned exactly as typed.

    Args:
        term: Raw query typed by the user

    Returns:
        Corrected search term, or the original term
    """
    return SEARCH_CORRECTIONS.get(term.lower().strip(), term)

def generate_search_variations(term):
    """
    Generate spelling variations of a search term.

    Each variation replaces a single occurrence of one table entry in the
    lowercased term. Order of first appearance is kept and nothing is
    capped here; callers slice what they need.

    Args:
        term: Search term (usually already preprocessed)

    Returns:
        List of variations, starting with the term itself
    """
    variations = [term]
    lower_term = term.lower()

    # Every table entry starting at position i applies, single letters and
    # longer patterns (ph, tion, sion) alike
    for i in range(len(lower_term)):
        for pattern, substitutes in CHARACTER_SUBSTITUTIONS.items():
            if not lower_term.startswith(pattern, i):
                continue
            for substitute in substitutes:
                variation = lower_term[:i] + substitute + lower_term[i + len(pattern):]
                if variation != lower_term and variation not in variations:
                    variations.append(variation)

    return variations
