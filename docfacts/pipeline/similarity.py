"""Jaro-Winkler string similarity."""

from rapidfuzz.distance import JaroWinkler

# Standard Winkler parameterization; the common-prefix bonus is capped at 4 chars
DEFAULT_PREFIX_WEIGHT = 0.1


def jaro_winkler_similarity(a: str, b: str, prefix_weight: float = DEFAULT_PREFIX_WEIGHT) -> float:
    """Return Jaro-Winkler similarity between two strings.

    Args:
        a: First string
        b: Second string
        prefix_weight: Winkler prefix scale (0.0-0.25)

    Returns:
        Similarity in [0.0, 1.0]; 1.0 for identical strings (including two
        empty strings), 0.0 when exactly one string is empty or no characters match
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    score = JaroWinkler.similarity(a, b, prefix_weight=prefix_weight)
    return min(1.0, max(0.0, float(score)))
