"""
String similarity for translation memory.

Similarity rules, applied to lowercased, trimmed strings:
1. Exact match -> 1.0
2. Containment (either contains the other) -> shorter/longer * 0.95
3. Otherwise -> 1 - edit_distance / max_length, clamped to [0, 1]
"""

from rapidfuzz.distance import Levenshtein

CONTAINMENT_PENALTY = 0.95


def normalize(text: str) -> str:
    return text.lower().strip()


def edit_distance(a: str, b: str) -> int:
    """Classic Levenshtein distance (unit insert/delete/substitute costs)."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Similarity between two strings in [0, 1].

    >>> similarity("Hello", "hello ")
    1.0
    >>> round(similarity("kitten", "sitting"), 4)
    0.5714
    """
    left = normalize(a)
    right = normalize(b)

    if left == right:
        return 1.0

    longer = max(len(left), len(right))
    shorter = min(len(left), len(right))

    if left in right or right in left:
        return shorter / longer * CONTAINMENT_PENALTY

    distance = edit_distance(left, right)
    return max(0.0, min(1.0, 1.0 - distance / longer))
