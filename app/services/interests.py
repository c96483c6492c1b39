from typing import Iterable, Optional


def clean_interests(interests: Optional[Iterable[str]]) -> list[str]:
    """Trimmed, non-empty entries in their original order and casing."""
    if not interests:
        return []
    return [i.strip() for i in interests if i and i.strip()]


def normalize_interests(interests: Optional[Iterable[str]]) -> set[str]:
    return {i.casefold() for i in clean_interests(interests)}


def interest_overlap(yours: Optional[Iterable[str]], theirs: Optional[Iterable[str]]) -> float:
    """
    Intersection over union of two interest sets, in [0, 1].

    Comparison ignores case and surrounding whitespace. Two empty sets are
    vacuously compatible (1.0); one empty set against a non-empty one is 0.0.
    """
    a = normalize_interests(yours)
    b = normalize_interests(theirs)

    union = a | b
    if not union:
        return 1.0
    return len(a & b) / len(union)
