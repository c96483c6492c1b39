"""
Per-category compatibility scorers.

Every scorer takes the two raw survey values for one dimension and returns a
CategoryScore. Scorers are symmetric in their two arguments and never raise on
a missing (None) answer; they raise InvalidInputError on values of the wrong
type or out of range.

Fallbacks for missing answers:
- ordinal answers are read as the scale midpoint (3);
- categorical answers are neutral: two missing answers agree, and one missing
  answer scores halfway between agreement and the category's mismatch score.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from app.core.errors import InvalidInputError
from app.services.interests import clean_interests, interest_overlap

SCALE_MIN = 1
SCALE_MAX = 5
SCALE_MIDPOINT = 3

# 100 at distance 0 down to a floor of 20 at distance 4
ORDINAL_STEP = 20

MAX_SCORE = 100

NOT_SET = "Not set"
NONE_LISTED = "None listed"

SLEEP_LABELS = ("Early Bird", "Morning Person", "Flexible", "Evening Person", "Night Owl")
CLEANLINESS_LABELS = ("Relaxed", "Casual", "Moderate", "Tidy", "Very Clean")
SOCIAL_LABELS = ("Homebody", "Occasional", "Balanced", "Social", "Very Social")
GUEST_LABELS = ("Never", "Rarely", "Sometimes", "Often", "Very Often")


@dataclass(frozen=True)
class CategoryScore:
    your_value: str
    their_value: str
    compatibility: int
    description: str


Scorer = Callable[[Any, Any], CategoryScore]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _check_ordinal(field: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(field, f"expected an integer answer, got {value!r}")
    if not SCALE_MIN <= value <= SCALE_MAX:
        raise InvalidInputError(field, f"answer {value} is outside {SCALE_MIN}-{SCALE_MAX}")
    return value


def _check_categorical(field: str, value: Any) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    raise InvalidInputError(field, f"expected a yes/no answer, got {value!r}")


def _check_interests(field: str, value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        raise InvalidInputError(field, "expected a list of interests")
    for item in value:
        if not isinstance(item, str):
            raise InvalidInputError(field, f"interest {item!r} is not text")
    return list(value)


def ordinal_compatibility(yours: Optional[int], theirs: Optional[int]) -> int:
    yours = SCALE_MIDPOINT if yours is None else yours
    theirs = SCALE_MIDPOINT if theirs is None else theirs
    return MAX_SCORE - ORDINAL_STEP * abs(yours - theirs)


def categorical_compatibility(yours: Optional[bool], theirs: Optional[bool], mismatch_score: int) -> int:
    if yours is None and theirs is None:
        return MAX_SCORE
    if yours is None or theirs is None:
        return round_half_up((MAX_SCORE + mismatch_score) / 2)
    return MAX_SCORE if yours == theirs else mismatch_score


def interests_compatibility(yours: Sequence[str], theirs: Sequence[str]) -> int:
    return round_half_up(interest_overlap(yours, theirs) * MAX_SCORE)


def ordinal_scorer(field: str, labels: Sequence[str], description: str) -> Scorer:
    def label(value: Optional[int]) -> str:
        return NOT_SET if value is None else labels[value - SCALE_MIN]

    def score(yours: Any, theirs: Any) -> CategoryScore:
        yours = _check_ordinal(field, yours)
        theirs = _check_ordinal(field, theirs)
        return CategoryScore(
            your_value=label(yours),
            their_value=label(theirs),
            compatibility=ordinal_compatibility(yours, theirs),
            description=description,
        )

    return score


def categorical_scorer(field: str, mismatch_score: int, description: str) -> Scorer:
    def label(value: Optional[bool]) -> str:
        if value is None:
            return NOT_SET
        return "Yes" if value else "No"

    def score(yours: Any, theirs: Any) -> CategoryScore:
        yours = _check_categorical(field, yours)
        theirs = _check_categorical(field, theirs)
        return CategoryScore(
            your_value=label(yours),
            their_value=label(theirs),
            compatibility=categorical_compatibility(yours, theirs, mismatch_score),
            description=description,
        )

    return score


def interests_scorer(field: str, description: str, shown: int = 3) -> Scorer:
    def label(interests: list[str]) -> str:
        return ", ".join(clean_interests(interests)[:shown]) or NONE_LISTED

    def score(yours: Any, theirs: Any) -> CategoryScore:
        yours = _check_interests(field, yours)
        theirs = _check_interests(field, theirs)
        return CategoryScore(
            your_value=label(yours),
            their_value=label(theirs),
            compatibility=interests_compatibility(yours, theirs),
            description=description,
        )

    return score
