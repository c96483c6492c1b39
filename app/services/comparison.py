"""
Comparison builder.

Runs every category scorer over two profiles in the order of the DIMENSIONS
table and aggregates the results. It does not fetch profiles or matches;
callers resolve both and reject missing ones before calling in.
"""

from dataclasses import dataclass
from typing import Any

from app.core.errors import InvalidInputError
from app.core.logging import get_logger
from app.services.compatibility import (
    CLEANLINESS_LABELS,
    GUEST_LABELS,
    SLEEP_LABELS,
    SOCIAL_LABELS,
    Scorer,
    categorical_scorer,
    interests_scorer,
    ordinal_scorer,
    round_half_up,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Dimension:
    key: str
    category: str
    scorer: Scorer
    weight: float = 1.0


# Tuple order is display order.
DIMENSIONS: tuple[Dimension, ...] = (
    Dimension(
        "sleep_schedule", "Sleep Schedule",
        ordinal_scorer("sleep_schedule", SLEEP_LABELS, "When you typically sleep and wake up"),
    ),
    Dimension(
        "cleanliness", "Cleanliness",
        ordinal_scorer("cleanliness", CLEANLINESS_LABELS, "How tidy you keep shared spaces"),
    ),
    Dimension(
        "social_level", "Social Life",
        ordinal_scorer("social_level", SOCIAL_LABELS, "How often you like to socialize at home"),
    ),
    Dimension(
        "guest_frequency", "Guests",
        ordinal_scorer("guest_frequency", GUEST_LABELS, "How often you have guests over"),
    ),
    Dimension(
        "smoking", "Smoking",
        categorical_scorer("smoking", 40, "Whether you smoke"),
    ),
    Dimension(
        "drinking", "Drinking",
        categorical_scorer("drinking", 60, "Whether you drink"),
    ),
    Dimension(
        "pets", "Pets",
        categorical_scorer("pets", 70, "Whether you have or want pets"),
    ),
    Dimension(
        "interests", "Shared Interests",
        interests_scorer("interests", "Hobbies and activities you both enjoy"),
    ),
)


@dataclass(frozen=True)
class CategoryBreakdown:
    category: str
    your_value: str
    their_value: str
    compatibility: int
    description: str


@dataclass(frozen=True)
class ComparisonData:
    current_user: Any
    match_user: Any
    match: Any
    category_breakdown: list[CategoryBreakdown]
    overall_score: int


_MISSING = object()


def _read(profile, field: str):
    value = getattr(profile, field, _MISSING)
    if value is _MISSING:
        raise InvalidInputError(field, "field is missing from the profile")
    return value


def score_categories(current_user, match_user, dimensions=DIMENSIONS) -> list[CategoryBreakdown]:
    breakdown = []
    for dimension in dimensions:
        result = dimension.scorer(_read(current_user, dimension.key), _read(match_user, dimension.key))
        breakdown.append(CategoryBreakdown(
            category=dimension.category,
            your_value=result.your_value,
            their_value=result.their_value,
            compatibility=result.compatibility,
            description=result.description,
        ))
    return breakdown


def overall_score(breakdown: list[CategoryBreakdown], dimensions=DIMENSIONS) -> int:
    """Weighted mean of the category compatibilities, rounded half up."""
    weights = {d.category: d.weight for d in dimensions}
    total_weight = sum(weights[b.category] for b in breakdown)
    if total_weight <= 0:
        raise ValueError("dimension weights must sum to a positive number")

    weighted = sum(b.compatibility * weights[b.category] for b in breakdown)
    return round_half_up(weighted / total_weight)


def build_comparison(current_user, match_user, match) -> ComparisonData:
    breakdown = score_categories(current_user, match_user)
    score = overall_score(breakdown)

    logger.debug(
        "comparison_built",
        current_user=str(getattr(current_user, "id", None)),
        match_user=str(getattr(match_user, "id", None)),
        overall_score=score,
    )

    return ComparisonData(
        current_user=current_user,
        match_user=match_user,
        match=match,
        category_breakdown=breakdown,
        overall_score=score,
    )


def score_pair(profile_a, profile_b) -> tuple[int, dict[str, int]]:
    """Overall score and {dimension key: compatibility} for persisting on a Match."""
    breakdown = score_categories(profile_a, profile_b)
    category_scores = {
        dimension.key: item.compatibility
        for dimension, item in zip(DIMENSIONS, breakdown)
    }
    return overall_score(breakdown), category_scores
