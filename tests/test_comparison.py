"""
Tests for build_comparison / score_pair in app.services.comparison.
"""
from dataclasses import replace
from itertools import product
from types import SimpleNamespace

import pytest

from app.core.errors import InvalidInputError
from app.services.comparison import (
    DIMENSIONS,
    build_comparison,
    overall_score,
    score_categories,
    score_pair,
)

CATEGORY_ORDER = [
    "Sleep Schedule",
    "Cleanliness",
    "Social Life",
    "Guests",
    "Smoking",
    "Drinking",
    "Pets",
    "Shared Interests",
]


def by_category(comparison) -> dict:
    return {item.category: item for item in comparison.category_breakdown}


class TestEndToEndScenario:

    def test_category_scores(self, current_user, match_user, match_record):
        comparison = build_comparison(current_user, match_user, match_record)
        scores = {c: item.compatibility for c, item in by_category(comparison).items()}

        assert scores == {
            "Sleep Schedule": 100,
            "Cleanliness": 60,
            "Social Life": 60,
            "Guests": 60,
            "Smoking": 100,
            "Drinking": 60,
            "Pets": 70,
            "Shared Interests": 33,
        }

    def test_overall_is_rounded_mean(self, current_user, match_user, match_record):
        comparison = build_comparison(current_user, match_user, match_record)
        values = [item.compatibility for item in comparison.category_breakdown]

        assert comparison.overall_score == 68
        assert comparison.overall_score == int(sum(values) / len(values) + 0.5)

    def test_display_values(self, current_user, match_user, match_record):
        items = by_category(build_comparison(current_user, match_user, match_record))

        assert items["Sleep Schedule"].your_value == "Evening Person"
        assert items["Cleanliness"].your_value == "Very Clean"
        assert items["Cleanliness"].their_value == "Moderate"
        assert items["Drinking"].your_value == "No"
        assert items["Drinking"].their_value == "Yes"
        assert items["Shared Interests"].your_value == "hiking, reading"

    def test_inputs_pass_through(self, current_user, match_user, match_record):
        comparison = build_comparison(current_user, match_user, match_record)

        assert comparison.current_user is current_user
        assert comparison.match_user is match_user
        assert comparison.match is match_record


class TestBreakdownShape:

    def test_fixed_category_order(self, current_user, match_user, match_record):
        comparison = build_comparison(current_user, match_user, match_record)
        assert [item.category for item in comparison.category_breakdown] == CATEGORY_ORDER

    def test_categories_unique(self):
        categories = [d.category for d in DIMENSIONS]
        assert len(categories) == len(set(categories))

    def test_descriptions_are_static(self, profile_factory):
        a = score_categories(profile_factory(cleanliness=1), profile_factory(cleanliness=5))
        b = score_categories(profile_factory(), profile_factory())
        assert [i.description for i in a] == [i.description for i in b]

    def test_scores_are_integers_in_range(self, profile_factory):
        for yours, theirs, smoke in product([None, 1, 3, 5], [None, 2, 5], [None, True, False]):
            a = profile_factory(cleanliness=yours, social_level=theirs, smoking=smoke, interests=["x"])
            b = profile_factory(cleanliness=theirs, social_level=yours, smoking=False, interests=[])
            for item in score_categories(a, b):
                assert isinstance(item.compatibility, int)
                assert 0 <= item.compatibility <= 100


class TestProperties:

    def test_identity(self, current_user, match_record):
        twin = SimpleNamespace(**vars(current_user))
        comparison = build_comparison(current_user, twin, match_record)

        assert all(item.compatibility == 100 for item in comparison.category_breakdown)
        assert comparison.overall_score == 100

    def test_symmetry(self, current_user, match_user, match_record):
        forward = build_comparison(current_user, match_user, match_record)
        backward = build_comparison(match_user, current_user, match_record)

        for a, b in zip(forward.category_breakdown, backward.category_breakdown):
            assert a.compatibility == b.compatibility
            assert a.your_value == b.their_value
        assert forward.overall_score == backward.overall_score

    def test_deterministic(self, current_user, match_user, match_record):
        first = build_comparison(current_user, match_user, match_record)
        second = build_comparison(current_user, match_user, match_record)
        assert first == second

    def test_missing_answers_do_not_raise(self, profile_factory, match_record):
        empty = profile_factory(
            cleanliness=None, social_level=None, sleep_schedule=None, guest_frequency=None,
            smoking=None, drinking=None, pets=None, interests=None,
        )
        comparison = build_comparison(empty, profile_factory(), match_record)
        items = by_category(comparison)

        assert items["Cleanliness"].your_value == "Not set"
        assert items["Cleanliness"].compatibility == 100
        assert items["Smoking"].compatibility == 70
        assert items["Pets"].compatibility == 85
        assert items["Shared Interests"].compatibility == 100


class TestMalformedInput:

    def test_missing_attribute_raises(self, profile_factory, match_record):
        broken = profile_factory()
        del broken.sleep_schedule

        with pytest.raises(InvalidInputError) as exc:
            build_comparison(broken, profile_factory(), match_record)
        assert exc.value.field == "sleep_schedule"

    def test_out_of_range_raises(self, profile_factory, match_record):
        with pytest.raises(InvalidInputError):
            build_comparison(profile_factory(guest_frequency=9), profile_factory(), match_record)


class TestWeights:

    def test_equal_weights_are_the_mean(self, current_user, match_user):
        breakdown = score_categories(current_user, match_user)
        assert overall_score(breakdown) == 68

    def test_weights_are_table_data(self, current_user, match_user):
        heavy_sleep = tuple(
            replace(d, weight=9.0) if d.key == "sleep_schedule" else d
            for d in DIMENSIONS
        )
        breakdown = score_categories(current_user, match_user, heavy_sleep)

        # (100 * 9 + 443) / 16 = 83.9
        assert overall_score(breakdown, heavy_sleep) == 84

    def test_zero_total_weight_rejected(self, current_user, match_user):
        weightless = tuple(replace(d, weight=0.0) for d in DIMENSIONS)
        breakdown = score_categories(current_user, match_user, weightless)
        with pytest.raises(ValueError):
            overall_score(breakdown, weightless)


def test_score_pair(current_user, match_user):
    score, category_scores = score_pair(current_user, match_user)

    assert score == 68
    assert list(category_scores) == [d.key for d in DIMENSIONS]
    assert category_scores["cleanliness"] == 60
    assert category_scores["interests"] == 33
