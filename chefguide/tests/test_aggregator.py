from __future__ import annotations

from chefguide.analytics.aggregator import compute_breakdown, compute_stats
from chefguide.directory.filtering import filter_chefs
from chefguide.directory.models import ChefQuery, Dataset
from chefguide.directory.normalizer import normalize_chefs


def _chefs():
    return normalize_chefs(Dataset.model_validate({
        "seasons": [
            {
                "id": 1,
                "whiteSpoon": [
                    {
                        "id": "c1",
                        "nameKo": "김치",
                        "restaurants": [{"nameKo": "김치집", "address": "Seoul Jongno"}],
                    },
                ],
                "blackSpoon": [
                    {
                        "id": "c2",
                        "nickname": "Napoleon",
                        "realNameKo": None,
                        "restaurant": {
                            "nameKo": "나폴레옹식당",
                            "address": "Seoul Gangnam",
                            "michelin": "1-star",
                        },
                    },
                ],
            },
            {
                "id": 2,
                "whiteSpoon": [
                    {
                        "id": "c3",
                        "nameKo": "별",
                        "michelin": "Bib Gourmand",
                        "restaurants": [
                            {"nameKo": "하나", "michelin": "2-star"},
                            {"nameKo": "둘", "michelin": "1-star"},
                        ],
                    },
                ],
                "blackSpoon": [{"id": "c4", "nickname": "무명", "note": "no venue"}],
            },
        ],
    }))


def test_example_scenario_counts():
    stats = compute_stats(_chefs()[:2])
    assert stats.total_chefs == 2
    assert stats.total_restaurants == 2
    assert stats.michelin_count == 1


def test_award_counted_once_per_chef():
    stats = compute_stats(_chefs())
    assert stats.total_chefs == 4
    assert stats.total_restaurants == 4
    assert stats.michelin_count == 2


def test_empty_list():
    stats = compute_stats([])
    assert stats.total_chefs == 0
    assert stats.total_restaurants == 0
    assert stats.michelin_count == 0


def test_restaurant_count_is_additive_over_categories():
    chefs = _chefs()
    whites = filter_chefs(chefs, ChefQuery(category="white"))
    blacks = filter_chefs(chefs, ChefQuery(category="black"))
    assert (
        compute_stats(whites).total_restaurants + compute_stats(blacks).total_restaurants
        == compute_stats(chefs).total_restaurants
    )


def test_breakdown_by_season_and_category():
    breakdown = compute_breakdown(_chefs())
    assert breakdown.overall.total_chefs == 4
    assert breakdown.by_season["1"].total_restaurants == 2
    assert breakdown.by_season["2"].total_restaurants == 2
    assert breakdown.by_category["white"].michelin_count == 1
    assert breakdown.by_category["black"].michelin_count == 1
    assert breakdown.by_category["black"].total_restaurants == 1


def test_chef_level_award_counts_without_awarded_restaurants():
    chefs = normalize_chefs(Dataset.model_validate({
        "seasons": [
            {
                "id": 1,
                "whiteSpoon": [
                    {
                        "id": "w1",
                        "nameKo": "가",
                        "michelin": "Bib Gourmand",
                        "restaurants": [{"nameKo": "평범한 식당"}],
                    },
                    {"id": "w2", "nameKo": "나", "michelin": "1-star"},
                    {"id": "w3", "nameKo": "다", "restaurants": [{"nameKo": "무관"}]},
                ],
            },
        ],
    }))
    assert [c.has_award for c in chefs] == [True, True, False]
    stats = compute_stats(chefs)
    assert stats.michelin_count == 2
    assert stats.total_restaurants == 2
