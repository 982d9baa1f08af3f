from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from ..directory.models import Chef, DirectoryStats, StatsResponse


def compute_stats(chefs: Iterable[Chef]) -> DirectoryStats:
    total_chefs = 0
    total_restaurants = 0
    michelin_count = 0
    for chef in chefs:
        total_chefs += 1
        total_restaurants += len(chef.restaurants)
        if chef.has_award:
            michelin_count += 1

    return DirectoryStats(
        total_chefs=total_chefs,
        total_restaurants=total_restaurants,
        michelin_count=michelin_count,
    )


def compute_breakdown(chefs: list[Chef]) -> StatsResponse:
    """Overall counts plus the same counts per season and per spoon category."""
    by_season: dict[str, list[Chef]] = defaultdict(list)
    by_category: dict[str, list[Chef]] = defaultdict(list)
    for chef in chefs:
        by_season[str(chef.season)].append(chef)
        by_category[chef.category.value].append(chef)

    return StatsResponse(
        overall=compute_stats(chefs),
        by_season={k: compute_stats(v) for k, v in by_season.items()},
        by_category={k: compute_stats(v) for k, v in by_category.items()},
    )
