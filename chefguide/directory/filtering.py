from __future__ import annotations

from collections.abc import Iterable

from .models import Chef, ChefQuery


def _contains(value: str | None, needle: str) -> bool:
    return bool(value) and needle in value.lower()


def _matches_text(chef: Chef, needle: str) -> bool:
    if (
        _contains(chef.name_ko, needle)
        or _contains(chef.name_en, needle)
        or _contains(chef.nickname, needle)
    ):
        return True
    return any(
        _contains(r.name_ko, needle) or _contains(r.name_en, needle)
        for r in chef.restaurants
    )


def matches_query(chef: Chef, query: ChefQuery) -> bool:
    """Return True when ``chef`` passes every active filter in ``query``."""
    if query.season != "all" and chef.season != query.season:
        return False

    if query.category != "all" and chef.category.value != query.category:
        return False

    needle = query.text.lower()
    if needle.strip() and not _matches_text(chef, needle):
        return False

    return True


def filter_chefs(chefs: Iterable[Chef], query: ChefQuery) -> list[Chef]:
    """Return the chefs matching ``query``, keeping their original order."""
    return [chef for chef in chefs if matches_query(chef, query)]
