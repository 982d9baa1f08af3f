from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .models import ChefQuery

SESSION_KEY = "chef_filters"


def get_session_query(session: MutableMapping[str, Any]) -> ChefQuery:
    """Return the filter triple stored in ``session``, or the all-pass query."""
    raw = session.get(SESSION_KEY)
    if not raw:
        return ChefQuery()
    return ChefQuery.model_validate(raw)


def set_session_query(session: MutableMapping[str, Any], query: ChefQuery) -> ChefQuery:
    """Replace the whole filter triple in one write."""
    session[SESSION_KEY] = query.model_dump()
    return query


def update_session_query(
    session: MutableMapping[str, Any],
    text: str | None = None,
    season: Any = None,
    category: str | None = None,
) -> ChefQuery:
    """Change the given fields and store the resulting triple. ``None`` leaves a field as is."""
    changes: dict[str, Any] = {}
    if text is not None:
        changes["text"] = text
    if season is not None:
        changes["season"] = season
    if category is not None:
        changes["category"] = category

    current = get_session_query(session)
    updated = ChefQuery.model_validate({**current.model_dump(), **changes})
    return set_session_query(session, updated)


def reset_session_query(session: MutableMapping[str, Any]) -> ChefQuery:
    session.pop(SESSION_KEY, None)
    return ChefQuery()


def toggle_season(query: ChefQuery, season: int) -> ChefQuery:
    """Select ``season``, or go back to all seasons if it is already selected."""
    return query.model_copy(update={"season": "all" if query.season == season else season})


def toggle_category(query: ChefQuery, category: str) -> ChefQuery:
    """Select ``category``, or go back to both spoons if it is already selected."""
    return query.model_copy(
        update={"category": "all" if query.category == category else category}
    )
