from __future__ import annotations

import os

from fastapi import FastAPI, HTTPException, Request
from pydantic import ValidationError
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_breakdown, compute_stats
from .directory.data_store import get_chef, get_chefs, get_dataset, get_restaurant_frame
from .directory.filtering import filter_chefs
from .directory.models import (
    Chef,
    ChefListResponse,
    ChefQuery,
    ChefQueryUpdate,
    StatsResponse,
    ToggleRequest,
)
from .directory.session import (
    get_session_query,
    reset_session_query,
    set_session_query,
    toggle_category,
    toggle_season,
    update_session_query,
)

app = FastAPI(title="Culinary Class War Restaurant Guide", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "chefguide-secret-change-in-production"),
)


def _list_response(query: ChefQuery) -> ChefListResponse:
    chefs = get_chefs()
    matched = filter_chefs(chefs, query)
    return ChefListResponse(
        chefs=matched,
        total=len(matched),
        query=query,
        stats=compute_stats(chefs),
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    df = get_restaurant_frame()
    cuisines = sorted(c for c in df["cuisine"].dropna().unique().tolist() if c)
    ranks = sorted({chef.rank for chef in get_chefs() if chef.rank})
    return {
        "seasons": [season.id for season in get_dataset().seasons],
        "categories": ["white", "black"],
        "cuisines": cuisines,
        "ranks": ranks,
    }


@app.get("/chefs", response_model=ChefListResponse)
def list_chefs(q: str = "", season: str = "all", category: str = "all") -> ChefListResponse:
    try:
        query = ChefQuery(text=q, season=season, category=category)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False))
    return _list_response(query)


@app.get("/chefs/{chef_id}", response_model=Chef)
def chef_detail(chef_id: str) -> Chef:
    chef = get_chef(chef_id)
    if chef is None:
        raise HTTPException(status_code=404, detail="Chef not found")
    return chef


@app.get("/stats", response_model=StatsResponse)
def stats() -> StatsResponse:
    return compute_breakdown(get_chefs())


# ── Session filter state ─────────────────────────────────────────────────


@app.get("/session/filters", response_model=ChefQuery)
def session_filters(request: Request) -> ChefQuery:
    return get_session_query(request.session)


@app.put("/session/filters", response_model=ChefQuery)
def replace_session_filters(body: ChefQuery, request: Request) -> ChefQuery:
    return set_session_query(request.session, body)


@app.patch("/session/filters", response_model=ChefQuery)
def update_session_filters(body: ChefQueryUpdate, request: Request) -> ChefQuery:
    return update_session_query(
        request.session,
        text=body.text,
        season=body.season,
        category=body.category,
    )


@app.post("/session/filters/toggle", response_model=ChefQuery)
def toggle_session_filters(body: ToggleRequest, request: Request) -> ChefQuery:
    query = get_session_query(request.session)
    if body.season is not None:
        query = toggle_season(query, body.season)
    if body.category is not None:
        query = toggle_category(query, body.category)
    return set_session_query(request.session, query)


@app.delete("/session/filters", response_model=ChefQuery)
def clear_session_filters(request: Request) -> ChefQuery:
    return reset_session_query(request.session)


@app.get("/session/chefs", response_model=ChefListResponse)
def session_chefs(request: Request) -> ChefListResponse:
    return _list_response(get_session_query(request.session))
