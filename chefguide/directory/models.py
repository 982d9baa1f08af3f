from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    white = "white"
    black = "black"


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Restaurant(_CamelModel):
    name_ko: str = Field(..., min_length=1, alias="nameKo")
    name_en: str | None = Field(default=None, alias="nameEn")
    cuisine: str = ""
    address: str = ""
    reservation: str | None = None
    michelin: str | None = None


# ── Raw dataset shapes ───────────────────────────────────────────────────


class WhiteSpoonRecord(_CamelModel):
    id: str = Field(..., min_length=1)
    name_ko: str = Field(..., min_length=1, alias="nameKo")
    name_en: str | None = Field(default=None, alias="nameEn")
    specialty: str | None = None
    michelin: str | None = None
    restaurants: list[Restaurant] | None = None
    rank: str | None = None
    note: str | None = None


class BlackSpoonRecord(_CamelModel):
    id: str = Field(..., min_length=1)
    nickname: str = Field(..., min_length=1)
    real_name_ko: str | None = Field(default=None, alias="realNameKo")
    restaurant: Restaurant | None = None
    rank: str | None = None
    note: str | None = None


class SeasonRecord(_CamelModel):
    id: int = Field(..., ge=1)
    white_spoon: list[WhiteSpoonRecord] = Field(default_factory=list, alias="whiteSpoon")
    black_spoon: list[BlackSpoonRecord] = Field(default_factory=list, alias="blackSpoon")


class Dataset(_CamelModel):
    seasons: list[SeasonRecord]


# ── Normalized chef ──────────────────────────────────────────────────────


class Chef(_CamelModel):
    id: str = Field(..., min_length=1)
    name_ko: str = Field(..., min_length=1, alias="nameKo")
    name_en: str | None = Field(default=None, alias="nameEn")
    nickname: str | None = None
    real_name_ko: str | None = Field(default=None, alias="realNameKo")
    specialty: str | None = None
    michelin: str | None = None
    restaurants: list[Restaurant] = Field(default_factory=list)
    rank: str | None = None
    note: str | None = None
    season: int
    category: Category

    @computed_field(alias="hasAward")
    @property
    def has_award(self) -> bool:
        """True when the chef or any of their restaurants carries a Michelin marker."""
        return bool(self.michelin) or any(r.michelin for r in self.restaurants)

    @computed_field(alias="displayName")
    @property
    def display_name(self) -> str:
        if self.category is Category.black and self.nickname:
            return self.nickname
        return self.name_ko

    @computed_field(alias="displaySubtitle")
    @property
    def display_subtitle(self) -> str | None:
        if self.category is Category.black and self.real_name_ko:
            return self.real_name_ko
        return self.name_en


# ── Query & responses ────────────────────────────────────────────────────


def _season_from_text(value):
    # Query strings, JSON bodies and session cookies may hand seasons over as text
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return value


SeasonFilter = Annotated[Literal["all", 1, 2], BeforeValidator(_season_from_text)]
CategoryFilter = Literal["all", "white", "black"]


class ChefQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    season: SeasonFilter = "all"
    category: CategoryFilter = "all"


class ChefQueryUpdate(BaseModel):
    text: str | None = None
    season: SeasonFilter | None = None
    category: CategoryFilter | None = None


class ToggleRequest(BaseModel):
    season: Annotated[Literal[1, 2], BeforeValidator(_season_from_text)] | None = None
    category: Literal["white", "black"] | None = None


class DirectoryStats(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_chefs: int
    total_restaurants: int
    michelin_count: int


class ChefListResponse(BaseModel):
    chefs: list[Chef]
    total: int
    query: ChefQuery
    stats: DirectoryStats


class StatsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    overall: DirectoryStats
    by_season: dict[str, DirectoryStats]
    by_category: dict[str, DirectoryStats]
