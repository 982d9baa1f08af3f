from __future__ import annotations

from collections.abc import Iterator

from .models import BlackSpoonRecord, Category, Chef, Dataset, SeasonRecord, WhiteSpoonRecord


def _from_white(record: WhiteSpoonRecord, season: int) -> Chef:
    return Chef(
        id=record.id,
        name_ko=record.name_ko,
        name_en=record.name_en,
        specialty=record.specialty,
        michelin=record.michelin,
        restaurants=list(record.restaurants or []),
        rank=record.rank,
        note=record.note,
        season=season,
        category=Category.white,
    )


def _from_black(record: BlackSpoonRecord, season: int) -> Chef:
    # Black spoon contestants may compete under a nickname only
    real_name = record.real_name_ko or None
    return Chef(
        id=record.id,
        name_ko=real_name or record.nickname,
        name_en=record.nickname,
        nickname=record.nickname,
        real_name_ko=real_name,
        restaurants=[record.restaurant] if record.restaurant else [],
        rank=record.rank,
        note=record.note,
        season=season,
        category=Category.black,
    )


def _iter_season(season: SeasonRecord) -> Iterator[Chef]:
    for record in season.white_spoon:
        yield _from_white(record, season.id)
    for record in season.black_spoon:
        yield _from_black(record, season.id)


def normalize_chefs(dataset: Dataset) -> list[Chef]:
    """
    Flatten every season roster into one ordered list of uniform chefs.

    Order is seasons as listed in the dataset, white spoon before black
    spoon within a season, and roster order within each spoon. Nothing is
    skipped or deduplicated.
    """
    chefs: list[Chef] = []
    for season in dataset.seasons:
        chefs.extend(_iter_season(season))
    return chefs
