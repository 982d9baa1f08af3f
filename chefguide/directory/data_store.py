from __future__ import annotations

import json
import logging

import pandas as pd

from .config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig
from .models import Chef, Dataset
from .normalizer import normalize_chefs

logger = logging.getLogger(__name__)

RESTAURANT_COLUMNS: list[str] = [
    "chef_id",
    "chef_name",
    "season",
    "category",
    "rank",
    "name_ko",
    "name_en",
    "cuisine",
    "address",
    "reservation",
    "michelin",
]

_dataset: Dataset | None = None
_chefs: list[Chef] | None = None
_chefs_by_id: dict[str, Chef] = {}
_restaurants_df: pd.DataFrame | None = None


def load_dataset(config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG) -> Dataset:
    """Read and parse the season dataset. Malformed documents raise ``ValidationError``."""
    with open(config.dataset_path, encoding=config.encoding) as fh:
        raw = json.load(fh)
    return Dataset.model_validate(raw)


def build_restaurant_frame(chefs: list[Chef]) -> pd.DataFrame:
    """One row per (chef, restaurant) pair, in chef order."""
    rows: list[dict] = []
    for chef in chefs:
        for r in chef.restaurants:
            rows.append({
                "chef_id": chef.id,
                "chef_name": chef.display_name,
                "season": chef.season,
                "category": chef.category.value,
                "rank": chef.rank,
                "name_ko": r.name_ko,
                "name_en": r.name_en,
                "cuisine": r.cuisine,
                "address": r.address,
                "reservation": r.reservation,
                "michelin": r.michelin,
            })
    return pd.DataFrame(rows, columns=RESTAURANT_COLUMNS)


def _load(config: DirectoryConfig) -> None:
    global _dataset, _chefs, _chefs_by_id, _restaurants_df
    dataset = load_dataset(config)
    chefs = normalize_chefs(dataset)

    _dataset = dataset
    _chefs = chefs
    _chefs_by_id = {chef.id: chef for chef in chefs}
    _restaurants_df = None

    logger.info(
        "Loaded %d chefs across %d seasons from %s",
        len(chefs),
        len(dataset.seasons),
        config.dataset_path,
    )


def get_dataset() -> Dataset:
    """Return the parsed dataset, loading it on first call."""
    if _dataset is None:
        _load(DEFAULT_DIRECTORY_CONFIG)
    return _dataset


def get_chefs() -> list[Chef]:
    """Return the normalized chef list, loading it on first call."""
    if _chefs is None:
        _load(DEFAULT_DIRECTORY_CONFIG)
    return _chefs


def get_chef(chef_id: str) -> Chef | None:
    get_chefs()
    chef = _chefs_by_id.get(chef_id)
    if chef is None:
        logger.warning("Unknown chef id requested: %s", chef_id)
    return chef


def get_restaurant_frame() -> pd.DataFrame:
    """Return the flat restaurant DataFrame built from the normalized chefs."""
    global _restaurants_df
    if _restaurants_df is None:
        _restaurants_df = build_restaurant_frame(get_chefs())
    return _restaurants_df


def reload(config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG) -> list[Chef]:
    """Discard the loaded dataset and read it again from ``config``."""
    _load(config)
    return _chefs
