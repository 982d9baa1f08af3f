from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from ..directory.models import Dataset

logger = logging.getLogger(__name__)


class DatasetIntegrityError(ValueError):
    """Raised when a parsed dataset breaks a cross-record invariant."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


def find_problems(dataset: Dataset) -> list[str]:
    problems: list[str] = []

    season_ids = Counter(season.id for season in dataset.seasons)
    for season_id, count in season_ids.items():
        if count > 1:
            problems.append(f"season {season_id} appears {count} times")

    chef_ids: Counter[str] = Counter()
    for season in dataset.seasons:
        for white in season.white_spoon:
            chef_ids[white.id] += 1
            if not white.name_ko.strip():
                problems.append(f"white spoon chef {white.id} has a blank nameKo")
        for black in season.black_spoon:
            chef_ids[black.id] += 1
            if not black.nickname.strip():
                problems.append(f"black spoon chef {black.id} has a blank nickname")

    for chef_id, count in chef_ids.items():
        if count > 1:
            problems.append(f"chef id {chef_id} appears {count} times")

    return problems


def validate_dataset(raw: dict[str, Any]) -> Dataset:
    """
    Parse ``raw`` and check it for integrity problems.

    Shape errors surface as ``pydantic.ValidationError``; cross-record
    problems (duplicate ids, blank names) as ``DatasetIntegrityError``.
    """
    dataset = Dataset.model_validate(raw)
    problems = find_problems(dataset)
    if problems:
        for problem in problems:
            logger.error("Dataset integrity problem: %s", problem)
        raise DatasetIntegrityError(problems)
    return dataset
