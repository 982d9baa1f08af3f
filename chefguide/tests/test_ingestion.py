import json
from pathlib import Path

import pandas as pd
import pytest
from pydantic import ValidationError

from chefguide.data_ingestion.config import IngestionConfig
from chefguide.data_ingestion.export import export_restaurants_csv
from chefguide.data_ingestion.validate import DatasetIntegrityError, validate_dataset
from chefguide.directory import data_store
from chefguide.directory.config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig
from chefguide.directory.data_store import RESTAURANT_COLUMNS


def _raw(seasons):
    return {"seasons": seasons}


def test_bundled_dataset_passes_integrity_checks():
    with open(DEFAULT_DIRECTORY_CONFIG.dataset_path, encoding="utf-8") as fh:
        dataset = validate_dataset(json.load(fh))
    assert [s.id for s in dataset.seasons] == [1, 2]


def test_duplicate_chef_ids_across_seasons_rejected():
    raw = _raw([
        {"id": 1, "whiteSpoon": [{"id": "dup", "nameKo": "가"}]},
        {"id": 2, "blackSpoon": [{"id": "dup", "nickname": "나"}]},
    ])
    with pytest.raises(DatasetIntegrityError) as excinfo:
        validate_dataset(raw)
    assert any("dup" in p for p in excinfo.value.problems)


def test_duplicate_season_and_blank_name_reported_together():
    raw = _raw([
        {"id": 1, "whiteSpoon": [{"id": "a", "nameKo": "  "}]},
        {"id": 1},
    ])
    with pytest.raises(DatasetIntegrityError) as excinfo:
        validate_dataset(raw)
    assert len(excinfo.value.problems) == 2


def test_missing_required_field_is_fatal():
    raw = _raw([{"id": 1, "blackSpoon": [{"id": "b1"}]}])
    with pytest.raises(ValidationError):
        validate_dataset(raw)


def test_restaurant_without_name_is_fatal():
    raw = _raw([{"id": 1, "whiteSpoon": [{"id": "w", "nameKo": "가", "restaurants": [{"address": "Seoul"}]}]}])
    with pytest.raises(ValidationError):
        validate_dataset(raw)


def test_export_writes_one_row_per_restaurant(tmp_path: Path):
    cfg = IngestionConfig(processed_data_dir=tmp_path / "processed")

    output_path = export_restaurants_csv(config=cfg)

    assert output_path.is_file(), "Processed CSV should be created"
    df = pd.read_csv(output_path)
    assert list(df.columns) == RESTAURANT_COLUMNS
    expected = sum(len(chef.restaurants) for chef in data_store.get_chefs())
    assert len(df) == expected


def test_reload_reads_alternate_dataset(tmp_path: Path):
    path = tmp_path / "mini.json"
    path.write_text(json.dumps(_raw([
        {
            "id": 1,
            "whiteSpoon": [{"id": "c1", "nameKo": "김치", "restaurants": [{"nameKo": "김치집"}]}],
            "blackSpoon": [{"id": "c2", "nickname": "Napoleon", "realNameKo": None}],
        },
    ])), encoding="utf-8")
    try:
        chefs = data_store.reload(DirectoryConfig(dataset_path=path))
        assert [c.id for c in chefs] == ["c1", "c2"]
        assert data_store.get_chef("c2").name_ko == "Napoleon"
        assert data_store.get_chef("missing") is None
        assert len(data_store.get_restaurant_frame()) == 1
    finally:
        data_store.reload()
