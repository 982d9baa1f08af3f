"""
Export the flat restaurant table built from the season dataset.

Usage:
    python -m chefguide.data_ingestion.export
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from ..directory.data_store import build_restaurant_frame
from ..directory.normalizer import normalize_chefs
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from .validate import validate_dataset

logger = logging.getLogger(__name__)


def export_restaurants_csv(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Validate the dataset and write one CSV row per (chef, restaurant) pair.

    Steps:
    - Load and integrity-check the season dataset.
    - Normalize rosters into the uniform chef list.
    - Persist the flattened restaurants for offline use.
    """
    with open(config.dataset_path, encoding="utf-8") as fh:
        dataset = validate_dataset(json.load(fh))

    df = build_restaurant_frame(normalize_chefs(dataset))

    config.processed_data_dir.mkdir(parents=True, exist_ok=True)
    output_path = config.processed_path
    df.to_csv(output_path, index=False)
    logger.info("Exported %d restaurants to %s", len(df), output_path)
    return output_path


if __name__ == "__main__":
    path = export_restaurants_csv()
    print(f"Export complete. Restaurants saved to: {path}")
