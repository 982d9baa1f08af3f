import os
from dataclasses import dataclass, field
from pathlib import Path

from ..directory.config import DEFAULT_DIRECTORY_CONFIG


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for dataset checks and the restaurant CSV export.
    """

    dataset_path: Path = field(default_factory=lambda: DEFAULT_DIRECTORY_CONFIG.dataset_path)
    processed_data_dir: Path = Path(os.getenv("CHEFGUIDE_PROCESSED_DIR", "chefguide/data/processed"))
    processed_filename: str = "restaurants.csv"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
