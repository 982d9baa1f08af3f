from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_DATASET = Path(__file__).resolve().parent.parent / "data" / "restaurants.json"


@dataclass(frozen=True)
class DirectoryConfig:
    """
    Where the chef directory reads its static season dataset from.
    """

    dataset_path: Path = Path(os.getenv("CHEFGUIDE_DATASET_PATH", str(_BUNDLED_DATASET)))
    encoding: str = "utf-8"


DEFAULT_DIRECTORY_CONFIG = DirectoryConfig()
