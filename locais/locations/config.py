from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_SEED = Path(__file__).resolve().parent / "data" / "locations.json"


@dataclass(frozen=True)
class LocationStoreConfig:
    seed_path: Path = Path(os.getenv("LOCAIS_SEED_PATH", str(_DEFAULT_SEED)))
    seed_on_startup: bool = os.getenv("LOCAIS_SEED", "1") != "0"


DEFAULT_LOCATION_STORE_CONFIG = LocationStoreConfig()
