from __future__ import annotations

import logging
import threading
import uuid
from pathlib import Path
from typing import Any

import pandas as pd

from ..errors import LocationNotFoundError
from .config import DEFAULT_LOCATION_STORE_CONFIG
from .models import Location, VoteCounts

logger = logging.getLogger(__name__)

VOTE_FIELDS = ("likes", "dislikes")
_OPTIONAL_TEXT = ("src", "description", "type_icon", "url")

_locations: dict[str, dict[str, Any]] = {}
_lock = threading.Lock()


def _load_seed(path: Path) -> list[dict[str, Any]]:
    df = pd.read_json(path)
    if df.empty:
        return []

    for col in _OPTIONAL_TEXT:
        if col not in df:
            df[col] = None
        df[col] = df[col].astype(object).where(df[col].notna(), None)

    if "types" not in df:
        df["types"] = None
    df["types"] = df["types"].apply(lambda t: [str(x) for x in t] if isinstance(t, list) else [])

    for col in VOTE_FIELDS:
        df[col] = df[col].fillna(0).astype(int) if col in df else 0

    return df.to_dict(orient="records")


def add_location(doc: dict[str, Any]) -> Location:
    """Insert a location document and return it with its generated id."""
    location = Location(
        id=uuid.uuid4().hex,
        src=doc.get("src") or "",
        title=doc["title"],
        description=doc.get("description") or "",
        type_icon=doc.get("type_icon") or "",
        types=list(doc.get("types") or []),
        latitude=float(doc["latitude"]),
        longitude=float(doc["longitude"]),
        url=doc.get("url") or None,
        likes=int(doc.get("likes") or 0),
        dislikes=int(doc.get("dislikes") or 0),
    )
    with _lock:
        _locations[location.id] = location.model_dump()
    return location


def list_locations() -> list[Location]:
    with _lock:
        docs = list(_locations.values())
    return [Location(**d) for d in docs]


def get_location(location_id: str) -> Location | None:
    with _lock:
        doc = _locations.get(location_id)
    return Location(**doc) if doc else None


def location_exists(location_id: str) -> bool:
    with _lock:
        return location_id in _locations


def increment_vote(location_id: str, field: str) -> VoteCounts:
    """Atomically add one to ``likes`` or ``dislikes`` and return both counts."""
    if field not in VOTE_FIELDS:
        raise ValueError(f"Unknown vote field: {field!r}")
    with _lock:
        doc = _locations.get(location_id)
        if doc is None:
            raise LocationNotFoundError()
        doc[field] += 1
        return VoteCounts(likes=doc["likes"], dislikes=doc["dislikes"])


def clear_locations() -> None:
    with _lock:
        _locations.clear()


def seed_locations(path: Path | None = None) -> int:
    """Load seed documents into the store. Returns the number inserted."""
    path = path or DEFAULT_LOCATION_STORE_CONFIG.seed_path
    if not path.exists():
        logger.warning("Seed file %s not found; starting with no locations", path)
        return 0
    docs = _load_seed(path)
    for doc in docs:
        add_location(doc)
    logger.info("Seeded %d locations from %s", len(docs), path)
    return len(docs)


if DEFAULT_LOCATION_STORE_CONFIG.seed_on_startup:
    seed_locations()
