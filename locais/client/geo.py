from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import pandas as pd

from ..locations.models import Location

EARTH_RADIUS_KM = 6371.0
AMENITY_TAG = "WC"


class Category(str, Enum):
    culture = "Culture"
    nature = "Nature"
    beach = "Beach"
    trail = "Trail"
    snacks = "Snacks"


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class FilterCriteria:
    category: Category | None = None
    require_amenity: bool = False
    max_distance_km: float = math.inf
    origin: GeoPoint | None = None


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two WGS-84 points (haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a a hair outside [0, 1] for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def filter_locations(locations: Sequence[Location], criteria: FilterCriteria) -> list[Location]:
    """Return the locations matching every active facet, in input order.

    Facets are ANDed: category (name occurs in ``type_icon``), amenity
    (``WC`` in ``types``) and radius (``distance_km(origin, location) <=
    max_distance_km``, only when an origin is known). Always computed from
    the full input.
    """
    if not locations:
        return []

    df = pd.DataFrame({
        "type_icon": [loc.type_icon for loc in locations],
        "types": [loc.types for loc in locations],
        "latitude": [loc.latitude for loc in locations],
        "longitude": [loc.longitude for loc in locations],
    })
    mask = pd.Series(True, index=df.index)

    if criteria.category is not None:
        mask = mask & df["type_icon"].str.contains(criteria.category.value, regex=False)

    if criteria.require_amenity:
        mask = mask & df["types"].apply(lambda t: AMENITY_TAG in t)

    if criteria.origin is not None:
        origin = criteria.origin
        dist = df.apply(
            lambda row: distance_km(origin.latitude, origin.longitude, row["latitude"], row["longitude"]),
            axis=1,
        )
        mask = mask & (dist <= criteria.max_distance_km)

    return [locations[i] for i in df.index[mask.to_numpy(dtype=bool)]]
