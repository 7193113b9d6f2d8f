"""
Render inputs for the map and the location grid.

``MapContext`` is the explicit state that the map and grid are drawn
from: markers, cards, the grid title, the bounds to fit and the user's
position. ``LocationsController`` owns one context and rebuilds it from
scratch whenever a filter facet changes. A later rebuild simply
overwrites an earlier one.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field

from ..locations.models import Location, VoteCounts
from .api import LocaisClient
from .config import DEFAULT_CLIENT_CONFIG
from .geo import Category, FilterCriteria, GeoPoint, filter_locations

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Locais"


def vote_percentages(likes: int, dislikes: int) -> tuple[float, float]:
    total = likes + dislikes
    if total == 0:
        return 0.0, 0.0
    return likes / total * 100, dislikes / total * 100


@dataclass
class Marker:
    location_id: str
    latitude: float
    longitude: float
    popup: str


@dataclass
class LocationCard:
    location_id: str
    title: str
    description: str
    src: str
    likes: int
    dislikes: int

    @property
    def like_percentage(self) -> float:
        return vote_percentages(self.likes, self.dislikes)[0]

    @property
    def dislike_percentage(self) -> float:
        return vote_percentages(self.likes, self.dislikes)[1]


@dataclass
class MapContext:
    markers: list[Marker] = field(default_factory=list)
    cards: list[LocationCard] = field(default_factory=list)
    title: str = DEFAULT_TITLE
    bounds: tuple[float, float, float, float] | None = None
    user_position: GeoPoint | None = None


def build_popup(location: Location) -> str:
    title = html.escape(location.title)
    return (
        f"<div><h2>{title}</h2>"
        f'<img src="{html.escape(location.src)}" alt="{title}" style="max-width: 100px; height: auto;">'
        f"<p>{html.escape(location.description)}</p>"
        f"<p><strong>Types:</strong> {html.escape(', '.join(location.types))}</p></div>"
    )


def build_markers(locations: list[Location]) -> list[Marker]:
    return [
        Marker(
            location_id=loc.id,
            latitude=loc.latitude,
            longitude=loc.longitude,
            popup=build_popup(loc),
        )
        for loc in locations
    ]


def build_cards(locations: list[Location]) -> list[LocationCard]:
    return [
        LocationCard(
            location_id=loc.id,
            title=loc.title,
            description=loc.description,
            src=loc.src,
            likes=loc.likes,
            dislikes=loc.dislikes,
        )
        for loc in locations
    ]


def marker_bounds(markers: list[Marker]) -> tuple[float, float, float, float] | None:
    """Return ``(south, west, north, east)`` enclosing the markers."""
    if not markers:
        return None
    lats = [m.latitude for m in markers]
    lons = [m.longitude for m in markers]
    return min(lats), min(lons), max(lats), max(lons)


class LocationsController:
    """Owns the full location list, the filter facets and the map context."""

    def __init__(
        self,
        client: LocaisClient,
        max_distance_km: float = DEFAULT_CLIENT_CONFIG.default_max_distance_km,
    ) -> None:
        self.client = client
        self.context = MapContext()
        self.locations: list[Location] = []
        self.category: Category | None = None
        self.require_amenity = False
        self.max_distance_km = max_distance_km

    @property
    def criteria(self) -> FilterCriteria:
        return FilterCriteria(
            category=self.category,
            require_amenity=self.require_amenity,
            max_distance_km=self.max_distance_km,
            origin=self.context.user_position,
        )

    def load(self) -> MapContext:
        self.locations = self.client.fetch_locations()
        if not self.locations:
            logger.info("No locations to show on the map.")
        return self.refresh()

    def set_user_position(self, position: GeoPoint | None) -> MapContext:
        """Record the geolocation result; ``None`` when it is unavailable."""
        if position is None:
            logger.warning("User position unavailable; distance filter disabled")
        self.context.user_position = position
        return self.refresh()

    def select_category(self, category: Category | None) -> MapContext:
        """Select a category, or clear it by selecting the active one again."""
        self.category = None if category == self.category else category
        return self.refresh()

    def set_require_amenity(self, required: bool) -> MapContext:
        self.require_amenity = required
        return self.refresh()

    def set_max_distance(self, km: float) -> MapContext:
        self.max_distance_km = float(km)
        return self.refresh()

    def refresh(self) -> MapContext:
        visible = filter_locations(self.locations, self.criteria)
        markers = build_markers(visible)
        self.context = MapContext(
            markers=markers,
            cards=build_cards(visible),
            title=self.category.value if self.category else DEFAULT_TITLE,
            bounds=marker_bounds(markers),
            user_position=self.context.user_position,
        )
        return self.context

    # ── Votes & favorites ────────────────────────────────────────────────

    def like(self, location_id: str) -> VoteCounts | None:
        counts = self.client.like(location_id)
        if counts is not None:
            self.update_votes(location_id, counts)
        return counts

    def dislike(self, location_id: str) -> VoteCounts | None:
        counts = self.client.dislike(location_id)
        if counts is not None:
            self.update_votes(location_id, counts)
        return counts

    def update_votes(self, location_id: str, counts: VoteCounts) -> None:
        """Apply the counts returned by the server to the list and the card."""
        self.locations = [
            loc.model_copy(update={"likes": counts.likes, "dislikes": counts.dislikes})
            if loc.id == location_id
            else loc
            for loc in self.locations
        ]
        for card in self.context.cards:
            if card.location_id == location_id:
                card.likes = counts.likes
                card.dislikes = counts.dislikes

    def save_favorite(self, location_id: str) -> str:
        return self.client.save_favorite(location_id)
