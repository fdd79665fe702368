from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from osm_route.domain.entities.geography import Point, Road, Way
from osm_route.domain.search.result import Route


@runtime_checkable
class MapSource(Protocol):
    """
    Read-only collections handed over by the map parser.
    Coordinates are normalized to [0, 1] x [0, 1].
    """

    nodes: Sequence[Point]
    ways: Sequence[Way]
    roads: Sequence[Road]
    metric_scale: float


@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Compute a path between two free points (snapped onto the network).
      • Compute network distance between points in metres.
    """

    def route(self, a: Point, b: Point) -> Route: ...
    def distance_m(self, a: Point, b: Point) -> float: ...
