# osm_route/domain/search/result.py
from dataclasses import dataclass
from enum import Enum

from osm_route.domain.entities.geography import Point
from osm_route.errors import NoPathFoundError, SearchAbortedError


class SearchOutcome(Enum):
    FOUND = "found"
    NO_PATH = "no_path"  # frontier exhausted
    ABORTED = "aborted"  # expansion budget hit


@dataclass(frozen=True)
class Route:
    outcome: SearchOutcome
    start: int
    end: int
    nodes: tuple[int, ...] = ()
    points: tuple[Point, ...] = ()
    distance: float = 0.0  # normalized units
    expanded: int = 0
    max_expansions: int | None = None

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    def distance_m(self, metric_scale: float) -> float:
        return self.distance * metric_scale

    def require(self) -> "Route":
        if self.outcome is SearchOutcome.NO_PATH:
            raise NoPathFoundError(self.start, self.end, self.expanded)
        if self.outcome is SearchOutcome.ABORTED:
            raise SearchAbortedError(self.start, self.end, self.max_expansions or self.expanded)
        return self

    def segments(self):
        """Yield consecutive (a, b) point pairs along the route."""
        yield from zip(self.points, self.points[1:])
