from dataclasses import dataclass
from enum import Enum


# Core geometry types used by the route model
@dataclass(frozen=True)
class Point:
    x: float  # normalized to [0, 1]
    y: float

    @classmethod
    def from_percent(cls, x: float, y: float) -> "Point":
        # user-facing coordinates are given as 0..100
        return cls(float(x) * 0.01, float(y) * 0.01)


@dataclass(frozen=True)
class Way:
    nodes: tuple[int, ...]  # indices into MapData.nodes


class RoadType(Enum):
    INVALID = "invalid"
    UNCLASSIFIED = "unclassified"
    SERVICE = "service"
    RESIDENTIAL = "residential"
    TERTIARY = "tertiary"
    SECONDARY = "secondary"
    PRIMARY = "primary"
    TRUNK = "trunk"
    MOTORWAY = "motorway"
    FOOTWAY = "footway"


@dataclass(frozen=True)
class Road:
    way: int
    type: RoadType = RoadType.UNCLASSIFIED  # renderer only, never a cost


@dataclass(frozen=True)
class Railway:
    way: int


class AreaKind(Enum):
    BUILDING = "building"
    LEISURE = "leisure"
    WATER = "water"
    LANDUSE = "landuse"


class LanduseType(Enum):
    INVALID = "invalid"
    COMMERCIAL = "commercial"
    CONSTRUCTION = "construction"
    GRASS = "grass"
    FOREST = "forest"
    INDUSTRIAL = "industrial"
    RAILWAY = "railway"
    RESIDENTIAL = "residential"


@dataclass(frozen=True)
class Area:
    """Polygon feature: one outer ring plus optional holes."""

    kind: AreaKind
    outer: tuple[int, ...]
    inner: tuple[tuple[int, ...], ...] = ()
    landuse: LanduseType | None = None  # set only for AreaKind.LANDUSE


@dataclass(frozen=True)
class MapData:
    """Read-only bundle handed over by the map parser."""

    nodes: tuple[Point, ...] = ()
    ways: tuple[Way, ...] = ()
    roads: tuple[Road, ...] = ()
    railways: tuple[Railway, ...] = ()
    areas: tuple[Area, ...] = ()
    metric_scale: float = 1.0

    def areas_of(self, kind: AreaKind) -> list[Area]:
        return [a for a in self.areas if a.kind is kind]
