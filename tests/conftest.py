# tests/conftest.py
import pytest

from osm_route.domain.entities.geography import MapData, Point, Road, RoadType, Way


def make_map(points, ways, roads=None, metric_scale=1.0) -> MapData:
    ways = tuple(Way(tuple(w)) for w in ways)
    if roads is None:
        roads = [Road(i, RoadType.FOOTWAY) for i in range(len(ways))]
    return MapData(
        nodes=tuple(Point(x, y) for x, y in points),
        ways=ways,
        roads=tuple(roads),
        metric_scale=metric_scale,
    )


SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.fixture
def square_map() -> MapData:
    # one closed road around the square, no diagonal
    return make_map(SQUARE, [[0, 1, 2, 3, 0]])


@pytest.fixture
def square_diag_map() -> MapData:
    return make_map(SQUARE, [[0, 1, 2, 3, 0], [0, 2]])


@pytest.fixture
def split_map() -> MapData:
    # two clusters, no road between them
    return make_map([(0.0, 0.0), (0.1, 0.0), (0.9, 0.9), (1.0, 1.0)], [[0, 1], [2, 3]])


@pytest.fixture
def detour_map() -> MapData:
    """
    S(0) -> A(1) -> C(3) is discovered first, S -> B(2) -> C is cheaper.
    The goal G(4) is only reachable through C.
    """
    pts = [(0.0, 0.0), (0.3, 0.0), (0.25, 0.3), (0.5, 0.3), (1.0, 0.0)]
    return make_map(pts, [[0, 1], [1, 3], [0, 2], [2, 3], [3, 4]])


@pytest.fixture
def map_factory():
    return make_map
