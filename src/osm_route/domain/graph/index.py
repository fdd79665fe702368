# osm_route/domain/graph/index.py
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from osm_route.app.protocols import MapSource


class GraphIndex(Mapping):
    """node index -> indices of the roads whose way passes through it."""

    def __init__(self, membership: dict[int, tuple[int, ...]]):
        self._m = MappingProxyType(membership)

    def __getitem__(self, node: int) -> tuple[int, ...]:
        return self._m[node]

    def __iter__(self) -> Iterator[int]:
        return iter(self._m)

    def __len__(self) -> int:
        return len(self._m)

    def roads_for(self, node: int) -> tuple[int, ...]:
        return self._m.get(node, ())


def build_node_road_index(data: MapSource) -> GraphIndex:
    acc: dict[int, list[int]] = {}
    for r_idx, road in enumerate(data.roads):
        seen: set[int] = set()
        for n in data.ways[road.way].nodes:
            # closed rings repeat their first node
            if n in seen:
                continue
            seen.add(n)
            acc.setdefault(n, []).append(r_idx)
    return GraphIndex({n: tuple(rs) for n, rs in acc.items()})
