# osm_route/domain/graph/route_model.py
import math

import numpy as np

from osm_route.app.protocols import MapSource
from osm_route.domain.entities.geography import Point
from osm_route.domain.graph.index import GraphIndex, build_node_road_index
from osm_route.errors import EmptyGraphError


class RouteModel:
    """
    Read-only road graph over a fixed-size node store.

    Node identity is the integer position in the source's nodes. Coordinates live in
    two numpy arrays that are frozen right after load, so every index handed
    out (neighbours, parents, path nodes) stays valid for the model's lifetime.
    All per-search scratch lives in SearchState, never here.
    """

    def __init__(self, data: MapSource):
        self.data = data
        n = len(data.nodes)
        self._xs = np.fromiter((p.x for p in data.nodes), dtype=np.float64, count=n)
        self._ys = np.fromiter((p.y for p in data.nodes), dtype=np.float64, count=n)
        self._xs.flags.writeable = False
        self._ys.flags.writeable = False
        self.index: GraphIndex = build_node_road_index(data)
        self._road_nodes = np.array(sorted(self.index), dtype=np.int64)

    @property
    def node_count(self) -> int:
        return len(self._xs)

    @property
    def road_node_count(self) -> int:
        return len(self._road_nodes)

    @property
    def metric_scale(self) -> float:
        return self.data.metric_scale

    def _check(self, node: int) -> int:
        if not 0 <= node < self.node_count:
            raise IndexError(f"node {node} out of range [0, {self.node_count})")
        return node

    def point(self, node: int) -> Point:
        self._check(node)
        return Point(float(self._xs[node]), float(self._ys[node]))

    def distance(self, a: int, b: int) -> float:
        self._check(a)
        self._check(b)
        return math.hypot(float(self._xs[a] - self._xs[b]), float(self._ys[a] - self._ys[b]))

    def find_neighbors(self, node: int) -> tuple[int, ...]:
        """Predecessor/successor of `node` along every road through it, first-seen order."""
        self._check(node)
        out: dict[int, None] = {}
        for r_idx in self.index.roads_for(node):
            seq = self.data.ways[self.data.roads[r_idx].way].nodes
            for i, n in enumerate(seq):
                if n != node:
                    continue
                if i > 0:
                    out.setdefault(seq[i - 1])
                if i + 1 < len(seq):
                    out.setdefault(seq[i + 1])
        out.pop(node, None)
        return tuple(out)

    def find_closest_node(self, x: float, y: float, *, on_road: bool = False) -> int:
        """
        Nearest node to (x, y) by Euclidean distance.

        Ties resolve to the lowest node index. With on_road=True only nodes
        that belong to at least one road are candidates.
        """
        if on_road:
            cand = self._road_nodes
            if cand.size == 0:
                raise EmptyGraphError("no road nodes to snap to")
            d2 = (self._xs[cand] - x) ** 2 + (self._ys[cand] - y) ** 2
            return int(cand[int(np.argmin(d2))])
        if self.node_count == 0:
            raise EmptyGraphError("node store is empty")
        d2 = (self._xs - x) ** 2 + (self._ys - y) ** 2
        return int(np.argmin(d2))  # argmin returns the first minimum
