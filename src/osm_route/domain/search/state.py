# osm_route/domain/search/state.py
from enum import IntEnum

import numpy as np

NO_PARENT = -1


class NodeStatus(IntEnum):
    UNVISITED = 0
    OPEN = 1  # discovered, in the frontier
    CLOSED = 2  # expanded


class SearchState:
    """Scratch side table for one search, keyed by node index."""

    def __init__(self, node_count: int):
        self.g = np.zeros(node_count, dtype=np.float64)
        self.h = np.full(node_count, np.inf, dtype=np.float64)
        self.parent = np.full(node_count, NO_PARENT, dtype=np.int64)
        self.status = np.full(node_count, NodeStatus.UNVISITED, dtype=np.int8)
        self.discovered_at = np.full(node_count, -1, dtype=np.int64)
        self.neighbors: dict[int, tuple[int, ...]] = {}  # filled on first expansion
        self._seq = 0

    def f(self, node: int) -> float:
        return float(self.g[node] + self.h[node])

    def status_of(self, node: int) -> NodeStatus:
        return NodeStatus(int(self.status[node]))

    def open(self, node: int, *, g: float, h: float, parent: int = NO_PARENT) -> None:
        """Move node to OPEN and stamp its discovery order."""
        self.g[node], self.h[node], self.parent[node] = g, h, parent
        self.status[node] = NodeStatus.OPEN
        self.discovered_at[node] = self._seq
        self._seq += 1

    def relax(self, node: int, *, g: float, parent: int) -> None:
        # discovery order is kept so tie-breaks stay stable
        self.g[node], self.parent[node] = g, parent

    def close(self, node: int) -> None:
        self.status[node] = NodeStatus.CLOSED

    def parent_of(self, node: int) -> int | None:
        p = int(self.parent[node])
        return None if p == NO_PARENT else p
