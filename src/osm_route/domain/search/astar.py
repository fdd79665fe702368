# domain/search/astar.py

import heapq
import time

from osm_route.domain.graph.route_model import RouteModel
from osm_route.domain.search.hooks import NoopHooks, SearchHooks
from osm_route.domain.search.result import Route, SearchOutcome
from osm_route.domain.search.state import NodeStatus, SearchState
from osm_route.errors import SearchStateError


class AStarSearch:
    """
    One best-first search from `start` to `end` over a shared RouteModel.

    The open set is a heap of (f, discovery_seq, node): the lowest f wins and
    equal f falls back to whichever node was discovered first, so two runs on
    the same graph always return the same path.

    By default a node that is already OPEN keeps the g/parent it was first
    discovered with, even if a cheaper edge to it turns up later. Pass
    relax_open=True to update such nodes instead (canonical A*).
    """

    def __init__(
        self,
        model: RouteModel,
        start: int,
        end: int,
        *,
        relax_open: bool = False,
        max_expansions: int | None = None,
        hooks: SearchHooks | None = None,
    ):
        model.point(start)  # range checks
        model.point(end)
        self.model, self.start, self.end = model, start, end
        self.relax_open = relax_open
        self.max_expansions = max_expansions
        self._hooks = hooks or NoopHooks()
        self.state = SearchState(model.node_count)
        self._open: list[tuple[float, int, int]] = []
        self._expanded = 0
        self._done = False

    @property
    def open_nodes(self) -> set[int]:
        st = self.state
        return {n for _, _, n in self._open if st.status[n] == NodeStatus.OPEN}

    def calculate_h_value(self, node: int) -> float:
        return self.model.distance(node, self.end)

    def _push(self, node: int) -> None:
        heapq.heappush(
            self._open, (self.state.f(node), int(self.state.discovered_at[node]), node)
        )

    def next_node(self) -> int | None:
        """Pop the open node with minimal g + h and close it; None once the frontier is empty."""
        st = self.state
        while self._open:
            f, _, node = heapq.heappop(self._open)
            # stale entries only exist when relax_open re-queued a node
            if st.status[node] != NodeStatus.OPEN or f != st.f(node):
                continue
            st.close(node)
            self._expanded += 1
            return node
        return None

    def add_neighbors(self, current: int) -> None:
        st, model = self.state, self.model
        nbrs = st.neighbors.get(current)
        if nbrs is None:
            nbrs = st.neighbors[current] = model.find_neighbors(current)
        g_cur = float(st.g[current])
        for n in nbrs:
            status = st.status[n]
            if status == NodeStatus.CLOSED:
                continue
            g = g_cur + model.distance(current, n)
            if status == NodeStatus.OPEN:
                if self.relax_open and g < st.g[n]:
                    st.relax(n, g=g, parent=current)
                    self._push(n)
                continue
            st.open(n, g=g, h=self.calculate_h_value(n), parent=current)
            self._push(n)

    def construct_final_path(self, goal: int) -> tuple[tuple[int, ...], float]:
        nodes = [goal]
        p = self.state.parent_of(goal)
        while p is not None:
            nodes.append(p)
            p = self.state.parent_of(p)
        nodes.reverse()
        distance = sum(self.model.distance(a, b) for a, b in zip(nodes, nodes[1:]))
        return tuple(nodes), distance

    def run(self) -> Route:
        if self._done:
            raise SearchStateError("AStarSearch.run() may only be called once")
        self._done = True
        t0 = time.perf_counter()
        self._hooks.search_start(start=self.start, end=self.end, nodes=self.model.node_count)

        self.state.open(self.start, g=0.0, h=self.calculate_h_value(self.start))
        self._push(self.start)

        while True:
            budget_hit = self.max_expansions is not None and self._expanded >= self.max_expansions
            # stale relax_open entries do not count as frontier
            if budget_hit and self.open_nodes:
                route = self._result(SearchOutcome.ABORTED)
                break
            current = self.next_node()
            if current is None:
                route = self._result(SearchOutcome.NO_PATH)
                break
            self._hooks.expand(
                node=current,
                g=float(self.state.g[current]),
                h=float(self.state.h[current]),
                open_size=len(self._open),
                expanded=self._expanded,
            )
            if current == self.end:
                nodes, distance = self.construct_final_path(current)
                route = self._result(SearchOutcome.FOUND, nodes, distance)
                break
            self.add_neighbors(current)

        self._hooks.search_end(
            outcome=route.outcome.value,
            expanded=route.expanded,
            path_len=len(route.nodes),
            distance=route.distance,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return route

    def _result(self, outcome: SearchOutcome, nodes=(), distance: float = 0.0) -> Route:
        return Route(
            outcome=outcome,
            start=self.start,
            end=self.end,
            nodes=nodes,
            points=tuple(self.model.point(n) for n in nodes),
            distance=distance,
            expanded=self._expanded,
            max_expansions=self.max_expansions,
        )
