import math

from osm_route.app.protocols import RoutePlanner
from osm_route.config.models import SearchModel
from osm_route.domain.entities.geography import Point
from osm_route.domain.graph.route_model import RouteModel
from osm_route.domain.search.astar import AStarSearch
from osm_route.domain.search.hooks import NoopHooks, SearchHooks
from osm_route.domain.search.result import Route
from osm_route.errors import EmptyGraphError


class NetworkRoutePlanner(RoutePlanner):
    def __init__(
        self,
        model: RouteModel,
        search: SearchModel | None = None,
        hooks: SearchHooks | None = None,
    ):
        self.model, self.cfg = model, search or SearchModel()
        self.hooks = hooks or NoopHooks()

    def snap(self, p: Point, which: str = "start") -> int:
        """
        Closest graph node to p. Always succeeds on a non-empty graph, but the
        node can be far away where the network is sparse; that is logged, not
        raised.
        """
        try:
            n = self.model.find_closest_node(p.x, p.y, on_road=self.cfg.snap_to_roads)
        except EmptyGraphError as e:
            self.hooks.error(reason="empty_graph", which=which, error=str(e))
            raise
        q = self.model.point(n)
        offset = math.hypot(q.x - p.x, q.y - p.y)
        self.hooks.snap(
            x=p.x,
            y=p.y,
            node=n,
            offset=offset,
            which=which,
            far=offset > self.cfg.snap_warn_distance,
        )
        return n

    def route_nodes(self, start: int, end: int) -> Route:
        search = AStarSearch(
            self.model,
            start,
            end,
            relax_open=self.cfg.relax_open,
            max_expansions=self.cfg.max_expansions,
            hooks=self.hooks,
        )
        return search.run()

    def route(self, a: Point, b: Point) -> Route:
        return self.route_nodes(self.snap(a, "start"), self.snap(b, "end"))

    def distance_m(self, a: Point, b: Point) -> float:
        return self.route(a, b).require().distance_m(self.model.metric_scale)
