# osm_route/errors.py


class RoutingError(Exception):
    """Base class for everything raised by osm_route."""


class EmptyGraphError(RoutingError):
    """No candidate nodes to snap to; raised before any search starts."""


class MapDataError(RoutingError, ValueError):
    """Source map data failed validation."""


class SearchStateError(RoutingError):
    """An AStarSearch object was run twice."""


class NoPathFoundError(RoutingError):
    def __init__(self, start: int, end: int, expanded: int = 0):
        super().__init__(f"no path from node {start} to node {end} ({expanded} nodes expanded)")
        self.start, self.end, self.expanded = start, end, expanded


class SearchAbortedError(RoutingError):
    def __init__(self, start: int, end: int, max_expansions: int):
        super().__init__(
            f"search from node {start} to node {end} stopped after {max_expansions} expansions"
        )
        self.start, self.end, self.max_expansions = start, end, max_expansions
