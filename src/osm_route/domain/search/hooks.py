# domain/search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def search_start(self, *, start, end, nodes): ...
    def expand(self, *, node, g, h, open_size, expanded): ...
    def search_end(self, *, outcome, expanded, path_len, distance, wall_ms): ...
    def snap(self, *, x, y, node, offset, which, far=False): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, **_):
        pass

    def search_end(self, **_):
        pass

    def snap(self, **_):
        pass

    def error(self, **_):
        pass
