# io/search_logging.py
import json
import logging
import sys

import numpy as np

from osm_route.domain.search.hooks import NoopHooks


def _jsonable(v):
    # search state is numpy-backed; ints/floats may arrive as numpy scalars
    if isinstance(v, np.generic):
        return v.item()
    return str(v)


class JsonFormatter(logging.Formatter):
    """One JSON object per record: level, msg, logger, then the structured extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=_jsonable)


def json_logger(name="osm_route", level="INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for route searches: one record at start and end,
    sampled per-expansion records in debug mode, warnings for far snaps.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def search_start(self, *, start, end, nodes):
        self._emit("INFO", "search_start", start=start, end=end, nodes=nodes)

    def expand(self, *, node, g, h, open_size, expanded):
        if self.debug and (expanded % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "expand",
                node=node,
                g=g,
                h=h,
                f=g + h,
                open_size=open_size,
                expanded=expanded,
            )

    def search_end(self, *, outcome, expanded, path_len, distance, wall_ms):
        self._emit(
            "INFO",
            "search_end",
            outcome=outcome,
            expanded=expanded,
            path_len=path_len,
            distance=distance,
            wall_ms=wall_ms,
        )

    def snap(self, *, x, y, node, offset, which, far: bool = False):
        if far:
            self._emit("WARNING", "snap_far", x=x, y=y, node=node, offset=offset, which=which)
        elif self.debug:
            self._emit("DEBUG", "snap", x=x, y=y, node=node, offset=offset, which=which)

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "search_error", reason=reason, **extra)
