from math import isfinite
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from osm_route.domain.entities.geography import AreaKind, LanduseType, RoadType


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    relax_open: bool = False  # update g/parent of nodes already in the frontier
    max_expansions: int | None = Field(default=None, gt=0)
    snap_to_roads: bool = False
    snap_warn_distance: float = Field(default=0.05, ge=0.0)  # normalized units


class PlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    log: LogModel = LogModel()
    search: SearchModel = SearchModel()


# ----------------- MAP DATA (parser output) ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    x: float
    y: float

    @field_validator("x", "y")
    def _unit_range(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v) or not 0.0 <= v <= 1.0:
            raise ValueError(f"{info.field_name} must be a normalized coordinate in [0, 1]")
        return v


class WayModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: list[int] = Field(default_factory=list)


class RoadModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    way: int = Field(ge=0)
    type: RoadType = RoadType.UNCLASSIFIED


class RailwayModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    way: int = Field(ge=0)


class AreaModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: AreaKind
    outer: list[int] = Field(default_factory=list)
    inner: list[list[int]] = Field(default_factory=list)
    landuse: LanduseType | None = None

    @model_validator(mode="after")
    def _landuse_only_on_landuse(self):
        if self.landuse is not None and self.kind is not AreaKind.LANDUSE:
            raise ValueError(f"landuse type given for a {self.kind.value} area")
        return self


class MapDataModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: list[NodeModel] = Field(default_factory=list)
    ways: list[WayModel] = Field(default_factory=list)
    roads: list[RoadModel] = Field(default_factory=list)
    railways: list[RailwayModel] = Field(default_factory=list)
    areas: list[AreaModel] = Field(default_factory=list)
    metric_scale: float = Field(default=1.0, gt=0.0)

    @model_validator(mode="after")
    def _check_refs(self):
        n_nodes, n_ways = len(self.nodes), len(self.ways)
        for i, w in enumerate(self.ways):
            bad = [n for n in w.nodes if not 0 <= n < n_nodes]
            if bad:
                raise ValueError(f"way {i} references unknown nodes {bad}")
        for kind, items in (("road", self.roads), ("railway", self.railways)):
            for i, r in enumerate(items):
                if r.way >= n_ways:
                    raise ValueError(f"{kind} {i} references unknown way {r.way}")
        for i, a in enumerate(self.areas):
            for n in [*a.outer, *(m for ring in a.inner for m in ring)]:
                if not 0 <= n < n_nodes:
                    raise ValueError(f"area {i} references unknown node {n}")
        return self
