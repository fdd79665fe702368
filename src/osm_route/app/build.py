# osm_route/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from osm_route.app.planner import NetworkRoutePlanner
from osm_route.app.protocols import MapSource
from osm_route.config.models import MapDataModel, PlannerModel
from osm_route.domain.graph.route_model import RouteModel
from osm_route.domain.search.hooks import NoopHooks, SearchHooks
from osm_route.io.map_loader import load_map_data
from osm_route.io.search_logging import SearchLogging


@dataclass
class App:
    config: PlannerModel
    model: RouteModel
    planner: NetworkRoutePlanner
    hooks: SearchHooks


def build(
    data: MapSource | MapDataModel | Mapping,
    cfg: PlannerModel | Mapping | None = None,
    *,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    if cfg is None:
        cfg = PlannerModel()
    model_cfg = cfg if isinstance(cfg, PlannerModel) else PlannerModel.model_validate(cfg)

    # 1) Map data -> read-only route model (node store + road index)
    if isinstance(data, (MapDataModel, Mapping)):
        source = load_map_data(data)
    elif isinstance(data, MapSource):
        source = data
    else:
        raise TypeError(f"cannot build a route model from {type(data).__name__}")
    model = RouteModel(source)

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model_cfg.run_id,
            level=model_cfg.log.level,
            debug=model_cfg.log.debug,
            sample_every=model_cfg.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Planner
    planner = NetworkRoutePlanner(model, model_cfg.search, hooks=hooks)
    return App(config=model_cfg, model=model, planner=planner, hooks=hooks)
