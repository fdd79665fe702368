# osm_route/io/map_loader.py
from collections.abc import Mapping

from pydantic import ValidationError

from osm_route.config.models import MapDataModel
from osm_route.domain.entities.geography import Area, MapData, Point, Railway, Road, Way
from osm_route.errors import MapDataError


def load_map_data(raw: MapDataModel | Mapping) -> MapData:
    """Validate parser output and freeze it into a MapData bundle."""
    try:
        m = raw if isinstance(raw, MapDataModel) else MapDataModel.model_validate(raw)
    except ValidationError as e:
        raise MapDataError(str(e)) from e

    return MapData(
        nodes=tuple(Point(n.x, n.y) for n in m.nodes),
        ways=tuple(Way(tuple(w.nodes)) for w in m.ways),
        roads=tuple(Road(r.way, r.type) for r in m.roads),
        railways=tuple(Railway(r.way) for r in m.railways),
        areas=tuple(
            Area(
                kind=a.kind,
                outer=tuple(a.outer),
                inner=tuple(tuple(ring) for ring in a.inner),
                landuse=a.landuse,
            )
            for a in m.areas
        ),
        metric_scale=m.metric_scale,
    )
