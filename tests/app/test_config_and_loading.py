import pytest
from pydantic import ValidationError

from osm_route.config.models import PlannerModel, SearchModel
from osm_route.domain.entities.geography import AreaKind, LanduseType, RoadType
from osm_route.errors import MapDataError
from osm_route.io.map_loader import load_map_data


def _raw(**over):
    raw = {
        "nodes": [{"x": 0.0, "y": 0.0}, {"x": 0.5, "y": 0.5}, {"x": 1.0, "y": 0.0}],
        "ways": [{"nodes": [0, 1, 2]}, {"nodes": [0, 2, 1, 0]}],
        "roads": [{"way": 0, "type": "footway"}],
        "railways": [{"way": 0}],
        "areas": [
            {"kind": "landuse", "outer": [0, 1, 2, 0], "landuse": "forest"},
            {"kind": "building", "outer": [0, 1, 2, 0], "inner": [[1, 2, 1]]},
        ],
        "metric_scale": 1234.5,
    }
    raw.update(over)
    return raw


def test_load_map_data_freezes_collections():
    data = load_map_data(_raw())
    assert len(data.nodes) == 3
    assert data.ways[1].nodes == (0, 2, 1, 0)
    assert data.roads[0].type is RoadType.FOOTWAY
    assert data.metric_scale == 1234.5
    (forest,) = data.areas_of(AreaKind.LANDUSE)
    assert forest.landuse is LanduseType.FOREST
    (building,) = data.areas_of(AreaKind.BUILDING)
    assert building.inner == ((1, 2, 1),) and building.landuse is None


def test_road_type_defaults_to_unclassified():
    data = load_map_data(_raw(roads=[{"way": 1}]))
    assert data.roads[0].type is RoadType.UNCLASSIFIED


@pytest.mark.parametrize(
    "over",
    [
        {"nodes": [{"x": 1.5, "y": 0.0}]},
        {"nodes": [{"x": float("nan"), "y": 0.0}]},
        {"ways": [{"nodes": [0, 7]}]},
        {"roads": [{"way": 5}]},
        {"metric_scale": 0.0},
        {"areas": [{"kind": "water", "outer": [0, 1], "landuse": "grass"}]},
        {"roads": [{"way": 0, "type": "highway"}]},
    ],
)
def test_invalid_map_data_raises(over):
    with pytest.raises(MapDataError):
        load_map_data(_raw(**over))


def test_map_data_error_is_a_value_error():
    with pytest.raises(ValueError):
        load_map_data({"nodes": "nope"})


def test_planner_model_defaults():
    cfg = PlannerModel()
    assert cfg.log.level == "INFO"
    assert cfg.search.relax_open is False
    assert cfg.search.max_expansions is None


def test_planner_model_rejects_unknown_and_bad_values():
    with pytest.raises(ValidationError):
        PlannerModel.model_validate({"search": {"relax": True}})
    with pytest.raises(ValidationError):
        SearchModel(max_expansions=0)
    with pytest.raises(ValidationError):
        PlannerModel.model_validate({"log": {"level": "TRACE"}})
