from osm_route.domain.entities.geography import MapData
from osm_route.domain.graph.index import build_node_road_index


def test_empty_road_collection_gives_empty_index():
    idx = build_node_road_index(MapData())
    assert len(idx) == 0
    assert idx.roads_for(0) == ()


def test_every_road_node_has_an_entry(square_diag_map):
    idx = build_node_road_index(square_diag_map)
    for road in square_diag_map.roads:
        for n in square_diag_map.ways[road.way].nodes:
            assert idx[n]


def test_node_on_several_roads_lists_each_road(square_diag_map):
    idx = build_node_road_index(square_diag_map)
    assert idx[0] == (0, 1)
    assert idx[2] == (0, 1)
    assert idx[1] == (0,)


def test_closed_ring_lists_road_once(square_map):
    idx = build_node_road_index(square_map)
    assert idx[0] == (0,)


def test_nodes_off_the_network_are_absent(map_factory):
    data = map_factory([(0.0, 0.0), (0.5, 0.5), (1.0, 1.0)], [[0, 2]])
    idx = build_node_road_index(data)
    assert 1 not in idx
    assert idx.roads_for(1) == ()
    assert sorted(idx) == [0, 2]
