"""
Tests for occupancy masks and the free-cell graph.
"""

import math

import numpy as np

from battlefield.config import FieldConfig
from battlefield.graph import build_graph, is_within_bounds
from battlefield.occupancy import build_occupancy_mask, occupancy_stats, reachable_region


class TestOccupancyMask:

    def test_shape_and_dtype(self, make_unit):
        mover, target = make_unit(0, 0), make_unit(1, 1)
        mask = build_occupancy_mask([mover, target], mover, target)

        assert mask.shape == (27, 21)
        assert mask.dtype == bool
        assert not mask.any()

    def test_marks_living_units_only(self, make_unit):
        mover, target = make_unit(0, 0), make_unit(1, 1)
        alive = make_unit(4, 7)
        dead = make_unit(5, 7, alive=False)

        mask = build_occupancy_mask([mover, target, alive, dead], mover, target)

        assert mask[4, 7]
        assert not mask[5, 7]
        assert mask.sum() == 1

    def test_clears_endpoint_cells(self, make_unit):
        mover, target = make_unit(3, 3), make_unit(8, 8)
        roster = [mover, target, make_unit(3, 3), make_unit(8, 8)]

        mask = build_occupancy_mask(roster, mover, target)

        assert not mask[3, 3]
        assert not mask[8, 8]

    def test_endpoints_excluded_by_identity(self, make_unit):
        mover, target = make_unit(3, 3), make_unit(8, 8)
        twin = make_unit(2, 2, name=mover.name)

        mask = build_occupancy_mask([mover, target, twin], mover, target)

        assert mask[2, 2]

    def test_ignores_units_outside_field(self, make_unit):
        mover, target = make_unit(0, 0), make_unit(1, 1)
        stray = make_unit(40, 2)

        mask = build_occupancy_mask([mover, target, stray], mover, target)

        assert not mask.any()

    def test_custom_field(self, make_unit):
        mover, target = make_unit(0, 0), make_unit(1, 1)
        mask = build_occupancy_mask([mover, target], mover, target, FieldConfig(width=5, height=4))

        assert mask.shape == (5, 4)

    def test_stats(self, empty_mask):
        empty_mask[0, :] = True

        stats = occupancy_stats(empty_mask)

        assert stats == {'free': 27 * 21 - 21, 'occupied': 21, 'total': 27 * 21}


class TestReachableRegion:

    def test_open_field(self, empty_mask):
        assert reachable_region(empty_mask, (0, 0)).all()

    def test_wall_splits_field(self, empty_mask):
        empty_mask[10, :] = True

        region = reachable_region(empty_mask, (0, 0))

        assert region.sum() == 10 * 21
        assert not region[11:, :].any()

    def test_diagonal_gap_does_not_connect(self, empty_mask):
        # Enclose (5, 5) orthogonally; diagonals stay free
        for x, y in [(4, 5), (6, 5), (5, 4), (5, 6)]:
            empty_mask[x, y] = True

        assert reachable_region(empty_mask, (5, 5)).sum() == 1
        assert not reachable_region(empty_mask, (0, 0))[5, 5]

    def test_occupied_or_outside_seed(self, empty_mask):
        empty_mask[2, 2] = True

        assert not reachable_region(empty_mask, (2, 2)).any()
        assert not reachable_region(empty_mask, (-1, 0)).any()


class TestGraph:

    def test_one_node_per_free_cell(self, empty_mask):
        empty_mask[3, 4] = True
        empty_mask[0, 0] = True

        graph = build_graph(empty_mask)

        assert len(graph) == 27 * 21 - 2
        assert (3, 4) not in graph
        assert all(node.key == key for key, node in graph.items())

    def test_fresh_nodes_are_unreached(self, empty_mask):
        graph = build_graph(empty_mask)

        node = graph[(10, 10)]
        assert math.isinf(node.distance)
        assert node.previous is None

    def test_neighbor_counts(self, empty_mask):
        graph = build_graph(empty_mask)

        assert len(graph[(0, 0)].neighbors) == 2
        assert len(graph[(0, 10)].neighbors) == 3
        assert len(graph[(10, 10)].neighbors) == 4

    def test_neighbors_are_shared_nodes(self, empty_mask):
        graph = build_graph(empty_mask)

        for node in graph[(10, 10)].neighbors:
            assert graph[node.key] is node

    def test_adjacency_is_symmetric(self):
        rng = np.random.default_rng(5)
        mask = rng.random((27, 21)) < 0.3

        graph = build_graph(mask)

        for node in graph.values():
            for neighbor in node.neighbors:
                assert node in neighbor.neighbors
                assert abs(node.x - neighbor.x) + abs(node.y - neighbor.y) == 1

    def test_occupied_cells_are_not_linked(self, empty_mask):
        empty_mask[11, 10] = True

        graph = build_graph(empty_mask)

        assert (11, 10) not in [n.key for n in graph[(10, 10)].neighbors]

    def test_bounds(self):
        assert is_within_bounds(0, 0, 27, 21)
        assert is_within_bounds(26, 20, 27, 21)
        assert not is_within_bounds(27, 0, 27, 21)
        assert not is_within_bounds(0, -1, 27, 21)
