"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import numpy as np
import pytest
from scipy.sparse import lil_matrix
from scipy.sparse.csgraph import shortest_path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from battlefield.graph import DIRECTIONS
from battlefield.units import Unit


@pytest.fixture
def make_unit():
    """
    Factory for placed units with sensible default stats.
    """
    def _make(x, y, name=None, alive=True, **stats):
        fields = dict(unit_type="Knight", health=100, base_attack=10, cost=10)
        fields.update(stats)
        return Unit(name=name or f"{fields['unit_type']} @{x},{y}", x=x, y=y, alive=alive, **fields)
    return _make


@pytest.fixture
def unit_catalog():
    """
    Three unit templates with distinct effectiveness.
    """
    return [
        Unit("Pikeman", "Pikeman", health=80, base_attack=15, cost=20),   # 4.75 per point
        Unit("Knight", "Knight", health=120, base_attack=20, cost=30),    # ~4.67 per point
        Unit("Archer", "Archer", health=50, base_attack=30, cost=25, attack_type="ranged"),  # 3.2 per point
    ]


@pytest.fixture
def shortest_distance():
    """
    Independent shortest-path oracle over an occupancy mask.

    Returns a callable (mask, start, goal) -> number of steps, or inf.
    """
    def _distance(occupancy_mask, start, goal):
        width, height = occupancy_mask.shape
        adjacency = lil_matrix((width * height, width * height))
        for x in range(width):
            for y in range(height):
                if occupancy_mask[x, y]:
                    continue
                for dx, dy in DIRECTIONS:
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < width and 0 <= ny < height and not occupancy_mask[nx, ny]:
                        adjacency[x * height + y, nx * height + ny] = 1
        distances = shortest_path(adjacency.tocsr(), unweighted=True,
                                  indices=start[0] * height + start[1])
        return float(distances[goal[0] * height + goal[1]])
    return _distance


def assert_valid_path(path, start, goal):
    """Path runs start -> goal in orthogonal single steps."""
    assert path[0] == start
    assert path[-1] == goal
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1
    assert len(set(path)) == len(path)


@pytest.fixture
def valid_path():
    return assert_valid_path


@pytest.fixture
def empty_mask():
    return np.zeros((27, 21), dtype=bool)
