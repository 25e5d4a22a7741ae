"""
Node graph over the free cells of an occupancy mask.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np

Cell = Tuple[int, int]

# Left, right, down, up
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(eq=False)
class Node:
    """One traversable cell together with its search state."""
    x: int
    y: int
    distance: float = math.inf
    previous: Optional["Node"] = None
    neighbors: List["Node"] = field(default_factory=list, repr=False)

    @property
    def key(self) -> Cell:
        return (self.x, self.y)


def is_within_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def build_graph(occupancy_mask: np.ndarray) -> Dict[Cell, Node]:
    """
    Build the adjacency graph of free cells.

    Every free cell gets exactly one node; each node links to its in-bounds,
    free orthogonal neighbours. Occupied cells never become nodes.

    Args:
        occupancy_mask: Boolean array (width, height), True = occupied

    Returns:
        Mapping of (x, y) -> Node
    """
    width, height = occupancy_mask.shape
    graph: Dict[Cell, Node] = {}

    def node_at(x: int, y: int) -> Node:
        node = graph.get((x, y))
        if node is None:
            node = graph[(x, y)] = Node(x, y)
        return node

    for x in range(width):
        for y in range(height):
            if occupancy_mask[x, y]:
                continue
            node = node_at(x, y)
            for dx, dy in DIRECTIONS:
                nx, ny = x + dx, y + dy
                if is_within_bounds(nx, ny, width, height) and not occupancy_mask[nx, ny]:
                    node.neighbors.append(node_at(nx, ny))

    return graph
