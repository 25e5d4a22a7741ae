"""
Shortest-path search for units on the battlefield grid.
"""

from heapq import heappush, heappop
from itertools import count
from typing import Dict, Iterable, List, Tuple

from .config import DEFAULT_FIELD_CONFIG
from .graph import Cell, Node, build_graph
from .occupancy import build_occupancy_mask


def find_path(mover, destination, roster: Iterable) -> List[Cell]:
    """
    Shortest 4-directional path from mover to destination.

    Living units other than the two endpoints block their cells. The graph
    is rebuilt from the roster on every call.

    Args:
        mover: Unit that moves (needs x, y, alive)
        destination: Unit to reach
        roster: All placed units

    Returns:
        List of (x, y) cells from mover to destination inclusive,
        or an empty list if no path exists
    """
    occupancy_mask = build_occupancy_mask(roster, mover, destination, DEFAULT_FIELD_CONFIG)
    graph = build_graph(occupancy_mask)
    return search(graph, (mover.x, mover.y), (destination.x, destination.y))


def search(graph: Dict[Cell, Node], start: Cell, goal: Cell) -> List[Cell]:
    """
    Uniform-cost search over a node graph with unit edge weights.

    Args:
        graph: Mapping of (x, y) -> Node, freshly built
        start: Start cell
        goal: Goal cell

    Returns:
        Path as a list of cells, or an empty list if start/goal are not in
        the graph or the goal cannot be reached
    """
    if start not in graph or goal not in graph:
        return []

    start_node = graph[start]
    start_node.distance = 0

    # Counter keeps heap entries comparable and preserves insertion order on ties
    order = count()
    open_set: List[Tuple[float, int, Node]] = []
    heappush(open_set, (0, next(order), start_node))

    while open_set:
        distance, _, current = heappop(open_set)
        if distance > current.distance:
            continue  # stale

        if current.key == goal:
            return reconstruct_path(current)

        for neighbor in current.neighbors:
            tentative = current.distance + 1
            if tentative < neighbor.distance:
                neighbor.distance = tentative
                neighbor.previous = current
                heappush(open_set, (tentative, next(order), neighbor))

    return []


def reconstruct_path(node: Node) -> List[Cell]:
    """Walk predecessor links back to the start and return start -> node."""
    path = []
    current = node
    while current is not None:
        path.append(current.key)
        current = current.previous
    path.reverse()
    return path


def path_length(path: List[Cell]) -> int:
    """Number of steps in a path."""
    return max(len(path) - 1, 0)


def advance_along_path(unit, path: List[Cell], steps: int) -> Cell:
    """
    Move a unit up to `steps` cells along a path.

    The last cell of the path belongs to the target and is never entered.

    Returns:
        The unit's cell after moving
    """
    if len(path) >= 2 and steps > 0:
        index = min(steps, len(path) - 2)
        unit.x, unit.y = path[index]
    return (unit.x, unit.y)
