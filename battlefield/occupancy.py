"""
Occupancy grid generation for the battlefield.
"""

from typing import Dict, Iterable, Tuple

import numpy as np
from scipy import ndimage

from .config import FieldConfig, DEFAULT_FIELD_CONFIG


def build_occupancy_mask(roster: Iterable, mover, destination,
                         field: FieldConfig = DEFAULT_FIELD_CONFIG) -> np.ndarray:
    """
    Mark cells blocked by living units.

    Args:
        roster: All placed units, mover and destination included
        mover: Unit that is looking for a path
        destination: Unit the mover is heading for
        field: Battlefield dimensions

    Returns:
        occupancy_mask: Boolean array (width, height) indexed [x, y],
            True where a living unit other than mover/destination stands
    """
    occupied = np.zeros((field.width, field.height), dtype=bool)

    for unit in roster:
        if not unit.alive or unit is mover or unit is destination:
            continue
        if 0 <= unit.x < field.width and 0 <= unit.y < field.height:
            occupied[unit.x, unit.y] = True

    # Endpoints never block themselves, even with stale entries on top of them
    for endpoint in (mover, destination):
        if 0 <= endpoint.x < field.width and 0 <= endpoint.y < field.height:
            occupied[endpoint.x, endpoint.y] = False

    return occupied


def occupancy_stats(occupancy_mask: np.ndarray) -> Dict[str, int]:
    """Count free and occupied cells."""
    occupied = int(occupancy_mask.sum())
    total = int(occupancy_mask.size)
    return {
        'free': total - occupied,
        'occupied': occupied,
        'total': total,
    }


def reachable_region(occupancy_mask: np.ndarray, cell: Tuple[int, int]) -> np.ndarray:
    """
    Free cells 4-connected to the given cell.

    Args:
        occupancy_mask: Boolean array (width, height), True = occupied
        cell: (x, y) seed cell

    Returns:
        Boolean array of the same shape; all False if the seed cell is
        outside the grid or occupied
    """
    region = np.zeros_like(occupancy_mask, dtype=bool)
    x, y = cell
    width, height = occupancy_mask.shape
    if not (0 <= x < width and 0 <= y < height) or occupancy_mask[x, y]:
        return region

    # Orthogonal connectivity only
    structure = ndimage.generate_binary_structure(2, 1)
    labels, _ = ndimage.label(~occupancy_mask, structure=structure)
    return labels == labels[x, y]
