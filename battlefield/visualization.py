"""
Battlefield rendering and Rerun viewer setup.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np
import rerun as rr

from .config import VisualizationConfig, DEFAULT_VISUALIZATION_CONFIG
from .graph import is_within_bounds


def create_battlefield_image(occupancy_mask: np.ndarray,
                             path: Optional[List[Tuple[int, int]]] = None,
                             mover=None, target=None,
                             config: VisualizationConfig = DEFAULT_VISUALIZATION_CONFIG) -> np.ndarray:
    """
    Create colored top-down image of the battlefield.

    Args:
        occupancy_mask: Boolean array (width, height), True = occupied
        path: Optional list of (x, y) cells to highlight
        mover: Optional unit drawn with the mover color
        target: Optional unit drawn with the target color
        config: Cell size and palette

    Returns:
        Colored image array (height * px, width * px, 3) with uint8 dtype
    """
    colors = config.colors
    # Image rows follow y, columns follow x
    grid = occupancy_mask.T
    grid_viz = np.zeros((*grid.shape, 3), dtype=np.uint8)
    grid_viz[~grid] = colors['free']
    grid_viz[grid] = colors['occupied']

    for cell in path or []:
        _paint(grid_viz, cell, colors['path'])
    if mover is not None:
        _paint(grid_viz, (mover.x, mover.y), colors['mover'])
    if target is not None:
        _paint(grid_viz, (target.x, target.y), colors['target'])

    px = config.cell_pixels
    return np.repeat(np.repeat(grid_viz, px, axis=0), px, axis=1)


def _paint(grid_viz: np.ndarray, cell: Tuple[int, int], color) -> None:
    """Color one cell; cells outside the field are skipped."""
    x, y = cell
    height, width = grid_viz.shape[:2]
    if is_within_bounds(x, y, width, height):
        grid_viz[y, x] = color


def cell_centers(cells: Iterable[Tuple[int, int]], cell_pixels: int) -> np.ndarray:
    """Pixel coordinates of cell centers in the rendered image."""
    cells = np.asarray(list(cells), dtype=np.float32).reshape(-1, 2)
    return (cells + 0.5) * cell_pixels


def setup_battlefield_viewer_blueprint():
    """
    Set up the blueprint for the battlefield viewer.

    Returns:
        Blueprint configuration for Rerun viewer
    """
    blueprint = rr.blueprint.Blueprint(
        rr.blueprint.Horizontal(
            rr.blueprint.Spatial2DView(name="Battlefield (Top-Down)", origin="battlefield"),
        ),
        collapse_panels=False,
    )
    return blueprint


def log_battlefield(occupancy_mask: np.ndarray, units, path=None, mover=None, target=None,
                    config: VisualizationConfig = DEFAULT_VISUALIZATION_CONFIG):
    """
    Log grid, units and path to an initialized Rerun recording.

    Args:
        occupancy_mask: Boolean array (width, height), True = occupied
        units: Units to draw as labelled points
        path: Optional list of (x, y) cells
        mover: Optional unit highlighted as the mover
        target: Optional unit highlighted as the target
        config: Cell size and palette
    """
    px = config.cell_pixels
    rr.log("battlefield/grid", rr.Image(create_battlefield_image(occupancy_mask, path, mover, target, config)))

    living = [unit for unit in units if unit.alive]
    if living:
        rr.log(
            "battlefield/units",
            rr.Points2D(
                positions=cell_centers([unit.cell for unit in living], px),
                radii=np.full(len(living), px * 0.3),
                labels=[unit.name for unit in living],
            )
        )

    if path:
        path_color = np.array(config.colors['path']) / 255.0
        rr.log(
            "battlefield/path",
            rr.LineStrips2D(
                [cell_centers(path, px)],
                colors=np.array([path_color]),
                radii=np.array([px * 0.15])
            )
        )
