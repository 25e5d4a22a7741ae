"""
Tests for battlefield rendering.
"""

import numpy as np

from battlefield.config import VisualizationConfig
from battlefield.visualization import create_battlefield_image, cell_centers


def test_image_shape(empty_mask):
    image = create_battlefield_image(empty_mask, config=VisualizationConfig(cell_pixels=4))

    assert image.shape == (21 * 4, 27 * 4, 3)
    assert image.dtype == np.uint8


def test_cells_are_colored(empty_mask, make_unit):
    config = VisualizationConfig(cell_pixels=1)
    empty_mask[3, 1] = True
    mover, target = make_unit(0, 0), make_unit(2, 0)

    image = create_battlefield_image(empty_mask, [(0, 0), (1, 0), (2, 0)], mover, target, config)

    # Rows follow y, columns follow x
    assert tuple(image[1, 3]) == config.colors['occupied']
    assert tuple(image[5, 5]) == config.colors['free']
    assert tuple(image[0, 1]) == config.colors['path']
    assert tuple(image[0, 0]) == config.colors['mover']
    assert tuple(image[0, 2]) == config.colors['target']


def test_cell_centers():
    centers = cell_centers([(0, 0), (2, 1)], 10)

    assert centers.tolist() == [[5.0, 5.0], [25.0, 15.0]]


def test_out_of_field_mover_is_not_drawn(empty_mask, make_unit):
    config = VisualizationConfig(cell_pixels=1)
    mover, target = make_unit(30, 5), make_unit(2, 0)

    image = create_battlefield_image(empty_mask, [], mover, target, config)

    assert image.shape == (21, 27, 3)
    assert tuple(image[0, 2]) == config.colors['target']
    assert not (image == config.colors['mover']).all(axis=-1).any()


def test_negative_coordinates_do_not_wrap(empty_mask, make_unit):
    config = VisualizationConfig(cell_pixels=1)
    mover = make_unit(-1, 0)

    image = create_battlefield_image(empty_mask, [(-1, 0), (0, -1), (27, 21)], mover, None, config)

    assert tuple(image[0, 26]) == config.colors['free']
    assert tuple(image[20, 0]) == config.colors['free']
    assert not (image == config.colors['mover']).all(axis=-1).any()
    assert not (image == config.colors['path']).all(axis=-1).any()
