"""
Army preset generation within a point budget.
"""

import random
from typing import Dict, List, Optional, Set

from .config import (
    PresetConfig,
    FieldConfig,
    DEFAULT_PRESET_CONFIG,
    DEFAULT_FIELD_CONFIG,
)
from .graph import Cell
from .units import Army, Unit


def generate_preset(unit_catalog: List[Unit], max_points: int,
                    config: PresetConfig = DEFAULT_PRESET_CONFIG,
                    field: FieldConfig = DEFAULT_FIELD_CONFIG,
                    rng: Optional[random.Random] = None) -> Army:
    """
    Greedily buy the most cost-effective units and place them.

    Args:
        unit_catalog: Unit templates, one per type
        max_points: Point budget
        config: Per-type limit and deployment width
        field: Battlefield dimensions (height bounds placement)
        rng: Random source for placement, or None for a fresh one

    Returns:
        Army with the purchased units and the points spent
    """
    for template in unit_catalog:
        if template.cost <= 0:
            raise ValueError(f"Unit type {template.unit_type!r} has non-positive cost {template.cost}")

    templates = sorted(unit_catalog, key=lambda u: u.effectiveness, reverse=True)

    selected: List[Unit] = []
    spent = 0
    type_counts: Dict[str, int] = {}

    for template in templates:
        count = type_counts.get(template.unit_type, 0)
        to_add = min(config.max_units_per_type - count, (max_points - spent) // template.cost)

        for _ in range(max(to_add, 0)):
            count += 1
            selected.append(template.copy_as(f"{template.unit_type} {count}"))
            spent += template.cost
        type_counts[template.unit_type] = count

    assign_coordinates(selected, config, field, rng)
    return Army(units=selected, points=spent)


def assign_coordinates(units: List[Unit],
                       config: PresetConfig = DEFAULT_PRESET_CONFIG,
                       field: FieldConfig = DEFAULT_FIELD_CONFIG,
                       rng: Optional[random.Random] = None) -> None:
    """Place units on distinct random cells inside the deployment columns."""
    capacity = config.deploy_width * field.height
    if len(units) > capacity:
        raise ValueError(f"Cannot place {len(units)} units in {capacity} deployment cells")

    rng = rng or random.Random()
    used: Set[Cell] = set()

    for unit in units:
        while True:
            cell = (rng.randrange(config.deploy_width), rng.randrange(field.height))
            if cell not in used:
                break
        used.add(cell)
        unit.move_to(cell)


def mirror_to_right_flank(army: Army, field: FieldConfig = DEFAULT_FIELD_CONFIG) -> Army:
    """Reflect an army's placement onto the opposite side of the field."""
    for unit in army.units:
        unit.x = field.width - 1 - unit.x
    return army
