"""
Selection of defenders that can be attacked from their formation.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from .units import Unit


def find_suitable_units(units_by_row: List[List[Unit]], is_left_army_target: bool) -> List[Unit]:
    """
    Living units not shielded by a living neighbour on the attacker's side.

    Args:
        units_by_row: Rows of units, each ordered along the row
        is_left_army_target: True when the left (computer) army is attacked,
            so the open flank is at the end of each row; False when the
            right (player) army is attacked and the open flank is the start

    Returns:
        Attackable units, row by row
    """
    suitable = []

    for row in units_by_row:
        for i, unit in enumerate(row):
            if not unit.alive:
                continue

            if is_left_army_target:
                exposed = i == len(row) - 1 or not row[i + 1].alive
            else:
                exposed = i == 0 or not row[i - 1].alive

            if exposed:
                suitable.append(unit)

    return suitable


def group_units_by_row(units: Iterable[Unit]) -> List[List[Unit]]:
    """Group units by y coordinate, each row sorted by x."""
    rows: Dict[int, List[Unit]] = defaultdict(list)
    for unit in units:
        rows[unit.y].append(unit)
    return [sorted(rows[y], key=lambda u: u.x) for y in sorted(rows)]
