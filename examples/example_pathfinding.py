#!/usr/bin/env python3
"""
Example: Finding a path for an attacker through a crowded battlefield.

This demonstrates how to generate two armies, pick an exposed target,
plan a path to it and move the attacker part of the way.
"""

import random
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from battlefield import (
    Unit,
    generate_preset,
    mirror_to_right_flank,
    group_units_by_row,
    find_suitable_units,
    build_occupancy_mask,
    find_path,
    path_length,
    advance_along_path,
    create_battlefield_image,
    save_image,
)


CATALOG = [
    Unit("Knight", "Knight", health=120, base_attack=20, cost=30),
    Unit("Archer", "Archer", health=50, base_attack=30, cost=25, attack_type="ranged"),
    Unit("Pikeman", "Pikeman", health=80, base_attack=15, cost=20),
]


def pathfinding_example(points: int = 600, seed: int = 3, steps: int = 5, image_path: Optional[Path] = None):
    """Example of planning an approach for one attacker."""
    rng = random.Random(seed)

    print(f"Generating armies ({points} points each)...")
    player = generate_preset(CATALOG, points, rng=rng)
    computer = mirror_to_right_flank(generate_preset(CATALOG, points, rng=rng))
    roster = player.units + computer.units
    print(f"  Player: {len(player.units)} units, computer: {len(computer.units)} units")

    # The computer army stands on the right, its open flank faces left
    targets = find_suitable_units(group_units_by_row(computer.units), is_left_army_target=False)
    print(f"  Exposed targets: {len(targets)}")

    attacker = player.units[0]
    target = min(targets, key=lambda u: abs(u.x - attacker.x) + abs(u.y - attacker.y))
    print(f"Planning path for {attacker.name} at {attacker.cell} -> {target.name} at {target.cell}...")

    path = find_path(attacker, target, roster)
    if not path:
        print("  No path found")
        return

    print(f"  Path has {path_length(path)} steps")
    new_cell = advance_along_path(attacker, path, steps)
    print(f"  {attacker.name} advances {steps} steps to {new_cell}")

    if image_path is not None:
        occupancy_mask = build_occupancy_mask(roster, attacker, target)
        remaining = find_path(attacker, target, roster)
        save_image(create_battlefield_image(occupancy_mask, remaining, attacker, target), image_path)
        print(f"  Saved battlefield image to {image_path}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Pathfinding example")
    parser.add_argument("--points", type=int, default=600,
                        help="Point budget per army (default: 600)")
    parser.add_argument("--seed", type=int, default=3,
                        help="Random seed for placement (default: 3)")
    parser.add_argument("--steps", type=int, default=5,
                        help="Movement points for the attacker (default: 5)")
    parser.add_argument("--save-image", type=Path,
                        help="Save a battlefield image")
    args = parser.parse_args()

    pathfinding_example(args.points, args.seed, args.steps, args.save_image)
