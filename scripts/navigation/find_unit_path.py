#!/usr/bin/env python3
"""
Find the shortest path between two units of a battlefield roster.

Reads a roster JSON, blocks every living unit except the two endpoints,
and prints the path. Optionally renders the battlefield to an image,
exports the result as JSON, or streams it to a Rerun viewer.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from battlefield.config import DEFAULT_FIELD_CONFIG
from battlefield.io_utils import load_units, save_json, save_image
from battlefield.occupancy import build_occupancy_mask, occupancy_stats, reachable_region
from battlefield.pathfinding import find_path, path_length


def find_unit(units, name):
    for unit in units:
        if unit.name == name:
            return unit
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find a shortest path between two units on the battlefield",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the path
  python find_unit_path.py -i roster.json --mover "Archer 1" --target "Knight 2"

  # Render the battlefield with the path
  python find_unit_path.py -i roster.json --mover "Archer 1" --target "Knight 2" --save-image path.png

  # Export for another tool
  python find_unit_path.py -i roster.json --mover "Archer 1" --target "Knight 2" -o path.json
        """
    )

    parser.add_argument("-i", "--input", type=Path, required=True, help="Roster JSON file")
    parser.add_argument("--mover", required=True, help="Name of the moving unit")
    parser.add_argument("--target", required=True, help="Name of the target unit")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for the path")
    parser.add_argument("--save-image", type=Path, help="Save a top-down battlefield image")
    parser.add_argument("--visualize", action="store_true", help="Stream the result to a Rerun viewer")

    args = parser.parse_args(argv)

    if not args.input.exists():
        print(f"Error: {args.input} does not exist")
        return 1

    try:
        units = load_units(args.input)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    if units is None:
        return 1

    mover = find_unit(units, args.mover)
    target = find_unit(units, args.target)
    for name, unit in ((args.mover, mover), (args.target, target)):
        if unit is None:
            print(f"Error: no unit named {name!r} in {args.input.name}")
            return 1

    print(f"Finding path on {DEFAULT_FIELD_CONFIG.width}x{DEFAULT_FIELD_CONFIG.height} battlefield...")
    print("=" * 60)
    print(f"  Roster: {len(units)} units ({sum(u.alive for u in units)} alive)")
    print(f"  Mover:  {mover.name} at {mover.cell}")
    print(f"  Target: {target.name} at {target.cell}")

    occupancy_mask = build_occupancy_mask(units, mover, target)
    stats = occupancy_stats(occupancy_mask)
    region = reachable_region(occupancy_mask, mover.cell)
    print(f"  Free cells: {stats['free']:,} ({100 * stats['free'] / stats['total']:.1f}%)")
    print(f"  Reachable from mover: {int(region.sum()):,}")

    path = find_path(mover, target, units)

    if path:
        print(f"\n  ✓ Found path with {path_length(path)} steps")
        print("  " + " -> ".join(f"({x},{y})" for x, y in path))
    else:
        print("\n  ✗ No path found (target blocked or unreachable)")

    if args.output:
        export_data = {
            'mover': mover.name,
            'target': target.name,
            'found': bool(path),
            'steps': path_length(path),
            'path': [{'x': x, 'y': y} for x, y in path],
        }
        if save_json(export_data, args.output):
            print(f"\n✓ Exported path to {args.output}")

    if args.save_image:
        from battlefield.visualization import create_battlefield_image
        image = create_battlefield_image(occupancy_mask, path, mover, target)
        if save_image(image, args.save_image):
            print(f"✓ Saved battlefield image to {args.save_image}")

    if args.visualize:
        import rerun as rr
        from battlefield.visualization import setup_battlefield_viewer_blueprint, log_battlefield

        rr.init("Battlefield Path", spawn=True)
        rr.send_blueprint(setup_battlefield_viewer_blueprint())
        log_battlefield(occupancy_mask, units, path, mover, target)
        print("✓ Sent battlefield to Rerun viewer")

    return 0


if __name__ == "__main__":
    sys.exit(main())
