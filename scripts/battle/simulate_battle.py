#!/usr/bin/env python3
"""
Simulate battles between two generated armies.

Both armies are bought from the same unit catalog with the same point
budget; the computer army is mirrored onto the right flank.
"""

import argparse
import random
import sys
from collections import Counter
from pathlib import Path

from tqdm import tqdm

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from battlefield.config import BattleConfig
from battlefield.io_utils import load_units, save_json
from battlefield.presets import generate_preset, mirror_to_right_flank
from battlefield.simulation import simulate_battle, print_battle_log


def quiet_log(attacker, target):
    pass


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Simulate battles between generated armies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One battle with a full attack log
  python simulate_battle.py -i catalog.json --points 1500 --verbose

  # Win rates over many seeded battles
  python simulate_battle.py -i catalog.json --battles 200 --seed 7 -o results.json
        """
    )

    parser.add_argument("-i", "--input", type=Path, required=True, help="Unit catalog JSON file")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for results")
    parser.add_argument("--points", type=int, default=1500, help="Point budget per army (default: 1500)")
    parser.add_argument("--battles", type=int, default=1, help="Number of battles to run (default: 1)")
    parser.add_argument("--max-rounds", type=int, default=1000, help="Round cap per battle (default: 1000)")
    parser.add_argument("--seed", type=int, help="Random seed for unit placement")
    parser.add_argument("--verbose", action="store_true", help="Print every attack")

    args = parser.parse_args(argv)

    if not args.input.exists():
        print(f"Error: {args.input} does not exist")
        return 1
    if args.battles < 1:
        print("Error: --battles must be at least 1")
        return 1

    try:
        catalog = load_units(args.input)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    if not catalog:
        print("Error: unit catalog is empty")
        return 1

    rng = random.Random(args.seed)
    config = BattleConfig(max_rounds=args.max_rounds)
    battle_log = print_battle_log if args.verbose else quiet_log

    print(f"Simulating {args.battles} battle(s) at {args.points} points...")
    print("=" * 60)

    outcomes = Counter()
    results = []
    for _ in tqdm(range(args.battles), desc="Simulating battles", disable=args.battles == 1):
        try:
            player = generate_preset(catalog, args.points, rng=rng)
            computer = mirror_to_right_flank(generate_preset(catalog, args.points, rng=rng))
        except ValueError as e:
            print(f"Error: {e}")
            return 1

        result = simulate_battle(player, computer, battle_log=battle_log, config=config)
        outcomes[result.winner or "draw"] += 1
        results.append({
            'winner': result.winner,
            'rounds': result.rounds,
            'player_points': player.points,
            'computer_points': computer.points,
            'player_survivors': [u.name for u in result.player_survivors],
            'computer_survivors': [u.name for u in result.computer_survivors],
        })

    print("\n" + "=" * 60)
    print("✓ Simulation complete")
    for label in ("player", "computer", "draw"):
        print(f"   {label.capitalize():<9} {outcomes[label]:>5} ({100 * outcomes[label] / args.battles:.1f}%)")
    if args.battles == 1:
        print(f"   Rounds:   {results[0]['rounds']}")

    if args.output and save_json({'battles': results, 'outcomes': dict(outcomes)}, args.output):
        print(f"\n✓ Exported results to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
