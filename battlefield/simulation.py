"""
Turn-based battle simulation between two armies.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .config import BattleConfig, DEFAULT_BATTLE_CONFIG
from .units import Army, Unit

AttackFn = Callable[[Unit, Unit], None]
BattleLogFn = Callable[[Unit, Unit], None]


@dataclass
class BattleResult:
    """Outcome of a simulated battle."""
    rounds: int
    winner: Optional[str]  # "player", "computer", or None when the round cap was hit
    player_survivors: List[Unit] = field(default_factory=list)
    computer_survivors: List[Unit] = field(default_factory=list)


def strike(attacker: Unit, target: Unit) -> None:
    """
    Default attack: base attack scaled by type bonuses.

    attacker.attack_bonuses[target.unit_type] multiplies the damage,
    target.defence_bonuses[attacker.attack_type] divides it. At least one
    point of damage is always dealt.
    """
    damage = attacker.base_attack
    damage *= attacker.attack_bonuses.get(target.unit_type, 1.0)
    damage /= target.defence_bonuses.get(attacker.attack_type, 1.0) or 1.0
    target.take_damage(max(1, int(round(damage))))


def print_battle_log(attacker: Unit, target: Unit) -> None:
    status = "killed" if not target.alive else f"{target.health} hp left"
    print(f"  {attacker.name} -> {target.name} ({status})")


def simulate_battle(player_army: Army, computer_army: Army,
                    attack: AttackFn = strike,
                    battle_log: BattleLogFn = print_battle_log,
                    config: BattleConfig = DEFAULT_BATTLE_CONFIG) -> BattleResult:
    """
    Run alternating attack phases until one side is wiped out.

    Args:
        player_army: Army that attacks first each round
        computer_army: Army that answers
        attack: Callable applying one attack to a target
        battle_log: Callable reporting each attack after it lands
        config: Round cap

    Returns:
        BattleResult with round count, winner and survivors
    """
    player_units = _battle_order(player_army)
    computer_units = _battle_order(computer_army)

    rounds = 0
    while _has_alive(player_units) and _has_alive(computer_units) and rounds < config.max_rounds:
        rounds += 1

        _attack_phase(player_units, computer_units, attack, battle_log)
        if not _has_alive(computer_units):
            break

        _attack_phase(computer_units, player_units, attack, battle_log)

    player_survivors = [u for u in player_units if u.alive]
    computer_survivors = [u for u in computer_units if u.alive]

    winner = None
    if not computer_survivors and player_survivors:
        winner = "player"
    elif not player_survivors and computer_survivors:
        winner = "computer"

    return BattleResult(rounds, winner, player_survivors, computer_survivors)


def _battle_order(army: Army) -> List[Unit]:
    """Living units, strongest attack first."""
    units = army.alive_units()
    units.sort(key=lambda u: u.base_attack, reverse=True)
    return units


def _has_alive(units: List[Unit]) -> bool:
    return any(unit.alive for unit in units)


def _attack_phase(attackers: List[Unit], defenders: List[Unit],
                  attack: AttackFn, battle_log: BattleLogFn) -> None:
    """
    Each living attacker hits the next living defender.

    A single cursor walks the defenders for the whole phase, so attackers
    spread over the defending line. Dead defenders are dropped as the
    cursor passes them.
    """
    cursor = 0
    for attacker in attackers:
        if not attacker.alive:
            continue

        while cursor < len(defenders):
            target = defenders[cursor]
            if not target.alive:
                del defenders[cursor]
                continue

            attack(attacker, target)
            battle_log(attacker, target)

            if target.alive:
                cursor += 1
            else:
                del defenders[cursor]
            break
