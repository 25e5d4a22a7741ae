"""
Unit and army data types shared by the pathfinder and the battle modules.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

Cell = Tuple[int, int]


@dataclass(eq=False)
class Unit:
    """
    A combat unit placed on the battlefield.

    Units compare by identity: two units with identical stats standing on
    the same cell are still different roster entries.
    """
    name: str
    unit_type: str
    health: int
    base_attack: int
    cost: int
    attack_type: str = "melee"
    attack_bonuses: Dict[str, float] = field(default_factory=dict)
    defence_bonuses: Dict[str, float] = field(default_factory=dict)
    x: int = 0
    y: int = 0
    alive: bool = True

    @property
    def cell(self) -> Cell:
        return (self.x, self.y)

    @property
    def effectiveness(self) -> float:
        """Attack and health bought per point of cost."""
        return self.base_attack / self.cost + self.health / self.cost

    def move_to(self, cell: Cell) -> None:
        self.x, self.y = cell

    def take_damage(self, amount: int) -> None:
        """Apply damage and mark the unit dead once health runs out."""
        self.health -= amount
        if self.health <= 0:
            self.health = 0
            self.alive = False

    def copy_as(self, name: str) -> "Unit":
        """Fresh unit with this unit's stats, a new name and no placement."""
        return Unit(
            name=name,
            unit_type=self.unit_type,
            health=self.health,
            base_attack=self.base_attack,
            cost=self.cost,
            attack_type=self.attack_type,
            attack_bonuses=dict(self.attack_bonuses),
            defence_bonuses=dict(self.defence_bonuses),
        )


@dataclass
class Army:
    """A side in a battle."""
    units: List[Unit] = field(default_factory=list)
    points: int = 0

    def alive_units(self) -> List[Unit]:
        return [unit for unit in self.units if unit.alive]
