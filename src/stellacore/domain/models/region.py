from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class ResourceSpec:
    min_amount: int
    max_amount: int
    xp: int
    summary: str = ""

    def __post_init__(self) -> None:
        if int(self.min_amount) < 1:
            raise ValueError("Resource minimum must be at least 1")
        if int(self.max_amount) < int(self.min_amount):
            raise ValueError("Resource maximum cannot be below its minimum")


@dataclass(frozen=True)
class DropEntry:
    chance: float
    amount: int = 1

    def __post_init__(self) -> None:
        if not 0.0 <= float(self.chance) <= 1.0:
            raise ValueError("Drop chance must be within [0, 1]")
        if int(self.amount) < 1:
            raise ValueError("Drop amount must be at least 1")


@dataclass(frozen=True)
class EnemyTemplate:
    health: int
    power: int
    xp: int
    summary: str = ""
    drops: Mapping[str, DropEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if int(self.health) < 1:
            raise ValueError("Enemy health must be at least 1")
        # floor(power * 0.6) is the enemy's minimum hit; it must stay >= 1
        # or a fight against an untouchable actor never ends.
        if int(self.power) < 2:
            raise ValueError("Enemy power must be at least 2")


@dataclass(frozen=True)
class Region:
    description: str
    resources: Dict[str, ResourceSpec] = field(default_factory=dict)
    enemies: Dict[str, EnemyTemplate] = field(default_factory=dict)
    sanctuaries: Tuple[str, ...] = ()

    def resource_names(self) -> list[str]:
        return list(self.resources.keys())

    def has_sanctuary(self, sanctuary_name: str) -> bool:
        return sanctuary_name in self.sanctuaries
