from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List


DEFAULT_START_REGION = "Nébuleuse des Voiles"

BASE_XP_THRESHOLD = 100
XP_THRESHOLD_STEP = 50
LEVEL_UP_HEALTH_FACTOR = 1.12
LEVEL_UP_MANA_FACTOR = 1.1
LEVEL_UP_POWER_GAIN = 2


@dataclass(frozen=True)
class ArchetypePreset:
    health: int
    mana: int
    power: int
    description: str


ARCHETYPE_PRESETS: Dict[str, ArchetypePreset] = {
    "Gardien": ArchetypePreset(health=160, mana=40, power=14, description="Officier défensif polyvalent"),
    "Mage": ArchetypePreset(health=120, mana=80, power=18, description="Technomancien à haut rendement"),
    "Rodeur": ArchetypePreset(health=140, mana=55, power=16, description="Opérateur de drones longue portée"),
}
DEFAULT_ARCHETYPE = "Gardien"

_logger = logging.getLogger(__name__)


@dataclass
class ActorStats:
    max_health: int
    health: int
    max_mana: int
    mana: int
    power: int


@dataclass
class Inventory:
    resources: Dict[str, int] = field(default_factory=dict)
    items: Dict[str, int] = field(default_factory=dict)
    quest_items: Dict[str, int] = field(default_factory=dict)


@dataclass
class Actor:
    name: str
    archetype: str
    description: str
    stats: ActorStats
    level: int = 1
    experience: int = 0
    location: str = DEFAULT_START_REGION
    inventory: Inventory = field(default_factory=Inventory)
    log: List[str] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, archetype: str, *, location: str = DEFAULT_START_REGION) -> "Actor":
        preset = ARCHETYPE_PRESETS.get(archetype) or ARCHETYPE_PRESETS[DEFAULT_ARCHETYPE]
        stats = ActorStats(
            max_health=preset.health,
            health=preset.health,
            max_mana=preset.mana,
            mana=preset.mana,
            power=preset.power,
        )
        return cls(name=name, archetype=archetype, description=preset.description, stats=stats, location=location)

    def add_log(self, message: str) -> str:
        entry = f"[Niveau {self.level}] {message}"
        self.log.append(entry)
        _logger.info(entry, extra={"actor": self.name})
        return entry

    def experience_threshold(self) -> int:
        return BASE_XP_THRESHOLD + (self.level - 1) * XP_THRESHOLD_STEP

    def gain_experience(self, amount: int) -> int:
        """Add experience and apply every level-up it pays for; returns levels gained."""
        if amount <= 0:
            return 0
        self.experience += amount
        self.add_log(f"Gagne {format_number(amount)} XP")

        gained = 0
        while self.experience >= self.experience_threshold():
            self.experience -= self.experience_threshold()
            self.level += 1
            gained += 1
            stats = self.stats
            stats.max_health = math.floor(stats.max_health * LEVEL_UP_HEALTH_FACTOR)
            stats.health = stats.max_health
            stats.power += LEVEL_UP_POWER_GAIN
            stats.max_mana = math.floor(stats.max_mana * LEVEL_UP_MANA_FACTOR)
            stats.mana = stats.max_mana
            self.add_log("Monte de niveau ! Santé et mana restaurées.")
        return gained

    def resource_count(self, resource_name: str) -> int:
        return int(self.inventory.resources.get(resource_name, 0))

    def add_resource(self, resource_name: str, amount: int) -> None:
        self.inventory.resources[resource_name] = self.resource_count(resource_name) + amount
        self.add_log(f"Obtient {amount} × {resource_name}")

    def add_item(self, item_name: str) -> None:
        self.inventory.items[item_name] = self.inventory.items.get(item_name, 0) + 1
        self.add_log(f"Reçoit l'objet : {item_name}")

    def add_quest_item(self, item_name: str) -> None:
        self.inventory.quest_items[item_name] = self.inventory.quest_items.get(item_name, 0) + 1
        self.add_log(f"Objet de quête obtenu : {item_name}")

    def restore(self, rest_ratio: float) -> tuple[int, int]:
        stats = self.stats
        health_restored = max(1, math.floor(stats.max_health * rest_ratio))
        mana_restored = max(1, math.floor(stats.max_mana * rest_ratio))
        stats.health = min(stats.max_health, stats.health + health_restored)
        stats.mana = min(stats.max_mana, stats.mana + mana_restored)
        self.add_log(f"Se repose et récupère {health_restored} PV / {mana_restored} PM")
        return health_restored, mana_restored


def format_number(number: int) -> str:
    """Group thousands with a plain space, e.g. 12345 -> '12 345'."""
    return f"{int(number):,}".replace(",", " ")
