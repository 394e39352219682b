from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional


SLOT_ORDER: tuple[str, ...] = ("propulsion", "hull", "utility")
MODULE_SLOT_LABELS: Dict[str, str] = {
    "propulsion": "Propulsion",
    "hull": "Coque",
    "utility": "Soute",
}

TRAVEL_TIME_FACTOR = 10


@dataclass(frozen=True)
class ShipStats:
    speed: int = 0
    cargo: int = 0
    defense: int = 0


@dataclass(frozen=True)
class Module:
    slot: str
    name: str
    speed_bonus: int = 0
    cargo_bonus: int = 0
    defense_bonus: int = 0
    summary: str = ""
    slot_label: str = ""

    def bonus_descriptors(self) -> list[str]:
        descriptors = []
        if self.speed_bonus:
            descriptors.append(f"Vitesse +{self.speed_bonus}")
        if self.cargo_bonus:
            descriptors.append(f"Cargo +{self.cargo_bonus}")
        if self.defense_bonus:
            descriptors.append(f"Défense +{self.defense_bonus}")
        return descriptors


@dataclass(frozen=True)
class ShipBlueprint:
    call_sign: str
    codename: str
    ship_class: str
    role: str
    summary: str
    base_stats: ShipStats
    modules: Dict[str, Module] = field(default_factory=dict)


@dataclass(frozen=True)
class InstallRecord:
    slot: str
    name: str


@dataclass
class Starship:
    id: str
    call_sign: str
    codename: str
    ship_class: str
    role: str
    summary: str
    base_stats: ShipStats = field(default_factory=ShipStats)
    location: str = ""
    modules: Dict[str, Module] = field(default_factory=dict)
    history: List[InstallRecord] = field(default_factory=list)
    stats: ShipStats = field(default_factory=ShipStats)

    def __post_init__(self) -> None:
        self.update_derived_stats()

    @classmethod
    def from_blueprint(cls, ship_id: str, blueprint: ShipBlueprint, spawn_region: str) -> "Starship":
        # Modules start empty; blueprint modules go through install_module.
        return cls(
            id=ship_id,
            call_sign=blueprint.call_sign,
            codename=blueprint.codename,
            ship_class=blueprint.ship_class,
            role=blueprint.role,
            summary=blueprint.summary,
            base_stats=blueprint.base_stats,
            location=spawn_region,
        )

    def update_derived_stats(self) -> ShipStats:
        installed = list(self.modules.values())
        self.stats = ShipStats(
            speed=self.base_stats.speed + sum(module.speed_bonus for module in installed),
            cargo=self.base_stats.cargo + sum(module.cargo_bonus for module in installed),
            defense=self.base_stats.defense + sum(module.defense_bonus for module in installed),
        )
        return self.stats

    def install_module(self, slot: str, module: Optional[Module]) -> None:
        if not slot or module is None:
            return
        self.modules[slot] = module
        self.history.append(InstallRecord(slot=slot, name=module.name))
        self.update_derived_stats()

    def module_summaries(self) -> list[str]:
        lines: list[str] = []
        for slot in SLOT_ORDER:
            label = MODULE_SLOT_LABELS.get(slot, slot)
            module = self.modules.get(slot)
            if module is None:
                lines.append(f"{label} : [Module non assigné]")
                continue
            descriptors = module.bonus_descriptors()
            suffix = f" ({', '.join(descriptors)})" if descriptors else ""
            lines.append(f"{label} : {module.name}{suffix}")
            if module.summary:
                lines.append(f"    → {module.summary}")
        return lines

    def travel_time(self, distance_units: int) -> int:
        if distance_units <= 0:
            return 0
        speed = max(1, self.stats.speed)
        # round half up, not Python's banker's rounding
        return max(1, math.floor(distance_units * TRAVEL_TIME_FACTOR / speed + 0.5))
