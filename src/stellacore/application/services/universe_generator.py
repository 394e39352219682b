from __future__ import annotations

import logging
import random
from typing import Dict, Optional, Sequence, Set, Tuple, TypeVar

from stellacore.application.services.balance_tables import (
    BLUEPRINT_RANDOM_SEED_MAX,
    MAX_ENEMIES_PER_REGION,
    MAX_RESOURCES_PER_REGION,
    REGION_NAME_RETRY_CAP,
    SANCTUARY_CHANCE,
    blueprint_base_stats,
    call_sign_number,
)
from stellacore.domain.errors import InternalInvariantViolation
from stellacore.domain.models.region import EnemyTemplate, Region, ResourceSpec
from stellacore.domain.models.starship import Module, ShipBlueprint, ShipStats, SLOT_ORDER
from stellacore.infrastructure.inmemory.catalogs import UniverseCatalog, default_universe_catalog


T = TypeVar("T")

_BLUEPRINT_MODULE_OFFSETS: Dict[str, int] = {"propulsion": 5, "hull": 6, "utility": 7}


def _seeded_pick(items: Sequence[T], seed: int, offset: int = 0) -> T:
    return items[(seed + offset - 1) % len(items)]


class UniverseGenerator:
    """Procedural sectors and ship blueprints drawn from a catalog.

    Region names are unique for the lifetime of the generator: every name it
    hands out (or is told to reserve) lands in ``used_names``. Blueprints are
    a pure function of their seed and never touch that set.
    """

    def __init__(
        self,
        catalog: UniverseCatalog | None = None,
        rng: random.Random | None = None,
        *,
        retry_cap: int = REGION_NAME_RETRY_CAP,
    ) -> None:
        self.catalog = catalog or default_universe_catalog()
        self.rng = rng or random.Random()
        self.retry_cap = max(1, int(retry_cap))
        self.used_names: Set[str] = set()
        self._logger = logging.getLogger(__name__)

    def reserve_name(self, region_name: str) -> None:
        self.used_names.add(region_name)

    def _region_name(self, seed: int) -> str:
        prefixes = self.catalog.sector_prefixes
        for attempt in range(1, self.retry_cap + 1):
            prefix = prefixes[(seed + attempt - 1) % len(prefixes)]
            suffix = self.rng.choice(self.catalog.sector_suffixes)
            numeral = self.rng.choice(self.catalog.roman_numerals)
            name = f"{prefix} {suffix} {numeral}"
            if name not in self.used_names:
                self.used_names.add(name)
                if attempt > 1:
                    self._logger.debug("Region name %s found after %d attempts", name, attempt)
                return name
        raise InternalInvariantViolation(
            f"No unused region name after {self.retry_cap} attempts "
            f"({len(self.used_names)} names in use); the sector catalog is too small"
        )

    def _pick_resources(self) -> Dict[str, ResourceSpec]:
        catalog = self.catalog.resources
        wanted = min(self.rng.randint(1, MAX_RESOURCES_PER_REGION), len(catalog))
        resources: Dict[str, ResourceSpec] = {}
        while len(resources) < wanted:
            candidate = self.rng.choice(catalog)
            if candidate.name in resources:
                continue
            resources[candidate.name] = candidate.spec
        return resources

    def _pick_enemies(self) -> Dict[str, EnemyTemplate]:
        enemies: Dict[str, EnemyTemplate] = {}
        if not self.catalog.enemies:
            return enemies
        if self.rng.randint(0, MAX_ENEMIES_PER_REGION) > 0:
            entry = self.rng.choice(self.catalog.enemies)
            enemies[entry.name] = entry.template
        return enemies

    def generate_region(self, seed: int) -> Tuple[str, Region]:
        name = self._region_name(seed)
        descriptor = self.rng.choice(self.catalog.region_descriptors)
        resources = self._pick_resources()
        enemies = self._pick_enemies()

        sanctuaries: Tuple[str, ...] = ()
        if self.catalog.sanctuary_names and self.rng.random() < SANCTUARY_CHANCE:
            sanctuaries = (self.rng.choice(self.catalog.sanctuary_names),)

        return name, Region(
            description=descriptor,
            resources=resources,
            enemies=enemies,
            sanctuaries=sanctuaries,
        )

    def generate_sectors(self, count: int) -> list[Tuple[str, Region]]:
        return [self.generate_region(seed) for seed in range(1, int(count) + 1)]

    def random_module(self, slot: str, seed_offset: Optional[int] = None) -> Optional[Module]:
        pool = self.catalog.module_pools.get(slot)
        if not pool:
            return None

        if seed_offset is not None:
            template = pool[(seed_offset - 1) % len(pool)]
        else:
            template = self.rng.choice(pool)

        return Module(
            slot=slot,
            name=template.name,
            speed_bonus=template.speed_bonus,
            cargo_bonus=template.cargo_bonus,
            defense_bonus=template.defense_bonus,
            summary=template.summary,
            slot_label=self.catalog.slot_labels.get(slot, slot),
        )

    def generate_ship_blueprint(self, seed: Optional[int] = None) -> ShipBlueprint:
        base_seed = int(seed) if seed is not None else self.rng.randint(1, BLUEPRINT_RANDOM_SEED_MAX)
        catalog = self.catalog

        prefix = _seeded_pick(catalog.ship_prefixes, base_seed, 0)
        speed, cargo, defense = blueprint_base_stats(base_seed)

        modules: Dict[str, Module] = {}
        for slot in SLOT_ORDER:
            module = self.random_module(slot, base_seed + _BLUEPRINT_MODULE_OFFSETS[slot])
            if module is not None:
                modules[slot] = module

        return ShipBlueprint(
            call_sign=f"{prefix}-{call_sign_number(base_seed):02d}",
            codename=_seeded_pick(catalog.ship_codenames, base_seed, 1),
            ship_class=_seeded_pick(catalog.ship_classes, base_seed, 2),
            role=_seeded_pick(catalog.ship_roles, base_seed, 3),
            summary=_seeded_pick(catalog.ship_summaries, base_seed, 4),
            base_stats=ShipStats(speed=speed, cargo=cargo, defense=defense),
            modules=modules,
        )
