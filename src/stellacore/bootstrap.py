import logging
import os
import random
from dataclasses import dataclass

from stellacore.application.services.balance_tables import DEFAULT_GENERATED_SECTORS
from stellacore.application.services.combat_service import CombatService
from stellacore.application.services.crafting_service import CraftingService
from stellacore.application.services.event_bus import EventBus
from stellacore.application.services.quest_service import QuestService, register_quest_handlers
from stellacore.application.services.seed_policy import DEFAULT_SCENARIO_SEED, resolve_seed
from stellacore.application.services.universe_generator import UniverseGenerator
from stellacore.application.services.world_service import WorldService
from stellacore.domain.models.actor import Actor
from stellacore.infrastructure.inmemory.catalogs import (
    default_recipes,
    default_universe_catalog,
    seed_regions,
    stellacore_quest,
)


DEFAULT_HERO_NAME = "Elyra"
DEFAULT_HERO_ARCHETYPE = "Mage"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class SimulationContext:
    seed: int
    rng: random.Random
    actor: Actor
    world: WorldService
    combat: CombatService
    crafting: CraftingService
    quest: QuestService
    event_bus: EventBus


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", name, raw)
        return default


def resolve_log_level() -> int:
    name = os.getenv("STELLACORE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def create_simulation(
    seed=None,
    generated_sectors: int | None = None,
    rng: random.Random | None = None,
    hero_name: str | None = None,
    archetype: str | None = None,
) -> SimulationContext:
    """Wire one actor, one world and the quest machine around a single random source.

    Explicit arguments win over ``STELLACORE_*`` environment variables.
    """
    resolved_seed = resolve_seed(seed if seed is not None else os.getenv("STELLACORE_SEED"), default=DEFAULT_SCENARIO_SEED)
    if generated_sectors is None:
        generated_sectors = _env_int("STELLACORE_GENERATED_SECTORS", DEFAULT_GENERATED_SECTORS)
    shared_rng = rng or random.Random(resolved_seed)

    generator = UniverseGenerator(default_universe_catalog(), shared_rng)
    world = WorldService.create(generator, seed_regions(), max(0, int(generated_sectors)))
    actor = Actor.create(
        hero_name or os.getenv("STELLACORE_HERO_NAME", DEFAULT_HERO_NAME),
        archetype or os.getenv("STELLACORE_ARCHETYPE", DEFAULT_HERO_ARCHETYPE),
    )

    event_bus = EventBus()
    quest = QuestService(stellacore_quest())
    register_quest_handlers(event_bus, quest, actor)

    return SimulationContext(
        seed=resolved_seed,
        rng=shared_rng,
        actor=actor,
        world=world,
        combat=CombatService(shared_rng),
        crafting=CraftingService(default_recipes()),
        quest=quest,
        event_bus=event_bus,
    )
