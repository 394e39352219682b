import logging
import random
from typing import Dict

from stellacore.application.dtos import CombatResult
from stellacore.application.services.balance_tables import actor_damage_range, enemy_damage_range
from stellacore.application.services.world_service import WorldService
from stellacore.domain.errors import FailureReason
from stellacore.domain.models.actor import Actor


class CombatService:
    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self._logger = logging.getLogger(__name__)

    def set_seed(self, seed: int) -> None:
        self.rng.seed(seed)

    def fight(self, actor: Actor, world: WorldService, enemy_name: str) -> CombatResult:
        """Trade blows with ``enemy_name`` in the actor's region until one side drops.

        The enemy template is never mutated; only a local health counter is
        spent. A losing actor is pulled back to 1 health instead of dying.
        """
        region = world.region(actor.location)
        if region is None:
            actor.add_log("Impossible de combattre : région inconnue.")
            return CombatResult(victory=False, reason=FailureReason.UNKNOWN_REGION)

        template = region.enemies.get(enemy_name)
        if template is None:
            actor.add_log(f"Aucun ennemi nommé {enemy_name} dans cette zone.")
            return CombatResult(victory=False, reason=FailureReason.UNKNOWN_ENEMY)

        actor.add_log(f"Affronte {enemy_name} — {template.summary}")

        stats = actor.stats
        enemy_health = template.health
        rounds = 0

        while enemy_health > 0 and stats.health > 0:
            rounds += 1

            low, high = actor_damage_range(stats.power, actor.level)
            damage_to_enemy = self.rng.randint(low, high)
            enemy_health -= damage_to_enemy
            actor.add_log(
                f"Inflige {damage_to_enemy} dégâts à {enemy_name} (PV restants : {max(0, enemy_health)})"
            )
            if enemy_health <= 0:
                break

            low, high = enemy_damage_range(template.power)
            damage_to_actor = self.rng.randint(low, high)
            stats.health = max(0, stats.health - damage_to_actor)
            actor.add_log(f"Subit {damage_to_actor} dégâts de {enemy_name} (PV restants : {stats.health})")

        if stats.health <= 0:
            stats.health = 1
            actor.add_log(f"Le combat tourne mal, {actor.name} enclenche une retraite d'urgence !")
            self._logger.info("Retreat from %s after %d rounds", enemy_name, rounds)
            return CombatResult(victory=False, rounds=rounds)

        actor.add_log(f"Victoire contre {enemy_name} en {rounds} tours !")
        actor.gain_experience(template.xp)

        drops: Dict[str, int] = {}
        for resource_name, drop in template.drops.items():
            if self.rng.random() <= drop.chance:
                drops[resource_name] = drop.amount
                actor.add_resource(resource_name, drop.amount)

        return CombatResult(victory=True, rounds=rounds, drops=drops)
