from __future__ import annotations

from stellacore.application.dtos import CombatResult
from stellacore.domain.events import CombatResolved, ItemCrafted, ResourceGathered, SanctuaryActivated
from stellacore.domain.models.actor import Actor


def to_gather_event(actor: Actor, resource_name: str) -> ResourceGathered:
    # cumulative balance, not the amount of the last harvest
    return ResourceGathered(resource=resource_name, total_amount=actor.resource_count(resource_name))


def to_combat_event(enemy_name: str, result: CombatResult) -> CombatResolved:
    return CombatResolved(enemy=enemy_name, victory=bool(result.victory), rounds=int(result.rounds))


def to_craft_event(item_name: str, success: bool) -> ItemCrafted:
    return ItemCrafted(item=item_name, success=bool(success))


def to_activation_event(sanctuary_name: str, success: bool) -> SanctuaryActivated:
    return SanctuaryActivated(sanctuary=sanctuary_name, success=bool(success))
