from __future__ import annotations

import logging
from typing import Optional

from stellacore.application.services.event_bus import EventBus
from stellacore.domain.errors import InternalInvariantViolation
from stellacore.domain.events import (
    CombatResolved,
    ItemCrafted,
    QUEST_EVENT_TYPES,
    ResourceGathered,
    SanctuaryActivated,
)
from stellacore.domain.models.actor import Actor
from stellacore.domain.models.quest import (
    ActivateStep,
    CraftStep,
    DefeatStep,
    GatherStep,
    Quest,
    QuestStep,
    QuestStepKind,
)


class QuestService:
    """Drives one quest through its ordered steps.

    Only the active step is ever compared with an incoming event; anything
    else is ignored. The cursor only moves forward, and the reward is paid
    on the single transition past the last step.
    """

    def __init__(self, quest: Quest) -> None:
        self.quest = quest
        self._logger = logging.getLogger(__name__)

    @property
    def completed(self) -> bool:
        return self.quest.completed

    @property
    def current_step_index(self) -> int:
        return self.quest.current_step

    def current_step(self) -> Optional[QuestStep]:
        return self.quest.active_step()

    def current_objective(self) -> Optional[str]:
        step = self.current_step()
        return step.summary if step is not None else None

    def announce(self, actor: Actor) -> None:
        actor.add_log(f"Quête acceptée : {self.quest.name}")
        objective = self.current_objective()
        if objective:
            actor.add_log(f"Objectif : {objective}")

    def notify(self, actor: Actor, event: object) -> bool:
        """Advance if ``event`` satisfies the active step; returns whether it did."""
        if self.quest.completed:
            return False
        step = self.current_step()
        if step is None:
            return False
        if getattr(event, "kind", None) != step.kind:
            return False
        if not self._matches(step, event):
            return False
        self._complete_current_step(actor, step)
        return True

    @staticmethod
    def _matches(step: QuestStep, event: object) -> bool:
        if step.kind == QuestStepKind.GATHER:
            if not (isinstance(step, GatherStep) and isinstance(event, ResourceGathered)):
                return False
            return event.resource == step.resource and int(event.total_amount or 0) >= step.amount

        if step.kind == QuestStepKind.DEFEAT:
            if not (isinstance(step, DefeatStep) and isinstance(event, CombatResolved)):
                return False
            return event.enemy == step.enemy and bool(event.victory)

        if step.kind == QuestStepKind.CRAFT:
            if not (isinstance(step, CraftStep) and isinstance(event, ItemCrafted)):
                return False
            return event.item == step.item and bool(event.success)

        if step.kind == QuestStepKind.ACTIVATE:
            if not (isinstance(step, ActivateStep) and isinstance(event, SanctuaryActivated)):
                return False
            return event.sanctuary == step.sanctuary and bool(event.success)

        raise InternalInvariantViolation(f"Unhandled quest step kind: {step.kind!r}")

    def _complete_current_step(self, actor: Actor, step: QuestStep) -> None:
        quest = self.quest
        if step.success_message:
            actor.add_log(step.success_message)

        quest.current_step += 1
        if quest.current_step <= quest.step_count:
            next_step = quest.active_step()
            if next_step is not None:
                actor.add_log(f"Nouvel objectif : {next_step.summary}")
            return

        quest.completed = True
        actor.add_log(f"Quête terminée : {quest.name}")
        self._grant_rewards(actor)

    def _grant_rewards(self, actor: Actor) -> None:
        quest = self.quest
        if quest.rewards_granted:
            return
        quest.rewards_granted = True
        if quest.rewards.xp:
            actor.gain_experience(quest.rewards.xp)
        for item in quest.rewards.items:
            actor.add_item(item)
        self._logger.info("Quest %s completed by %s", quest.id, actor.name)


def register_quest_handlers(event_bus: EventBus, service: QuestService, actor: Actor) -> None:
    def _forward(event: object) -> None:
        service.notify(actor, event)

    for event_type in QUEST_EVENT_TYPES:
        event_bus.subscribe(event_type, _forward, priority=20)
