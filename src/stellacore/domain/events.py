from dataclasses import dataclass, field

from stellacore.domain.models.quest import QuestStepKind


@dataclass(frozen=True)
class ResourceGathered:
    resource: str
    total_amount: int
    kind: QuestStepKind = field(default=QuestStepKind.GATHER, init=False)


@dataclass(frozen=True)
class CombatResolved:
    enemy: str
    victory: bool
    rounds: int = 0
    kind: QuestStepKind = field(default=QuestStepKind.DEFEAT, init=False)


@dataclass(frozen=True)
class ItemCrafted:
    item: str
    success: bool
    kind: QuestStepKind = field(default=QuestStepKind.CRAFT, init=False)


@dataclass(frozen=True)
class SanctuaryActivated:
    sanctuary: str
    success: bool
    kind: QuestStepKind = field(default=QuestStepKind.ACTIVATE, init=False)


QUEST_EVENT_TYPES = (ResourceGathered, CombatResolved, ItemCrafted, SanctuaryActivated)
