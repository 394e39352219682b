from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class QuestStepKind(str, Enum):
    GATHER = "gather"
    DEFEAT = "defeat"
    CRAFT = "craft"
    ACTIVATE = "activate"


@dataclass(frozen=True)
class GatherStep:
    resource: str
    amount: int
    summary: str
    success_message: Optional[str] = None
    kind: QuestStepKind = field(default=QuestStepKind.GATHER, init=False)


@dataclass(frozen=True)
class DefeatStep:
    enemy: str
    summary: str
    success_message: Optional[str] = None
    kind: QuestStepKind = field(default=QuestStepKind.DEFEAT, init=False)


@dataclass(frozen=True)
class CraftStep:
    item: str
    summary: str
    success_message: Optional[str] = None
    kind: QuestStepKind = field(default=QuestStepKind.CRAFT, init=False)


@dataclass(frozen=True)
class ActivateStep:
    sanctuary: str
    summary: str
    success_message: Optional[str] = None
    kind: QuestStepKind = field(default=QuestStepKind.ACTIVATE, init=False)


QuestStep = Union[GatherStep, DefeatStep, CraftStep, ActivateStep]


@dataclass(frozen=True)
class QuestReward:
    xp: int = 0
    items: Tuple[str, ...] = ()


@dataclass
class Quest:
    id: str
    name: str
    description: str
    steps: Tuple[QuestStep, ...]
    rewards: QuestReward = field(default_factory=QuestReward)
    current_step: int = 1
    completed: bool = False
    rewards_granted: bool = False

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("A quest needs at least one step")

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def active_step(self) -> Optional[QuestStep]:
        if self.completed or not 1 <= self.current_step <= self.step_count:
            return None
        return self.steps[self.current_step - 1]
