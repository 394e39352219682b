from dataclasses import dataclass, field
from typing import Dict, List, Optional

from stellacore.domain.errors import FailureReason
from stellacore.domain.models.starship import Module, Starship


@dataclass
class GatherResult:
    success: bool
    amount: int = 0
    reason: Optional[FailureReason] = None


@dataclass
class HarvestReport:
    harvested: bool
    details: List[str] = field(default_factory=list)
    totals: Dict[str, int] = field(default_factory=dict)


@dataclass
class RefitResult:
    success: bool
    reason: Optional[FailureReason] = None
    module: Optional[Module] = None
    ship: Optional[Starship] = None


@dataclass
class ShipMovementReport:
    success: bool
    reason: Optional[FailureReason] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    distance: int = 0
    travel_time: int = 0
    speed: int = 0
    ship_id: Optional[str] = None
    call_sign: Optional[str] = None


@dataclass
class CombatResult:
    victory: bool
    rounds: int = 0
    drops: Dict[str, int] = field(default_factory=dict)
    reason: Optional[FailureReason] = None


@dataclass
class ScenarioReport:
    completed: bool
    level: int
    log_entries: int
    stopped_early: bool = False
    generated_sectors: List[str] = field(default_factory=list)
