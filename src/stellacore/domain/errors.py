from __future__ import annotations

from enum import Enum


class InternalInvariantViolation(RuntimeError):
    """Content or catalog state the engine cannot recover from."""


class FailureReason(str, Enum):
    UNKNOWN_SHIP = "unknown_ship"
    UNKNOWN_SLOT = "unknown_slot"
    UNKNOWN_REGION = "unknown_region"
    UNKNOWN_RESOURCE = "unknown_resource"
    UNKNOWN_ENEMY = "unknown_enemy"
    UNKNOWN_RECIPE = "unknown_recipe"
    INSUFFICIENT_RESOURCES = "insufficient_resources"
