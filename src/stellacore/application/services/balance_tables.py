from __future__ import annotations


ACTOR_MIN_DAMAGE_RATIO = 0.7
ACTOR_LEVEL_DAMAGE_BONUS = 3
ENEMY_MIN_DAMAGE_RATIO = 0.6

REGION_DISTANCE_MODULUS = 7
REGION_DISTANCE_FLOOR = 2

DEFAULT_GENERATED_SECTORS = 3
REGION_NAME_RETRY_CAP = 1000
SANCTUARY_CHANCE = 0.5
MAX_RESOURCES_PER_REGION = 2
MAX_ENEMIES_PER_REGION = 1

BLUEPRINT_RANDOM_SEED_MAX = 1000
CALL_SIGN_SEED_OFFSET = 7
CALL_SIGN_MODULUS = 90
CALL_SIGN_FLOOR = 10


def actor_damage_range(power: int, level: int) -> tuple[int, int]:
    low = int(power * ACTOR_MIN_DAMAGE_RATIO)
    high = int(power) + int(level) * ACTOR_LEVEL_DAMAGE_BONUS
    return low, max(low, high)


def enemy_damage_range(power: int) -> tuple[int, int]:
    return int(power * ENEMY_MIN_DAMAGE_RATIO), int(power)


def estimate_region_distance(origin: str | None, destination: str | None) -> int:
    """Symmetric pseudo-distance in [2, 8] from the byte sum of both names."""
    if not origin or not destination or origin == destination:
        return 0
    total = sum(origin.encode("utf-8")) + sum(destination.encode("utf-8"))
    return max(REGION_DISTANCE_FLOOR, (total % REGION_DISTANCE_MODULUS) + REGION_DISTANCE_FLOOR)


def blueprint_base_stats(seed: int) -> tuple[int, int, int]:
    speed = 5 + ((seed + 2) % 4)
    cargo = 40 + ((seed + 4) % 15)
    defense = 28 + ((seed + 6) % 10)
    return speed, cargo, defense


def call_sign_number(seed: int) -> int:
    return ((seed + CALL_SIGN_SEED_OFFSET) % CALL_SIGN_MODULUS) + CALL_SIGN_FLOOR
