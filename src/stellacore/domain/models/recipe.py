from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Recipe:
    name: str
    requires: Dict[str, int] = field(default_factory=dict)
    xp: int = 0
    description: str = ""

    def __post_init__(self) -> None:
        for resource_name, amount in self.requires.items():
            if int(amount) < 1:
                raise ValueError(f"Recipe {self.name} requires a positive amount of {resource_name}")

    def shortfalls(self, balances: Dict[str, int]) -> Dict[str, int]:
        """Missing count per resource; empty when every requirement is met."""
        missing: Dict[str, int] = {}
        for resource_name, required in self.requires.items():
            owned = int(balances.get(resource_name, 0))
            if owned < required:
                missing[resource_name] = required - owned
        return missing
