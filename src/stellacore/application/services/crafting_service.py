from __future__ import annotations

import logging
from typing import Dict, Optional

from stellacore.domain.errors import FailureReason
from stellacore.domain.models.actor import Actor
from stellacore.domain.models.recipe import Recipe


class CraftingService:
    def __init__(self, recipes: Dict[str, Recipe] | None = None) -> None:
        self.recipes: Dict[str, Recipe] = dict(recipes or {})
        self.last_failure: Optional[FailureReason] = None
        self._logger = logging.getLogger(__name__)

    def recipe(self, recipe_name: str) -> Optional[Recipe]:
        return self.recipes.get(recipe_name)

    def craft(self, actor: Actor, recipe_name: str) -> bool:
        """All-or-nothing: any shortfall leaves every balance untouched."""
        self.last_failure = None
        recipe = self.recipe(recipe_name)
        if recipe is None:
            self.last_failure = FailureReason.UNKNOWN_RECIPE
            actor.add_log(f"Recette inconnue : {recipe_name}")
            return False

        missing = recipe.shortfalls(actor.inventory.resources)
        if missing:
            self.last_failure = FailureReason.INSUFFICIENT_RESOURCES
            for resource_name, amount in missing.items():
                actor.add_log(f"Il manque {amount} × {resource_name} pour l'artisanat.")
            self._logger.debug("Craft of %s blocked by %s", recipe_name, sorted(missing))
            return False

        resources = actor.inventory.resources
        for resource_name, required in recipe.requires.items():
            resources[resource_name] = resources[resource_name] - required

        actor.add_item(recipe_name)
        actor.gain_experience(recipe.xp)
        actor.add_log(f"Fabrique {recipe_name}: {recipe.description}")
        return True
