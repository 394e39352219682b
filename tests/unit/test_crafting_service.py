import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from stellacore.application.services.crafting_service import CraftingService
from stellacore.domain.errors import FailureReason
from stellacore.domain.models.actor import Actor
from stellacore.infrastructure.inmemory.catalogs import default_recipes

BEACON = "Balise Stellaris"
PRISM = "Prisme d'Astéroïde"
ESSENCE = "Essence Photonique"


class CraftingServiceTests(unittest.TestCase):
    def test_craft_consumes_exact_requirements(self) -> None:
        service = CraftingService(default_recipes())
        actor = Actor.create("Elyra", "Mage")
        actor.inventory.resources.update({PRISM: 2, ESSENCE: 1})

        self.assertTrue(service.craft(actor, BEACON))

        self.assertEqual({PRISM: 0, ESSENCE: 0}, actor.inventory.resources)
        self.assertEqual({BEACON: 1}, actor.inventory.items)
        self.assertEqual(45, actor.experience)
        self.assertIsNone(service.last_failure)

    def test_surplus_resources_are_kept(self) -> None:
        service = CraftingService(default_recipes())
        actor = Actor.create("Elyra", "Mage")
        actor.inventory.resources.update({PRISM: 3, ESSENCE: 1, "Lichen Quantique": 2})

        service.craft(actor, BEACON)

        self.assertEqual({PRISM: 1, ESSENCE: 0, "Lichen Quantique": 2}, actor.inventory.resources)

    def test_partial_shortage_changes_nothing(self) -> None:
        service = CraftingService(default_recipes())
        actor = Actor.create("Elyra", "Mage")
        actor.inventory.resources[PRISM] = 1

        self.assertFalse(service.craft(actor, BEACON))

        self.assertEqual({PRISM: 1}, actor.inventory.resources)
        self.assertEqual({}, actor.inventory.items)
        self.assertEqual(0, actor.experience)
        self.assertEqual(FailureReason.INSUFFICIENT_RESOURCES, service.last_failure)
        shortages = [entry for entry in actor.log if "Il manque" in entry]
        self.assertEqual(2, len(shortages))

    def test_unknown_recipe(self) -> None:
        service = CraftingService(default_recipes())
        actor = Actor.create("Elyra", "Mage")

        self.assertFalse(service.craft(actor, "Moteur Perpétuel"))
        self.assertEqual(FailureReason.UNKNOWN_RECIPE, service.last_failure)
        self.assertIsNone(service.recipe("Moteur Perpétuel"))


if __name__ == "__main__":
    unittest.main()
