import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from stellacore.domain.errors import InternalInvariantViolation
from stellacore.domain.models.quest import GatherStep, Quest
from stellacore.domain.models.recipe import Recipe
from stellacore.domain.models.region import DropEntry, EnemyTemplate, Region, ResourceSpec
from stellacore.infrastructure.inmemory.inmemory_region_repo import InMemoryRegionRepository


class ContentValidationTests(unittest.TestCase):
    def test_resource_spec_bounds(self) -> None:
        with self.assertRaises(ValueError):
            ResourceSpec(0, 2, 10)
        with self.assertRaises(ValueError):
            ResourceSpec(3, 2, 10)
        self.assertEqual(2, ResourceSpec(2, 2, 10).max_amount)

    def test_drop_chance_must_be_probability(self) -> None:
        with self.assertRaises(ValueError):
            DropEntry(chance=1.5)
        with self.assertRaises(ValueError):
            DropEntry(chance=0.5, amount=0)

    def test_enemy_needs_health_and_power(self) -> None:
        with self.assertRaises(ValueError):
            EnemyTemplate(health=0, power=10, xp=5)
        with self.assertRaises(ValueError):
            EnemyTemplate(health=10, power=1, xp=5)

    def test_recipe_amounts_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            Recipe(name="Balise", requires={"Prisme d'Astéroïde": 0})

    def test_recipe_shortfalls(self) -> None:
        recipe = Recipe(name="Balise", requires={"Prisme d'Astéroïde": 2, "Essence Photonique": 1})

        self.assertEqual(
            {"Prisme d'Astéroïde": 1, "Essence Photonique": 1},
            recipe.shortfalls({"Prisme d'Astéroïde": 1}),
        )
        self.assertEqual({}, recipe.shortfalls({"Prisme d'Astéroïde": 2, "Essence Photonique": 3}))

    def test_quest_needs_steps(self) -> None:
        with self.assertRaises(ValueError):
            Quest(id="q", name="Vide", description="", steps=())

    def test_quest_active_step_follows_cursor(self) -> None:
        step = GatherStep(resource="Lichen Quantique", amount=1, summary="Récolter du lichen.")
        quest = Quest(id="q", name="Lichen", description="", steps=(step,))

        self.assertIs(step, quest.active_step())
        quest.completed = True
        self.assertIsNone(quest.active_step())


class RegionRepositoryTests(unittest.TestCase):
    def test_duplicate_region_name_is_rejected(self) -> None:
        repo = InMemoryRegionRepository()
        repo.add("Station Reliquaire", Region(description="a"))

        with self.assertRaises(InternalInvariantViolation):
            repo.add("Station Reliquaire", Region(description="b"))

    def test_lookup_and_listing(self) -> None:
        repo = InMemoryRegionRepository()
        region = Region(description="a", sanctuaries=("Relais Stellacristal",))
        repo.add("Nébuleuse des Voiles", region)

        self.assertIs(region, repo.get("Nébuleuse des Voiles"))
        self.assertIsNone(repo.get("Ailleurs"))
        self.assertTrue(repo.contains("Nébuleuse des Voiles"))
        self.assertEqual(["Nébuleuse des Voiles"], repo.list_names())
        self.assertTrue(region.has_sanctuary("Relais Stellacristal"))


if __name__ == "__main__":
    unittest.main()
