import io
import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from rich.console import Console

from stellacore.bootstrap import create_simulation
from stellacore.domain.events import CombatResolved, ItemCrafted, SanctuaryActivated
from stellacore.presentation.holo_renderer import HoloRenderer, summarize_category
from stellacore.presentation.scenario_loop import run_scenario


def _renderer(context) -> tuple[HoloRenderer, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    return HoloRenderer(console=console, rng=context.rng), buffer


class ScenarioFlowTests(unittest.TestCase):
    def test_scripted_run_completes_quest(self) -> None:
        context = create_simulation(seed=42)
        renderer, buffer = _renderer(context)

        report = run_scenario(context, renderer)

        self.assertTrue(report.completed)
        self.assertFalse(report.stopped_early)
        self.assertEqual(3, len(report.generated_sectors))
        self.assertEqual(len(context.actor.log), report.log_entries)
        self.assertEqual(1, context.actor.inventory.items["Balise Stellaris"])
        self.assertEqual(1, context.actor.inventory.items["Clé de Saut Stellaire"])
        self.assertEqual(0, context.actor.resource_count("Essence Photonique"))
        self.assertGreaterEqual(report.level, 2)

        transcript = buffer.getvalue()
        self.assertIn("Inventaire Final", transcript)
        self.assertIn("Clé de Saut Stellaire", transcript)
        self.assertIn("[Niveau 1]", transcript)

    def test_scripted_run_publishes_each_quest_milestone(self) -> None:
        context = create_simulation(seed=5)
        renderer, _ = _renderer(context)

        run_scenario(context, renderer)

        kinds = {type(event) for event in context.event_bus.journal()}
        self.assertTrue({CombatResolved, ItemCrafted, SanctuaryActivated}.issubset(kinds))
        self.assertEqual([], context.event_bus.last_publish_errors())

    def test_same_seed_replays_same_journal(self) -> None:
        first = create_simulation(seed=8)
        second = create_simulation(seed=8)

        run_scenario(first, _renderer(first)[0])
        run_scenario(second, _renderer(second)[0])

        self.assertEqual(first.actor.log, second.actor.log)

    def test_lost_fight_stops_the_run_early(self) -> None:
        context = create_simulation(seed=42)
        stats = context.actor.stats
        stats.power = 1
        stats.max_health = 5
        stats.health = 5
        renderer, buffer = _renderer(context)

        report = run_scenario(context, renderer)

        self.assertTrue(report.stopped_early)
        self.assertFalse(report.completed)
        self.assertEqual(1, context.actor.stats.health)
        self.assertEqual(2, context.quest.current_step_index)
        self.assertNotIn("Statistiques finales", buffer.getvalue())

    def test_without_generated_sectors(self) -> None:
        context = create_simulation(seed=42, generated_sectors=0)
        renderer, buffer = _renderer(context)

        report = run_scenario(context, renderer)

        self.assertTrue(report.completed)
        self.assertEqual([], report.generated_sectors)
        self.assertNotIn("auto-cartographie", buffer.getvalue())


class RendererTests(unittest.TestCase):
    def test_summarize_category(self) -> None:
        self.assertEqual("(vide)", summarize_category({}))
        self.assertEqual("Lichen ×1, Prisme ×2", summarize_category({"Prisme": 2, "Lichen": 1}))


if __name__ == "__main__":
    unittest.main()
