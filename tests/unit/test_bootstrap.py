import io
import logging
import os
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import stellacore.__main__ as runtime_main
from stellacore.bootstrap import create_simulation, resolve_log_level
from stellacore.domain.errors import InternalInvariantViolation


class CreateSimulationTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            context = create_simulation()

        self.assertEqual(42, context.seed)
        self.assertEqual("Elyra", context.actor.name)
        self.assertEqual("Mage", context.actor.archetype)
        self.assertEqual(3, len(context.world.generated_region_names()))
        self.assertFalse(context.quest.completed)

    def test_one_random_source_is_shared(self) -> None:
        context = create_simulation(seed=3)

        self.assertIs(context.rng, context.world.rng)
        self.assertIs(context.rng, context.world.generator.rng)
        self.assertIs(context.rng, context.combat.rng)

    def test_same_seed_builds_same_universe(self) -> None:
        first = create_simulation(seed=11)
        second = create_simulation(seed=11)

        self.assertEqual(first.world.generated_region_names(), second.world.generated_region_names())

    def test_environment_overrides(self) -> None:
        env = {
            "STELLACORE_SEED": "7",
            "STELLACORE_GENERATED_SECTORS": "5",
            "STELLACORE_HERO_NAME": "Orin",
            "STELLACORE_ARCHETYPE": "Gardien",
        }
        with mock.patch.dict(os.environ, env, clear=False):
            context = create_simulation()

        self.assertEqual(7, context.seed)
        self.assertEqual(5, len(context.world.generated_region_names()))
        self.assertEqual("Orin", context.actor.name)
        self.assertEqual(160, context.actor.stats.max_health)

    def test_explicit_arguments_beat_environment(self) -> None:
        with mock.patch.dict(os.environ, {"STELLACORE_SEED": "7", "STELLACORE_GENERATED_SECTORS": "5"}, clear=False):
            context = create_simulation(seed=8, generated_sectors=1, hero_name="Nox")

        self.assertEqual(8, context.seed)
        self.assertEqual(1, len(context.world.generated_region_names()))
        self.assertEqual("Nox", context.actor.name)

    def test_non_integer_sector_count_falls_back_to_default(self) -> None:
        with mock.patch.dict(os.environ, {"STELLACORE_GENERATED_SECTORS": "plenty"}, clear=False):
            with self.assertLogs("stellacore.bootstrap", level="WARNING"):
                context = create_simulation(seed=1)

        self.assertEqual(3, len(context.world.generated_region_names()))

    def test_resolve_log_level(self) -> None:
        with mock.patch.dict(os.environ, {"STELLACORE_LOG_LEVEL": "debug"}, clear=False):
            self.assertEqual(logging.DEBUG, resolve_log_level())
        with mock.patch.dict(os.environ, {"STELLACORE_LOG_LEVEL": "loud"}, clear=False):
            self.assertEqual(logging.WARNING, resolve_log_level())


class MainEntryErrorHandlingTests(unittest.TestCase):
    def test_main_reports_catalog_exhaustion(self) -> None:
        output = io.StringIO()
        with mock.patch.object(
            runtime_main, "create_simulation", side_effect=InternalInvariantViolation("no unused region name")
        ), mock.patch("sys.stdout", output):
            code = runtime_main.main()

        self.assertEqual(2, code)
        self.assertIn("no unused region name", output.getvalue())
        self.assertNotIn("Traceback", output.getvalue())

    def test_main_handles_runtime_exceptions_without_traceback(self) -> None:
        output = io.StringIO()
        with mock.patch.object(runtime_main, "create_simulation", side_effect=RuntimeError("boom")), mock.patch(
            "sys.stdout", output
        ):
            code = runtime_main.main()

        self.assertEqual(1, code)
        self.assertIn("An unexpected error occurred", output.getvalue())
        self.assertIn("boom", output.getvalue())

    def test_main_handles_keyboard_interrupt(self) -> None:
        output = io.StringIO()
        with mock.patch.object(runtime_main, "create_simulation", side_effect=KeyboardInterrupt), mock.patch(
            "sys.stdout", output
        ):
            code = runtime_main.main()

        self.assertEqual(0, code)
        self.assertIn("Session ended", output.getvalue())


if __name__ == "__main__":
    unittest.main()
