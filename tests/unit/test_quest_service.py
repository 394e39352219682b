import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from stellacore.application.dtos import CombatResult
from stellacore.application.mappers.quest_event_mapper import (
    to_activation_event,
    to_combat_event,
    to_craft_event,
    to_gather_event,
)
from stellacore.application.services.event_bus import EventBus
from stellacore.application.services.quest_service import QuestService, register_quest_handlers
from stellacore.domain.events import CombatResolved, ItemCrafted, ResourceGathered, SanctuaryActivated
from stellacore.domain.models.actor import Actor
from stellacore.domain.models.quest import QuestStepKind
from stellacore.infrastructure.inmemory.catalogs import stellacore_quest

PRISM = "Prisme d'Astéroïde"
GUARDIAN = "Spectre du Vide"
BEACON = "Balise Stellaris"
RELAY = "Relais Stellacristal"
REWARD = "Clé de Saut Stellaire"


def _wired() -> tuple[EventBus, QuestService, Actor]:
    bus = EventBus()
    service = QuestService(stellacore_quest())
    actor = Actor.create("Elyra", "Mage")
    register_quest_handlers(bus, service, actor)
    return bus, service, actor


class QuestServiceTests(unittest.TestCase):
    def test_gather_step_waits_for_cumulative_amount(self) -> None:
        bus, service, actor = _wired()

        actor.add_resource(PRISM, 1)
        bus.publish(to_gather_event(actor, PRISM))
        self.assertEqual(1, service.current_step_index)

        actor.add_resource(PRISM, 1)
        bus.publish(to_gather_event(actor, PRISM))
        self.assertEqual(2, service.current_step_index)
        self.assertEqual(QuestStepKind.DEFEAT, service.current_step().kind)

    def test_events_for_other_steps_are_ignored(self) -> None:
        bus, service, actor = _wired()

        bus.publish(CombatResolved(enemy=GUARDIAN, victory=True))
        bus.publish(ItemCrafted(item=BEACON, success=True))
        bus.publish(SanctuaryActivated(sanctuary=RELAY, success=True))

        self.assertEqual(1, service.current_step_index)
        self.assertFalse(service.completed)

    def test_wrong_target_or_failure_does_not_advance(self) -> None:
        bus, service, actor = _wired()
        bus.publish(ResourceGathered(resource=PRISM, total_amount=2))

        bus.publish(CombatResolved(enemy="Avatar Plasma", victory=True))
        bus.publish(CombatResolved(enemy=GUARDIAN, victory=False))
        bus.publish(ResourceGathered(resource=PRISM, total_amount=5))

        self.assertEqual(2, service.current_step_index)

    def test_full_chain_completes_and_rewards_once(self) -> None:
        bus, service, actor = _wired()

        bus.publish(ResourceGathered(resource=PRISM, total_amount=2))
        bus.publish(to_combat_event(GUARDIAN, CombatResult(victory=True, rounds=4)))
        bus.publish(to_craft_event(BEACON, True))
        bus.publish(to_activation_event(RELAY, True))

        self.assertTrue(service.completed)
        self.assertTrue(service.quest.rewards_granted)
        self.assertIsNone(service.current_step())
        self.assertIsNone(service.current_objective())
        self.assertEqual({REWARD: 1}, actor.inventory.items)
        self.assertEqual(2, actor.level)

        bus.publish(to_activation_event(RELAY, True))
        self.assertFalse(service.notify(actor, SanctuaryActivated(sanctuary=RELAY, success=True)))
        self.assertEqual({REWARD: 1}, actor.inventory.items)

    def test_notify_reports_whether_step_advanced(self) -> None:
        service = QuestService(stellacore_quest())
        actor = Actor.create("Elyra", "Mage")

        self.assertFalse(service.notify(actor, object()))
        self.assertTrue(service.notify(actor, ResourceGathered(resource=PRISM, total_amount=3)))

    def test_announce_logs_name_and_first_objective(self) -> None:
        service = QuestService(stellacore_quest())
        actor = Actor.create("Elyra", "Mage")

        service.announce(actor)

        self.assertIn("Réactivation Stellacristal", actor.log[0])
        self.assertIn(service.current_objective(), actor.log[1])

    def test_handlers_registered_for_every_quest_event(self) -> None:
        bus, _, _ = _wired()

        for event_type in (ResourceGathered, CombatResolved, ItemCrafted, SanctuaryActivated):
            self.assertEqual(1, bus.subscriber_count(event_type))


class QuestEventMapperTests(unittest.TestCase):
    def test_gather_event_carries_running_total(self) -> None:
        actor = Actor.create("Elyra", "Mage")
        actor.add_resource(PRISM, 2)
        actor.add_resource(PRISM, 1)

        event = to_gather_event(actor, PRISM)

        self.assertEqual(3, event.total_amount)
        self.assertEqual(QuestStepKind.GATHER, event.kind)

    def test_combat_event_copies_outcome(self) -> None:
        event = to_combat_event(GUARDIAN, CombatResult(victory=False, rounds=6))

        self.assertFalse(event.victory)
        self.assertEqual(6, event.rounds)


if __name__ == "__main__":
    unittest.main()
