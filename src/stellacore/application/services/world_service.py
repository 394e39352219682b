from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Union

from stellacore.application.dtos import GatherResult, HarvestReport, RefitResult, ShipMovementReport
from stellacore.application.services.balance_tables import estimate_region_distance
from stellacore.application.services.universe_generator import UniverseGenerator
from stellacore.domain.errors import FailureReason
from stellacore.domain.models.actor import Actor, DEFAULT_START_REGION
from stellacore.domain.models.region import Region
from stellacore.domain.models.starship import SLOT_ORDER, Starship
from stellacore.domain.repositories import RegionRepository, StarshipRepository
from stellacore.infrastructure.inmemory.inmemory_region_repo import InMemoryRegionRepository
from stellacore.infrastructure.inmemory.inmemory_starship_repo import InMemoryStarshipRepository


ShipRef = Union[Starship, str]


class WorldService:
    def __init__(
        self,
        generator: UniverseGenerator,
        region_repo: RegionRepository | None = None,
        ship_repo: StarshipRepository | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.generator = generator
        self.region_repo = region_repo or InMemoryRegionRepository()
        self.ship_repo = ship_repo or InMemoryStarshipRepository()
        self.rng = rng or generator.rng
        self.ship_count = 0
        self._generated_regions: List[str] = []
        self._logger = logging.getLogger(__name__)

    @classmethod
    def create(
        cls,
        generator: UniverseGenerator,
        seed_regions: Dict[str, Region],
        generated_sectors: int,
    ) -> "WorldService":
        """Hand-authored regions first, then ``generated_sectors`` procedural ones."""
        world = cls(generator)
        for name, region in seed_regions.items():
            generator.reserve_name(name)
            world.region_repo.add(name, region)
        for name, region in generator.generate_sectors(max(0, int(generated_sectors))):
            world.region_repo.add(name, region)
            world._generated_regions.append(name)
        return world

    def region(self, region_name: str | None) -> Optional[Region]:
        return self.region_repo.get(region_name) if region_name else None

    def generated_region_names(self) -> List[str]:
        return list(self._generated_regions)

    def travel(self, actor: Actor, region_name: str) -> bool:
        region = self.region(region_name)
        if region is None:
            actor.add_log(f"Tente de voyager vers une région inconnue : {region_name}")
            return False

        actor.location = region_name
        actor.add_log(f"Voyage vers {region_name} — {region.description}")
        return True

    def gather_resource(self, actor: Actor, resource_name: str) -> GatherResult:
        region = self.region(actor.location)
        if region is None:
            actor.add_log("Impossible de récolter : région inconnue.")
            return GatherResult(success=False, reason=FailureReason.UNKNOWN_REGION)

        spec = region.resources.get(resource_name)
        if spec is None:
            actor.add_log(f"Aucune ressource nommée {resource_name} ici.")
            return GatherResult(success=False, reason=FailureReason.UNKNOWN_RESOURCE)

        amount = self.rng.randint(spec.min_amount, spec.max_amount)
        actor.add_resource(resource_name, amount)
        actor.gain_experience(spec.xp)
        return GatherResult(success=True, amount=amount)

    def auto_harvest(self, actor: Actor, region_name: str, attempts: int = 1) -> HarvestReport:
        region = self.region(region_name)
        if region is None:
            return HarvestReport(harvested=False)

        if actor.location != region_name:
            self.travel(actor, region_name)

        resource_names = region.resource_names()
        if not resource_names:
            return HarvestReport(harvested=False)

        totals: Dict[str, int] = {}
        for attempt in range(max(0, int(attempts))):
            resource_name = resource_names[attempt % len(resource_names)]
            result = self.gather_resource(actor, resource_name)
            if result.success:
                totals[resource_name] = totals.get(resource_name, 0) + result.amount

        details = sorted(f"{name} ×{amount}" for name, amount in totals.items())
        return HarvestReport(harvested=bool(totals), details=details, totals=totals)

    def resolve_ship(self, ship: Starship) -> Optional[Starship]:
        return self.ship_repo.get(ship.id)

    def resolve_ship_id(self, ship_id: str) -> Optional[Starship]:
        return self.ship_repo.get(ship_id)

    def _lookup(self, ship_ref: ShipRef) -> Optional[Starship]:
        if isinstance(ship_ref, Starship):
            return self.resolve_ship(ship_ref)
        return self.resolve_ship_id(ship_ref)

    def commission_ship(self, spawn_region: str | None = None) -> Starship:
        self.ship_count += 1
        blueprint = self.generator.generate_ship_blueprint(self.ship_count)
        identifier = f"{blueprint.call_sign}-{self.ship_count:03d}"

        ship = Starship.from_blueprint(identifier, blueprint, spawn_region or DEFAULT_START_REGION)
        for slot in SLOT_ORDER:
            ship.install_module(slot, blueprint.modules.get(slot))

        self.ship_repo.save(ship)
        self._logger.debug("Commissioned %s at %s", identifier, ship.location)
        return ship

    def refit_ship(self, ship_ref: ShipRef, slot: str) -> RefitResult:
        ship = self._lookup(ship_ref)
        if ship is None:
            return RefitResult(success=False, reason=FailureReason.UNKNOWN_SHIP)

        module = self.generator.random_module(slot)
        if module is None:
            return RefitResult(success=False, reason=FailureReason.UNKNOWN_SLOT, ship=ship)

        ship.install_module(slot, module)
        self.ship_repo.save(ship)
        return RefitResult(success=True, module=module, ship=ship)

    def move_ship(self, ship_ref: ShipRef, destination: str) -> ShipMovementReport:
        ship = self._lookup(ship_ref)
        if ship is None:
            return ShipMovementReport(success=False, reason=FailureReason.UNKNOWN_SHIP, destination=destination)

        if self.region(destination) is None:
            return ShipMovementReport(
                success=False,
                reason=FailureReason.UNKNOWN_REGION,
                origin=ship.location,
                destination=destination,
                ship_id=ship.id,
                call_sign=ship.call_sign,
                speed=ship.stats.speed,
            )

        origin = ship.location
        distance = estimate_region_distance(origin, destination)
        travel_time = ship.travel_time(distance)
        ship.location = destination
        self.ship_repo.save(ship)

        return ShipMovementReport(
            success=True,
            origin=origin,
            destination=destination,
            distance=distance,
            travel_time=travel_time,
            speed=ship.stats.speed,
            ship_id=ship.id,
            call_sign=ship.call_sign,
        )

    def activate_sanctuary(self, actor: Actor, sanctuary_name: str) -> bool:
        region = self.region(actor.location)
        if region is None:
            actor.add_log("Aucun relais stellaire dans une région inconnue.")
            return False

        if region.has_sanctuary(sanctuary_name):
            actor.add_log(f"Canalise l'énergie du relais {sanctuary_name}.")
            return True

        actor.add_log(f"Ce lieu ne contient pas le relais stellaire {sanctuary_name}.")
        return False
