from typing import Dict, List, Optional

from stellacore.domain.models.starship import Starship
from stellacore.domain.repositories import StarshipRepository


class InMemoryStarshipRepository(StarshipRepository):
    def __init__(self, ships: Optional[Dict[str, Starship]] = None):
        self._ships: Dict[str, Starship] = dict(ships or {})

    def get(self, ship_id: str) -> Optional[Starship]:
        return self._ships.get(ship_id)

    def save(self, ship: Starship) -> None:
        self._ships[ship.id] = ship

    def list_all(self) -> List[Starship]:
        return list(self._ships.values())
