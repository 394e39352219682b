from abc import ABC, abstractmethod
from typing import List, Optional

from stellacore.domain.models.region import Region
from stellacore.domain.models.starship import Starship


class RegionRepository(ABC):
    @abstractmethod
    def get(self, region_name: str) -> Optional[Region]:
        raise NotImplementedError

    @abstractmethod
    def add(self, region_name: str, region: Region) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_names(self) -> List[str]:
        raise NotImplementedError

    def contains(self, region_name: str) -> bool:
        return self.get(region_name) is not None


class StarshipRepository(ABC):
    @abstractmethod
    def get(self, ship_id: str) -> Optional[Starship]:
        raise NotImplementedError

    @abstractmethod
    def save(self, ship: Starship) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[Starship]:
        raise NotImplementedError
