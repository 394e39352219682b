from typing import Dict, List, Optional

from stellacore.domain.errors import InternalInvariantViolation
from stellacore.domain.models.region import Region
from stellacore.domain.repositories import RegionRepository


class InMemoryRegionRepository(RegionRepository):
    def __init__(self, regions: Optional[Dict[str, Region]] = None):
        self._regions: Dict[str, Region] = {}
        for name, region in (regions or {}).items():
            self.add(name, region)

    def get(self, region_name: str) -> Optional[Region]:
        if region_name is None:
            return None
        return self._regions.get(region_name)

    def add(self, region_name: str, region: Region) -> None:
        if region_name in self._regions:
            raise InternalInvariantViolation(f"Region name already registered: {region_name}")
        self._regions[region_name] = region

    def list_names(self) -> List[str]:
        return list(self._regions.keys())
