"""In-memory catalogs and repositories backing a single simulation run."""

from .inmemory_region_repo import InMemoryRegionRepository
from .inmemory_starship_repo import InMemoryStarshipRepository

__all__ = ["InMemoryRegionRepository", "InMemoryStarshipRepository"]
