from .in_memory_repository import InMemoryPriceRepository, LocationOverrideRecord

__all__ = ["InMemoryPriceRepository", "LocationOverrideRecord"]
