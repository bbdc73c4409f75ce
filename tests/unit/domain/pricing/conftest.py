# tests/unit/domain/pricing/conftest.py
"""
Спільні фікстури для тестів резолвінгу цін.

Сценарій: варіація «V» з базовою одиницею «piece» (закупівля 60.00, продаж 100.00)
та одиницею «box» = 12 штук. Точки продажу — «L1» та «L2».
"""

import pytest

from pos_pricing.domain.pricing import (
    LocationPriceResolver,
    PriceOverrideManager,
    PriceResolutionFacade,
    UnitConversionTable,
    UnitPriceResolver,
)
from pos_pricing.infrastructure.storage.in_memory_repository import InMemoryPriceRepository

VARIATION = "V"
PIECE = "piece"
BOX = "box"
L1 = "L1"
L2 = "L2"


@pytest.fixture
def repository() -> InMemoryPriceRepository:
    repo = InMemoryPriceRepository()
    repo.add_variation(VARIATION, base_unit_id=PIECE, purchase_price="60.00", selling_price="100.00")
    repo.set_conversion_factor(VARIATION, BOX, 12)
    return repo


@pytest.fixture
def conversion_table(repository) -> UnitConversionTable:
    return UnitConversionTable(repository)


@pytest.fixture
def unit_resolver(repository, conversion_table) -> UnitPriceResolver:
    return UnitPriceResolver(repository, conversion_table=conversion_table)


@pytest.fixture
def location_resolver(repository, unit_resolver) -> LocationPriceResolver:
    return LocationPriceResolver(repository, unit_resolver=unit_resolver)


@pytest.fixture
def facade(repository, location_resolver, conversion_table) -> PriceResolutionFacade:
    return PriceResolutionFacade(repository, location_resolver=location_resolver, conversion_table=conversion_table)


@pytest.fixture
def manager(repository, facade, unit_resolver) -> PriceOverrideManager:
    return PriceOverrideManager(repository, repository, facade, unit_resolver=unit_resolver)
