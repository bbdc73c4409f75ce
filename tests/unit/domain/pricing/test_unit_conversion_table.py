"""
🧪 test_unit_conversion_table.py — unit-тести для UnitConversionTable

Перевіряє:
- Коефіцієнт базової одиниці = 1 без рядка в таблиці
- Повернення збереженого коефіцієнта
- UnitNotConfiguredError для одиниці без коефіцієнта
- InvalidConversionFactorError для коефіцієнта ≤ 0
- Перерахунок кількостей між одиницями
"""

from decimal import Decimal

import pytest

from pos_pricing.errors import (
    InvalidAmountError,
    InvalidConversionFactorError,
    UnitNotConfiguredError,
    VariationNotFoundError,
)

BOX = "box"
PIECE = "piece"
VARIATION = "V"


@pytest.mark.asyncio
async def test_base_unit_factor_is_one_without_row(conversion_table):
    assert await conversion_table.factor_for(VARIATION, PIECE) == Decimal(1)
    assert await conversion_table.is_base_unit(VARIATION, PIECE)
    assert not await conversion_table.is_base_unit(VARIATION, BOX)


@pytest.mark.asyncio
async def test_stray_base_unit_row_is_ignored(repository, conversion_table):
    repository.set_conversion_factor(VARIATION, PIECE, 5)

    assert await conversion_table.factor_for(VARIATION, PIECE) == Decimal(1)
    assert list(await repository.list_unit_ids(VARIATION)) == [PIECE, BOX]


@pytest.mark.asyncio
async def test_stored_factor_returned(conversion_table):
    assert await conversion_table.factor_for(VARIATION, BOX) == Decimal(12)


@pytest.mark.asyncio
async def test_missing_factor_raises_unit_not_configured(conversion_table):
    with pytest.raises(UnitNotConfiguredError) as exc_info:
        await conversion_table.factor_for(VARIATION, "pallet")

    assert exc_info.value.unit_id == "pallet"
    assert exc_info.value.variation_id == VARIATION


@pytest.mark.asyncio
@pytest.mark.parametrize("factor", [0, "-3"])
async def test_non_positive_factor_raises(repository, conversion_table, factor):
    repository.set_conversion_factor(VARIATION, "broken", factor)

    with pytest.raises(InvalidConversionFactorError) as exc_info:
        await conversion_table.factor_for(VARIATION, "broken")

    assert isinstance(exc_info.value, InvalidAmountError)
    assert exc_info.value.field == "conversion_factor"


@pytest.mark.asyncio
async def test_unknown_variation_passes_through(conversion_table):
    with pytest.raises(VariationNotFoundError):
        await conversion_table.factor_for("missing", PIECE)


@pytest.mark.asyncio
async def test_convert_quantity(conversion_table):
    assert await conversion_table.convert_quantity(VARIATION, 2, BOX, PIECE) == Decimal(24)
    assert await conversion_table.convert_quantity(VARIATION, 6, PIECE, BOX) == Decimal("0.5")
    assert await conversion_table.convert_quantity(VARIATION, "7", "pallet", "pallet") == Decimal(7)
