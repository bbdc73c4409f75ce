"""
🧪 test_price_resolution_facade.py — unit-тести для PriceResolutionFacade

Перевіряє:
- Повний сценарій «штука / ящик» по трьох рівнях пріоритету
- Прокидання UnitNotConfiguredError без підміни на дефолт
- Матрицю цін «точка × одиниця»
- Лічильники Prometheus за рівнем та причиною помилки
- Паралельні виклики (фасад без спільного стану)
"""

import asyncio
import logging
from decimal import Decimal

import pytest
from prometheus_client import REGISTRY

from pos_pricing.domain.pricing import Money, PriceKind, PriceProvenance
from pos_pricing.errors import UnitNotConfiguredError

BOX = "box"
L1 = "L1"
L2 = "L2"
PIECE = "piece"
VARIATION = "V"


def _sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.asyncio
async def test_box_scenario_through_all_tiers(repository, facade):
    # 1) лише базова ціна × коефіцієнт
    first = await facade.get_selling_price(VARIATION, BOX, L1)
    assert first.price == Money("1200.00")
    assert first.provenance is PriceProvenance.BASE_CONVERTED

    # 2) перевизначення одиниці діє для всіх точок
    await repository.upsert_unit_override(VARIATION, BOX, PriceKind.SELLING, Money("1150.00"))
    for location in (L1, L2):
        resolved = await facade.get_selling_price(VARIATION, BOX, location)
        assert resolved.price == Money("1150.00")
        assert resolved.provenance is PriceProvenance.UNIT_OVERRIDE

    # 3) перевизначення точки діє лише для L1
    await repository.upsert_location_override(VARIATION, BOX, L1, PriceKind.SELLING, Money("1100.00"))
    at_l1 = await facade.get_selling_price(VARIATION, BOX, L1)
    at_l2 = await facade.get_selling_price(VARIATION, BOX, L2)
    assert (at_l1.price, at_l1.provenance) == (Money("1100.00"), PriceProvenance.LOCATION_OVERRIDE)
    assert (at_l2.price, at_l2.provenance) == (Money("1150.00"), PriceProvenance.UNIT_OVERRIDE)

    # закупівля не зачеплена жодним перевизначенням продажу
    purchase = await facade.get_purchase_price(VARIATION, BOX, L1)
    assert purchase.price == Money("720.00")
    assert purchase.kind is PriceKind.PURCHASE


@pytest.mark.asyncio
async def test_unit_not_configured_propagates(facade, caplog):
    with caplog.at_level(logging.WARNING, logger="pos_pricing"):
        with pytest.raises(UnitNotConfiguredError):
            await facade.get_price(VARIATION, "pallet", L1, PriceKind.SELLING)

    assert "Price resolution failed" in caplog.text


@pytest.mark.asyncio
async def test_location_override_for_unconfigured_unit_still_wins(repository, facade):
    await repository.upsert_location_override(VARIATION, "pallet", L1, PriceKind.SELLING, Money("5000"))

    resolved = await facade.get_selling_price(VARIATION, "pallet", L1)

    assert resolved.price == Money("5000.00")
    with pytest.raises(UnitNotConfiguredError):
        await facade.get_selling_price(VARIATION, "pallet", L2)


@pytest.mark.asyncio
async def test_metrics_count_tiers_and_failures(facade):
    labels = {"tier": "base-converted", "kind": "selling"}
    before = _sample("pos_pricing_price_resolved_total", labels)
    failures_before = _sample("pos_pricing_price_resolution_failure_total", {"reason": "unit_not_configured"})

    await facade.get_selling_price(VARIATION, PIECE, L1)
    with pytest.raises(UnitNotConfiguredError):
        await facade.get_selling_price(VARIATION, "pallet", L1)

    assert _sample("pos_pricing_price_resolved_total", labels) == before + 1
    assert _sample("pos_pricing_price_resolution_failure_total", {"reason": "unit_not_configured"}) == failures_before + 1


@pytest.mark.asyncio
async def test_list_location_prices_matrix(repository, facade):
    await repository.upsert_location_override(VARIATION, BOX, L1, PriceKind.SELLING, Money("1100.00"))

    rows = await facade.list_location_prices(VARIATION, [L1, L2])

    assert [(row.location_id, row.unit_id) for row in rows] == [(L1, PIECE), (L1, BOX), (L2, PIECE), (L2, BOX)]
    piece_l1, box_l1, _, box_l2 = rows
    assert piece_l1.is_base_unit and piece_l1.multiplier == Decimal(1)
    assert not box_l1.is_base_unit and box_l1.multiplier == Decimal(12)
    assert box_l1.is_location_specific
    assert box_l1.selling.price == Money("1100.00")
    assert box_l1.purchase.price == Money("720.00")
    assert not box_l2.is_location_specific
    assert box_l2.selling.provenance is PriceProvenance.BASE_CONVERTED


@pytest.mark.asyncio
async def test_concurrent_calls_are_consistent(facade):
    results = await asyncio.gather(
        *(facade.get_price(VARIATION, BOX, location, PriceKind.SELLING) for location in [L1, L2] * 10)
    )

    assert {result.price for result in results} == {Money("1200.00")}
