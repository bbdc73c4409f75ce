"""
🧪 test_cached_price_facade.py — unit-тести для CachedPriceResolutionFacade

Перевіряє:
- Повторний запит віддається з кешу (внутрішній фасад не викликається)
- Запис перевизначення змінює покоління й інвалідовує лише свою варіацію
- Помилки не кешуються
"""

import pytest

from pos_pricing.domain.pricing import Money, PriceKind, PriceProvenance, PriceResolutionFacade
from pos_pricing.errors import UnitNotConfiguredError, VariationNotFoundError
from pos_pricing.infrastructure.cache.cached_price_facade import CachedPriceResolutionFacade
from pos_pricing.infrastructure.storage.in_memory_repository import InMemoryPriceRepository
from pos_pricing.shared.cache.price_lru_cache import PriceLruCache


class _CountingFacade(PriceResolutionFacade):
    def __init__(self, repository):
        super().__init__(repository)
        self.calls = 0

    async def get_price(self, variation_id, unit_id, location_id, kind):
        self.calls += 1
        return await super().get_price(variation_id, unit_id, location_id, kind)


@pytest.fixture
def repository():
    repo = InMemoryPriceRepository()
    repo.add_variation("V", base_unit_id="piece", purchase_price="60", selling_price="100")
    repo.add_variation("W", base_unit_id="kg", purchase_price="5", selling_price="8")
    repo.set_conversion_factor("V", "box", 12)
    return repo


@pytest.fixture
def inner(repository):
    return _CountingFacade(repository)


@pytest.fixture
def cached(repository, inner):
    return CachedPriceResolutionFacade(inner, generations=repository, cache=PriceLruCache(max_entries=64, ttl_sec=0))


@pytest.mark.asyncio
async def test_second_call_served_from_cache(cached, inner):
    first = await cached.get_selling_price("V", "box", "L1")
    second = await cached.get_selling_price("V", "box", "L1")

    assert first == second
    assert inner.calls == 1


@pytest.mark.asyncio
async def test_override_write_invalidates_only_its_variation(repository, cached, inner):
    await cached.get_selling_price("V", "box", "L1")
    await cached.get_selling_price("W", "kg", "L1")

    await repository.upsert_location_override("V", "box", "L1", PriceKind.SELLING, Money("1100"))

    resolved = await cached.get_selling_price("V", "box", "L1")
    await cached.get_selling_price("W", "kg", "L1")

    assert resolved.price == Money("1100.00")
    assert resolved.provenance is PriceProvenance.LOCATION_OVERRIDE
    assert inner.calls == 3


@pytest.mark.asyncio
async def test_errors_are_not_cached(repository, cached, inner):
    for _ in range(2):
        with pytest.raises(UnitNotConfiguredError):
            await cached.get_selling_price("V", "pallet", "L1")
    assert inner.calls == 2

    repository.set_conversion_factor("V", "pallet", 480)
    resolved = await cached.get_selling_price("V", "pallet", "L1")
    assert resolved.price == Money("48000.00")


@pytest.mark.asyncio
async def test_matrix_is_delegated(cached):
    rows = await cached.list_location_prices("V", ["L1"])

    assert [row.unit_id for row in rows] == ["piece", "box"]


@pytest.mark.asyncio
async def test_unknown_variation_does_not_grow_generations(repository, cached):
    for _ in range(3):
        with pytest.raises(VariationNotFoundError):
            await cached.get_selling_price("ghost", "piece", "L1")

    assert await repository.get_generation("ghost") == 0
    assert "ghost" not in repository._generations
