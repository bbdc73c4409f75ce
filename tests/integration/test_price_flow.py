"""
🧪 test_price_flow.py — інтеграційний тест для Container + PriceResolutionFacade

Перевіряє:
- Складання сервісів контейнером з конфігурації
- Повний цикл «ціна → перевизначення одиниці → перевизначення точки» через кешований фасад
- Вимкнення кешу конфігом
"""

import pytest

from pos_pricing.config.config_service import ENV_KEYS, ConfigService
from pos_pricing.config.setup.container import Container
from pos_pricing.domain.pricing import LocationPriceInput, Money, PriceKind, PriceProvenance, PriceResolutionFacade
from pos_pricing.infrastructure.cache.cached_price_facade import CachedPriceResolutionFacade
from pos_pricing.infrastructure.storage.in_memory_repository import InMemoryPriceRepository


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for env_name in ENV_KEYS:
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.setattr(ConfigService, "_instance", None)
    yield
    ConfigService._instance = None


@pytest.fixture
def repository():
    repo = InMemoryPriceRepository()
    repo.add_variation("V", base_unit_id="piece", purchase_price="60.00", selling_price="100.00")
    repo.set_conversion_factor("V", "box", 12)
    return repo


@pytest.mark.asyncio
async def test_full_price_flow(repository):
    container = Container(repository=repository)
    prices = container.price_service
    manager = container.price_override_manager

    assert isinstance(prices, CachedPriceResolutionFacade)
    assert (await prices.get_selling_price("V", "box", "L1")).price == Money("1200.00")

    await manager.set_unit_override("V", "box", PriceKind.SELLING, "1150.00")
    for location in ("L1", "L2"):
        resolved = await prices.get_selling_price("V", "box", location)
        assert (resolved.price, resolved.provenance) == (Money("1150.00"), PriceProvenance.UNIT_OVERRIDE)

    await manager.save_location_prices("V", [LocationPriceInput("L1", "box", "720.00", "1100.00")], updated_by="alice")
    at_l1 = await prices.get_selling_price("V", "box", "L1")
    at_l2 = await prices.get_selling_price("V", "box", "L2")

    assert (at_l1.price, at_l1.provenance) == (Money("1100.00"), PriceProvenance.LOCATION_OVERRIDE)
    assert (at_l2.price, at_l2.provenance) == (Money("1150.00"), PriceProvenance.UNIT_OVERRIDE)
    assert (await prices.get_purchase_price("V", "box", "L1")).price == Money("720.00")


@pytest.mark.asyncio
async def test_cache_disabled_and_rounding_from_env(monkeypatch, repository):
    monkeypatch.setenv("POS_PRICING_CACHE_ENABLED", "false")
    monkeypatch.setenv("POS_PRICING_FRACTION_DIGITS", "0")
    repository.add_variation("W", base_unit_id="piece", purchase_price="1", selling_price="99.5")

    container = Container(repository=repository)

    assert type(container.price_service) is PriceResolutionFacade
    assert container.price_cache is None
    assert container.pricing_config.fraction_digits == 0
    assert (await container.price_service.get_selling_price("W", "piece", "L1")).price == Money("100")
