# 🧊 pos_pricing/infrastructure/cache/cached_price_facade.py
"""
🧊 Мемоізуючий шар перед `PriceResolutionFacade`.

🔹 Ключ = (варіація, одиниця, точка, вид, покоління варіації).
🔹 Будь-який запис перевизначення збільшує покоління своєї варіації, тож старі записи
   цієї варіації просто перестають збігатися й вимиваються LRU/TTL; інші варіації не зачеплено.
🔹 Помилки не кешуються: наступний виклик знову піде в резолвер.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування
from typing import Sequence                                            # 🧰 Анотації

# 🧩 Внутрішні модулі проєкту
from pos_pricing.domain.pricing.interfaces import (
    IGenerationSource,
    IPriceResolutionFacade,
    LocationId,
    LocationUnitPrice,
    PriceKind,
    ResolvedPrice,
    UnitId,
    VariationId,
)
from pos_pricing.shared.cache.price_lru_cache import PriceLruCache
from pos_pricing.shared.metrics import PRICE_CACHE_HIT, PRICE_CACHE_MISS
from pos_pricing.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.cache")


class CachedPriceResolutionFacade(IPriceResolutionFacade):
    """Фасад із кешем; контракт ідентичний некешованому."""

    def __init__(
        self,
        inner: IPriceResolutionFacade,
        generations: IGenerationSource,
        cache: PriceLruCache[ResolvedPrice],
    ) -> None:
        self._inner = inner
        self._generations = generations
        self._cache = cache

    async def get_price(
        self,
        variation_id: VariationId,
        unit_id: UnitId,
        location_id: LocationId,
        kind: PriceKind,
    ) -> ResolvedPrice:
        generation = await self._generations.get_generation(variation_id)
        key = (variation_id, unit_id, location_id, kind, generation)

        cached = await self._cache.get(key)
        if cached is not None:
            PRICE_CACHE_HIT.inc()
            logger.debug("🧊 cache hit | key=%r", key)
            return cached

        lock = await self._cache.key_lock(key)
        try:
            async with lock:
                cached = await self._cache.get(key)                    # 🔁 Хтось міг порахувати, поки ми чекали
                if cached is not None:
                    PRICE_CACHE_HIT.inc()
                    return cached
                PRICE_CACHE_MISS.inc()
                resolved = await self._inner.get_price(variation_id, unit_id, location_id, kind)
                await self._cache.set(key, resolved)
                logger.debug("🧊 cache store | key=%r → %s", key, resolved.price)
                return resolved
        finally:
            await self._cache.release_key_lock(key)

    async def list_location_prices(
        self,
        variation_id: VariationId,
        location_ids: Sequence[LocationId],
    ) -> list[LocationUnitPrice]:
        return await self._inner.list_location_prices(variation_id, location_ids)


__all__ = ["CachedPriceResolutionFacade"]
