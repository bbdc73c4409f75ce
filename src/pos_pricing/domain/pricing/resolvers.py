# 🧭 pos_pricing/domain/pricing/resolvers.py
"""
🧭 Резолвери ціни: глобальний (одиниця) та локальний (точка продажу + одиниця).

🔹 Порядок рівнів фіксований: точка → одиниця → базова ціна × коефіцієнт.
🔹 Кожен рівень — явна послідовна перевірка, без плагінів і часткового злиття.
🔹 Резолвери нічого не пишуть і не тримають стану між викликами.
🔹 Помилки сховища та валідації прокидаються без змін, «дефолтна» ціна не підставляється.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування рішень кожного рівня
from typing import Optional                                            # 🧰 Анотації

# 🧩 Внутрішні модулі проєкту
from pos_pricing.shared.utils.logger import LOG_NAME
from .conversion import UnitConversionTable
from .interfaces import (
    IPriceRepository,
    LocationId,
    PriceKind,
    PriceProvenance,
    ResolvedPrice,
    UnitId,
    UnitPriceResolution,
    VariationId,
)
from .money import Money
from .rounding import PricingConfig

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.resolvers")


# ================================
# 🧮 ДОПОМІЖНА ФУНКЦІЯ
# ================================
def _finalize(price: Money, field: str, cfg: PricingConfig) -> Money:
    """Перевіряє знак суми зі сховища та округлює за конфігом."""
    return price.require_non_negative(field).rounded(cfg.fraction_digits, cfg.rounding)


# ================================
# 📏 ГЛОБАЛЬНИЙ РІВЕНЬ (ОДИНИЦЯ)
# ================================
class UnitPriceResolver:
    """
    Глобальна ціна для одиниці, незалежна від точки продажу.

    1️⃣ Перевизначення для (варіація, одиниця, вид) → `unit-override`.
    2️⃣ Інакше базова ціна × коефіцієнт одиниці → `base-converted`.
    """

    def __init__(
        self,
        repository: IPriceRepository,
        conversion_table: Optional[UnitConversionTable] = None,
        config: Optional[PricingConfig] = None,
    ) -> None:
        self._repository = repository
        self._conversion = conversion_table or UnitConversionTable(repository)
        self._cfg = config or PricingConfig()

    async def resolve(self, variation_id: VariationId, unit_id: UnitId, kind: PriceKind) -> UnitPriceResolution:
        override = await self._repository.find_unit_override(variation_id, unit_id, kind)
        if override is not None:
            price = _finalize(override, f"unit_override.{kind.value}", self._cfg)
            logger.debug("📏 unit-override | variation=%r unit=%r kind=%s → %s", variation_id, unit_id, kind.value, price)
            return UnitPriceResolution(price=price, provenance=PriceProvenance.UNIT_OVERRIDE)

        factor = await self._conversion.factor_for(variation_id, unit_id)
        base_price = await self._repository.get_base_price(variation_id, kind)
        base_price.require_non_negative(f"base_price.{kind.value}")
        price = base_price.multiply(factor).rounded(self._cfg.fraction_digits, self._cfg.rounding)
        logger.debug(
            "🧮 base-converted | variation=%r unit=%r kind=%s base=%s × %s → %s",
            variation_id,
            unit_id,
            kind.value,
            base_price,
            factor,
            price,
        )
        return UnitPriceResolution(price=price, provenance=PriceProvenance.BASE_CONVERTED)


# ================================
# 🏬 ЛОКАЛЬНИЙ РІВЕНЬ (ТОЧКА + ОДИНИЦЯ)
# ================================
class LocationPriceResolver:
    """
    Ефективна ціна з урахуванням точки продажу.

    Перевизначення точки перемагає безумовно; інакше результат глобального
    рівня передається далі разом із його міткою походження.
    """

    def __init__(
        self,
        repository: IPriceRepository,
        unit_resolver: Optional[UnitPriceResolver] = None,
        config: Optional[PricingConfig] = None,
    ) -> None:
        self._repository = repository
        self._cfg = config or PricingConfig()
        self._unit_resolver = unit_resolver or UnitPriceResolver(repository, config=self._cfg)

    async def resolve(
        self,
        variation_id: VariationId,
        unit_id: UnitId,
        location_id: LocationId,
        kind: PriceKind,
    ) -> ResolvedPrice:
        override = await self._repository.find_location_override(variation_id, unit_id, location_id, kind)
        if override is not None:
            price = _finalize(override, f"location_override.{kind.value}", self._cfg)
            provenance = PriceProvenance.LOCATION_OVERRIDE
            logger.debug(
                "🏬 location-override | variation=%r unit=%r location=%r kind=%s → %s",
                variation_id,
                unit_id,
                location_id,
                kind.value,
                price,
            )
        else:
            unit_result = await self._unit_resolver.resolve(variation_id, unit_id, kind)
            price, provenance = unit_result.price, unit_result.provenance

        return ResolvedPrice(
            variation_id=variation_id,
            unit_id=unit_id,
            location_id=location_id,
            kind=kind,
            price=price,
            provenance=provenance,
        )


__all__ = ["UnitPriceResolver", "LocationPriceResolver"]
