# 🚪 pos_pricing/domain/pricing/facade.py
"""
🚪 `PriceResolutionFacade` — єдина публічна точка входу резолвінгу цін.

🔹 Каса, каталог і звіти викликають лише фасад; логіка fallback-ів живе в резолверах.
🔹 Окрім точкових запитів, будує матрицю «точка × одиниця» для екранів керування цінами.
🔹 Рахує метрики за рівнем, що дав ціну, та за причинами помилок (помилки не ковтає).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування
from typing import Optional, Sequence                                  # 🧰 Анотації

# 🧩 Внутрішні модулі проєкту
from pos_pricing.errors.custom_errors import PricingError
from pos_pricing.shared.metrics import PRICE_RESOLUTION_FAILURE, PRICE_RESOLUTION_SECONDS, PRICE_RESOLVED
from pos_pricing.shared.utils.logger import LOG_NAME
from .conversion import UnitConversionTable
from .interfaces import (
    IPriceRepository,
    IPriceResolutionFacade,
    LocationId,
    LocationUnitPrice,
    PriceKind,
    ResolvedPrice,
    UnitId,
    VariationId,
)
from .resolvers import LocationPriceResolver

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.facade")


class PriceResolutionFacade(IPriceResolutionFacade):
    """💸 Тонкий фасад над `LocationPriceResolver`."""

    def __init__(
        self,
        repository: IPriceRepository,
        location_resolver: Optional[LocationPriceResolver] = None,
        conversion_table: Optional[UnitConversionTable] = None,
    ) -> None:
        self._repository = repository
        self._resolver = location_resolver or LocationPriceResolver(repository)
        self._conversion = conversion_table or UnitConversionTable(repository)

    # ================================
    # 🔢 ТОЧКОВІ ЗАПИТИ
    # ================================
    async def get_price(
        self,
        variation_id: VariationId,
        unit_id: UnitId,
        location_id: LocationId,
        kind: PriceKind,
    ) -> ResolvedPrice:
        try:
            with PRICE_RESOLUTION_SECONDS.time():
                resolved = await self._resolver.resolve(variation_id, unit_id, location_id, kind)
        except PricingError as exc:
            PRICE_RESOLUTION_FAILURE.labels(reason=exc.code).inc()
            logger.warning("⚠️ Price resolution failed | %s", exc, extra=exc.to_log_extra())
            raise
        PRICE_RESOLVED.labels(tier=resolved.provenance.value, kind=kind.value).inc()
        logger.info(
            "💸 Price resolved | variation=%r unit=%r location=%r kind=%s → %s (%s)",
            variation_id,
            unit_id,
            location_id,
            kind.value,
            resolved.price,
            resolved.provenance.value,
        )
        return resolved

    # ================================
    # 🗺️ МАТРИЦЯ ТОЧКА × ОДИНИЦЯ
    # ================================
    async def list_location_prices(
        self,
        variation_id: VariationId,
        location_ids: Sequence[LocationId],
    ) -> list[LocationUnitPrice]:
        """
        Повертає ефективні ціни для кожної пари (точка, одиниця).

        Args:
            variation_id: Варіація товару.
            location_ids: Точки у потрібному порядку.

        Returns:
            list[LocationUnitPrice]: Рядки у порядку точок, всередині точки базова одиниця перша.
        """
        unit_ids = list(await self._repository.list_unit_ids(variation_id))
        base_unit_id = await self._repository.get_base_unit_id(variation_id)
        factors = {unit_id: await self._conversion.factor_for(variation_id, unit_id) for unit_id in unit_ids}

        rows: list[LocationUnitPrice] = []
        for location_id in location_ids:
            for unit_id in unit_ids:
                purchase = await self.get_purchase_price(variation_id, unit_id, location_id)
                selling = await self.get_selling_price(variation_id, unit_id, location_id)
                rows.append(
                    LocationUnitPrice(
                        location_id=location_id,
                        unit_id=unit_id,
                        multiplier=factors[unit_id],
                        is_base_unit=unit_id == base_unit_id,
                        purchase=purchase,
                        selling=selling,
                    )
                )

        logger.info(
            "🗺️ Location prices | variation=%r: %d rows (%d locations × %d units)",
            variation_id,
            len(rows),
            len(location_ids),
            len(unit_ids),
        )
        return rows


__all__ = ["PriceResolutionFacade"]
