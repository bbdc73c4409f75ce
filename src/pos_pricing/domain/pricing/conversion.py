# 📏 pos_pricing/domain/pricing/conversion.py
"""
📏 `UnitConversionTable` — коефіцієнти одиниць відносно базової одиниці варіації.

🔹 Базова одиниця завжди конвертується сама в себе з коефіцієнтом рівно 1.
🔹 Одиниця без коефіцієнта → `UnitNotConfiguredError` (ніколи не підміняємо на 1).
🔹 Коефіцієнт ≤ 0 → `InvalidConversionFactorError`.

Приклад: кабель, базова одиниця «метр», «бухта» має коефіцієнт 500:
1 бухта = 500 метрів, а ціна бухти = ціна метра × 500.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування
from decimal import Decimal                                            # 🔢 Точні коефіцієнти

# 🧩 Внутрішні модулі проєкту
from pos_pricing.errors.custom_errors import (
    InvalidConversionFactorError,
    UnitNotConfiguredError,
)
from pos_pricing.shared.utils.logger import LOG_NAME
from .interfaces import IPriceRepository, UnitId, VariationId
from .money import to_decimal

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.conversion")

BASE_UNIT_FACTOR: Decimal = Decimal(1)


class UnitConversionTable:
    """Таблиця коефіцієнтів поверх порту читання."""

    def __init__(self, repository: IPriceRepository) -> None:
        self._repository = repository

    async def factor_for(self, variation_id: VariationId, unit_id: UnitId) -> Decimal:
        """
        Повертає коефіцієнт одиниці для варіації.

        Raises:
            UnitNotConfiguredError: одиниця не базова і не має рядка в таблиці.
            InvalidConversionFactorError: збережений коефіцієнт ≤ 0.
        """
        base_unit_id = await self._repository.get_base_unit_id(variation_id)
        if unit_id == base_unit_id:
            logger.debug("📏 factor_for: base unit | variation=%r unit=%r → 1", variation_id, unit_id)
            return BASE_UNIT_FACTOR

        raw_factor = await self._repository.get_conversion_factor(variation_id, unit_id)
        if raw_factor is None:
            logger.warning("🚫 Unit not configured | variation=%r unit=%r", variation_id, unit_id)
            raise UnitNotConfiguredError(variation_id, unit_id)

        factor = to_decimal(raw_factor, field="conversion_factor")
        if factor <= 0:
            logger.error("❌ Non-positive conversion factor | variation=%r unit=%r factor=%s", variation_id, unit_id, factor)
            raise InvalidConversionFactorError(variation_id, unit_id, raw_factor)

        logger.debug("📏 factor_for | variation=%r unit=%r → %s", variation_id, unit_id, factor)
        return factor

    async def is_base_unit(self, variation_id: VariationId, unit_id: UnitId) -> bool:
        return unit_id == await self._repository.get_base_unit_id(variation_id)

    async def convert_quantity(
        self,
        variation_id: VariationId,
        quantity: Decimal | int | str,
        from_unit_id: UnitId,
        to_unit_id: UnitId,
    ) -> Decimal:
        """
        Перераховує кількість між одиницями через базову: qty × from_factor / to_factor.

        Результат не округлюється.
        """
        qty = to_decimal(quantity, field="quantity")
        if from_unit_id == to_unit_id:
            return qty
        from_factor = await self.factor_for(variation_id, from_unit_id)
        to_factor = await self.factor_for(variation_id, to_unit_id)
        converted = qty * from_factor / to_factor
        logger.debug(
            "🔄 convert_quantity | variation=%r %s %r → %s %r",
            variation_id,
            qty,
            from_unit_id,
            converted,
            to_unit_id,
        )
        return converted


__all__ = ["BASE_UNIT_FACTOR", "UnitConversionTable"]
