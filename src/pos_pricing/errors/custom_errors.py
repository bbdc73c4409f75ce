# 🚨 pos_pricing/errors/custom_errors.py
"""
🚨 Доменні винятки рушія ціноутворення.

🔹 `UnitNotConfiguredError` — одиниця не налаштована для варіації (немає коефіцієнта).
🔹 `InvalidAmountError` — відʼємна або нечислова сума; ознака зіпсованих даних.
🔹 `VariationNotFoundError` — зовнішня помилка сховища, резолвери її не перехоплюють.

Жодна з помилок не є транзієнтною: повтор без зміни даних дасть той самий результат.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Діагностика створення помилок
from typing import Dict, Hashable, Optional                            # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from pos_pricing.shared.errors import AppError, UserVisibleError      # 🧠 Базова ієрархія
from pos_pricing.shared.utils.logger import LOG_NAME                   # 🏷️ Префікс логерів


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors")


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Стабільні коди для логів і звітів."""

    UNIT_NOT_CONFIGURED = "unit_not_configured"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_FACTOR = "invalid_conversion_factor"
    PRICE_RULE = "price_rule_violation"
    VARIATION_NOT_FOUND = "variation_not_found"


# ================================
# 💸 ПОМИЛКИ ЦІНОУТВОРЕННЯ
# ================================
class PricingError(UserVisibleError):
    """💸 Базовий клас для помилок резолвінгу та керування цінами."""

    code: str = "pricing_error"

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["error_code"] = self.code
        return extra


class UnitNotConfiguredError(PricingError):
    """📏 Одиниця не є базовою і не має коефіцієнта для варіації."""

    code = ErrorCode.UNIT_NOT_CONFIGURED

    def __init__(self, variation_id: Hashable, unit_id: Hashable, *, details: Optional[str] = None) -> None:
        super().__init__(
            f"Unit {unit_id!r} is not configured for variation {variation_id!r}",
            details=details,
        )
        self.variation_id = variation_id
        self.unit_id = unit_id
        logger.debug("📏 UnitNotConfiguredError created", extra={"variation_id": variation_id, "unit_id": unit_id})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra.update({"variation_id": self.variation_id, "unit_id": self.unit_id})
        return extra


class InvalidAmountError(PricingError):
    """💵 Сума відʼємна або не є скінченним десятковим числом."""

    code = ErrorCode.INVALID_AMOUNT

    def __init__(self, value: object, *, field: str = "amount", details: Optional[str] = None) -> None:
        super().__init__(f"Invalid {field}: {value!r}", details=details)
        self.value = value
        self.field = field
        logger.debug("💵 InvalidAmountError created", extra={"field": field, "value": str(value)})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra.update({"field": self.field, "value": str(self.value)})
        return extra


class InvalidConversionFactorError(InvalidAmountError):
    """🔢 Збережений коефіцієнт конверсії ≤ 0."""

    code = ErrorCode.INVALID_FACTOR

    def __init__(self, variation_id: Hashable, unit_id: Hashable, factor: object) -> None:
        super().__init__(
            factor,
            field="conversion_factor",
            details=f"variation={variation_id!r} unit={unit_id!r}",
        )
        self.variation_id = variation_id
        self.unit_id = unit_id


class PriceRuleViolationError(PricingError):
    """📐 Порушено бізнес-правило під час збереження цін (selling < purchase)."""

    code = ErrorCode.PRICE_RULE


# ================================
# 🗄️ ПОМИЛКИ СХОВИЩА
# ================================
class VariationNotFoundError(AppError):
    """🗄️ Варіацію не знайдено у сховищі."""

    code = ErrorCode.VARIATION_NOT_FOUND

    def __init__(self, variation_id: Hashable) -> None:
        super().__init__(f"Product variation {variation_id!r} not found")
        self.variation_id = variation_id

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra.update({"error_code": self.code, "variation_id": self.variation_id})
        return extra


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "PricingError",
    "UnitNotConfiguredError",
    "InvalidAmountError",
    "InvalidConversionFactorError",
    "PriceRuleViolationError",
    "VariationNotFoundError",
]
