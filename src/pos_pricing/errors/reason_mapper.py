# 🧭 pos_pricing/errors/reason_mapper.py
"""
🧭 Мапить винятки → `ReasonCode` + контекст для тексту помилки.

🔹 Помилки конфігурації (одиниця, коефіцієнт, сума) стають явними повідомленнями,
   а не «щось пішло не так».
🔹 Невідомі винятки мапляться на INTERNAL; мапер лише описує виняток і нічого не ковтає.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування процесу мапінгу
from typing import Any, Dict, Optional, Tuple                          # 📐 Типи

# 🧩 Внутрішні модулі проєкту
from pos_pricing.errors.custom_errors import (
    InvalidAmountError,
    InvalidConversionFactorError,
    PriceRuleViolationError,
    UnitNotConfiguredError,
    VariationNotFoundError,
)
from pos_pricing.errors.reason_codes import REASON_MESSAGES, ReasonCode
from pos_pricing.shared.utils.logger import LOG_NAME


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.reason_mapper")


# ================================
# 🧭 ОСНОВНИЙ МАПЕР
# ================================
def map_error_to_reason(exc: BaseException) -> Tuple[ReasonCode, Dict[str, Any]]:
    """
    Повертає (reason_code, ctx); ctx підставляється у шаблон повідомлення.
    """
    logger.debug("🔎 map_error_to_reason start", extra={"exc_type": type(exc).__name__})

    # ===== Конфігурація одиниць =====
    if isinstance(exc, UnitNotConfiguredError):
        return ReasonCode.UNIT_NOT_CONFIGURED, {"unit_id": exc.unit_id, "variation_id": exc.variation_id}
    if isinstance(exc, InvalidConversionFactorError):
        return ReasonCode.INVALID_FACTOR, {"unit_id": exc.unit_id, "value": exc.value}

    # ===== Суми =====
    if isinstance(exc, InvalidAmountError):
        return ReasonCode.INVALID_AMOUNT, {"field": exc.field, "value": exc.value}
    if isinstance(exc, PriceRuleViolationError):
        return ReasonCode.PRICE_RULE, {"message": exc.message}

    # ===== Сховище =====
    if isinstance(exc, VariationNotFoundError):
        return ReasonCode.VARIATION_NOT_FOUND, {"variation_id": exc.variation_id}

    # ===== Fallback =====
    logger.warning("❓ Unknown error mapped to INTERNAL", extra={"exc_type": type(exc).__name__})
    return ReasonCode.INTERNAL, {}


def render_reason(code: ReasonCode, ctx: Optional[Dict[str, Any]] = None) -> str:
    """💬 Підставляє ctx у шаблон; за відсутності ключів повертає шаблон INTERNAL."""
    template = REASON_MESSAGES.get(code, REASON_MESSAGES[ReasonCode.INTERNAL])
    try:
        return template.format(**(ctx or {}))
    except (KeyError, IndexError):
        logger.warning("⚠️ Missing ctx for reason template", extra={"reason": code.value})
        return REASON_MESSAGES[ReasonCode.INTERNAL]


def describe_error(exc: BaseException) -> str:
    """🧾 Скорочення: виняток → готовий текст для користувача."""
    code, ctx = map_error_to_reason(exc)
    return render_reason(code, ctx)


__all__ = ["map_error_to_reason", "render_reason", "describe_error"]
