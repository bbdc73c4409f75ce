# 🧮 pos_pricing/errors/reason_codes.py
"""
🧮 Перелік причин помилок та шаблони повідомлень для UI каси.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from enum import Enum                                                  # 🏷️ Перерахування
from typing import Dict                                                # 📐 Типізація


class ReasonCode(str, Enum):
    """🏷️ Причина, з якої не вдалося отримати чи зберегти ціну."""

    UNIT_NOT_CONFIGURED = "unit_not_configured"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_FACTOR = "invalid_conversion_factor"
    PRICE_RULE = "price_rule_violation"
    VARIATION_NOT_FOUND = "variation_not_found"
    INTERNAL = "internal"


# 💬 Шаблони; ctx підставляється через str.format
REASON_MESSAGES: Dict[ReasonCode, str] = {
    ReasonCode.UNIT_NOT_CONFIGURED: "📏 Одиницю «{unit_id}» не налаштовано для цього товару.",
    ReasonCode.INVALID_AMOUNT: "💵 Некоректна сума у полі «{field}»: {value}.",
    ReasonCode.INVALID_FACTOR: "🔢 Некоректний коефіцієнт конверсії для одиниці «{unit_id}»: {value}.",
    ReasonCode.PRICE_RULE: "📐 {message}",
    ReasonCode.VARIATION_NOT_FOUND: "🔍 Товар «{variation_id}» не знайдено.",
    ReasonCode.INTERNAL: "❌ Не вдалося визначити ціну. Повідом адміністратора.",
}


__all__ = ["ReasonCode", "REASON_MESSAGES"]
