# 🔁 pos_pricing/domain/pricing/rounding.py
"""
🔁 Утиліти округлення для Decimal та конфіг правил округлення цін.

🔹 `quantize` — округлення до N знаків за заданою стратегією.
🔹 `q2` — скорочення для 2 знаків ROUND_HALF_UP (валютна конвенція каси).
🔹 `percent_multiplier` — 10 → Decimal("1.10") для коригувань цін.
🔹 `PricingConfig` — незмінний набір параметрів округлення для резолверів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import decimal                                                         # 📚 Перелік ROUND_* констант
from dataclasses import dataclass                                      # 🧱 Immutable-конфіг
from decimal import ROUND_HALF_UP, Decimal                             # 💵 Точна арифметика
from typing import Union                                               # 🧰 Вхідні типи

Number = Union[Decimal, int, str]

# ================================
# 🧾 КОНСТАНТИ
# ================================
DEFAULT_FRACTION_DIGITS: int = 2                                       # 🔢 Копійки/центи
DEFAULT_ROUNDING: str = ROUND_HALF_UP                                  # 🔁 99.995 → 100.00

ROUNDING_MODES = frozenset(
    getattr(decimal, name) for name in dir(decimal) if name.startswith("ROUND_")
)


# ================================
# ➗ ФУНКЦІЇ ОКРУГЛЕННЯ
# ================================
def quantize(value: Number, digits: int = DEFAULT_FRACTION_DIGITS, rounding: str = DEFAULT_ROUNDING) -> Decimal:
    """📐 Округлює значення до `digits` знаків після коми."""
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")
    return Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=rounding)


def q2(value: Number) -> Decimal:
    """💵 Два знаки, ROUND_HALF_UP."""
    return quantize(value, 2, ROUND_HALF_UP)


def percent_multiplier(pct: Number) -> Decimal:
    """📊 Перетворює відсоток коригування на множник: 10 → 1.10, -5 → 0.95."""
    return Decimal(1) + Decimal(str(pct)) / Decimal(100)


# ================================
# ⚙️ КОНФІГ ОКРУГЛЕННЯ
# ================================
@dataclass(frozen=True, slots=True)
class PricingConfig:
    """Параметри округлення результатів резолвінгу."""

    fraction_digits: int = DEFAULT_FRACTION_DIGITS
    rounding: str = DEFAULT_ROUNDING

    def __post_init__(self) -> None:
        if self.fraction_digits < 0:
            raise ValueError(f"fraction_digits must be non-negative, got {self.fraction_digits}")
        if self.rounding not in ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {self.rounding!r}")


__all__ = [
    "DEFAULT_FRACTION_DIGITS",
    "DEFAULT_ROUNDING",
    "ROUNDING_MODES",
    "PricingConfig",
    "percent_multiplier",
    "q2",
    "quantize",
]
