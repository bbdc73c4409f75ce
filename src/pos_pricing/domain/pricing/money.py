# 💵 pos_pricing/domain/pricing/money.py
"""
💵 `Money` — точне десяткове значення суми без float.

🔹 Вхідні float приводяться через `str()`, щоб не тягнути двійкові артефакти.
🔹 NaN / Infinity / нечислові рядки → `InvalidAmountError`.
🔹 Рівність точна й числова: `Money("100.0") == Money("100.00")`.
🔹 Цінові поля будуються через `Money.of(...)`, що забороняє відʼємні суми.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass                                      # 🧱 Value object
from decimal import Decimal, InvalidOperation                          # 💰 Точна арифметика
from typing import Union                                               # 🧰 Вхідні типи

# 🧩 Внутрішні модулі проєкту
from pos_pricing.errors.custom_errors import InvalidAmountError        # 🚫 Некоректна сума
from .rounding import DEFAULT_FRACTION_DIGITS, DEFAULT_ROUNDING, quantize

Amount = Union["Money", Decimal, int, float, str]


# ================================
# 🧰 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def to_decimal(value: object, *, field: str = "amount") -> Decimal:
    """🧮 Приводить значення до скінченного Decimal або піднімає `InvalidAmountError`."""
    if isinstance(value, Money):
        return value.amount
    if isinstance(value, bool):                                        # 🚫 True/False не є сумами
        raise InvalidAmountError(value, field=field)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(value, field=field) from exc
    else:
        raise InvalidAmountError(value, field=field)
    if not result.is_finite():
        raise InvalidAmountError(value, field=field)
    return result


# ================================
# 💵 VALUE OBJECT
# ================================
@dataclass(frozen=True, order=True)
class Money:
    """Сума у валюті бізнесу (валюта одна на весь бізнес, тому не зберігається)."""

    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))

    # ---------- конструктори ----------
    @classmethod
    def of(cls, value: Amount, *, field: str = "amount", allow_negative: bool = False) -> "Money":
        """Створює Money з перевіркою знака (ціни не бувають відʼємними)."""
        money = value if isinstance(value, Money) else cls(to_decimal(value, field=field))
        if not allow_negative and money.is_negative:
            raise InvalidAmountError(value, field=field)
        return money

    @classmethod
    def zero(cls) -> "Money":
        return cls(Decimal(0))

    # ---------- властивості ----------
    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    def require_non_negative(self, field: str = "amount") -> "Money":
        """Повертає себе або піднімає `InvalidAmountError` (для сум зі сховища)."""
        if self.is_negative:
            raise InvalidAmountError(self.amount, field=field)
        return self

    # ---------- арифметика ----------
    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + other.amount)

    def multiply(self, factor: Union[Decimal, int, str]) -> "Money":
        """Множення на додатний коефіцієнт (конверсія одиниць, відсоткове коригування)."""
        factor_dec = to_decimal(factor, field="factor")
        if factor_dec <= 0:
            raise InvalidAmountError(factor, field="factor")
        return Money(self.amount * factor_dec)

    def rounded(self, digits: int = DEFAULT_FRACTION_DIGITS, rounding: str = DEFAULT_ROUNDING) -> "Money":
        """Округлення до `digits` знаків (за замовчуванням 2, ROUND_HALF_UP)."""
        return Money(quantize(self.amount, digits, rounding))

    def scaled(self, digits: int = DEFAULT_FRACTION_DIGITS) -> int:
        """Ціле представлення у мінімальних одиницях (центи при digits=2)."""
        return int(self.amount.scaleb(digits).to_integral_value(rounding=DEFAULT_ROUNDING))

    def __str__(self) -> str:
        return f"{self.amount}"


__all__ = ["Amount", "Money", "to_decimal"]
