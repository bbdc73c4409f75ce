# 🚨 pos_pricing/errors/__init__.py
"""
🚨 Пакет `errors` — доменні винятки та мапінг їх у зрозумілі повідомлення.
"""

from .custom_errors import (
    ErrorCode,
    InvalidAmountError,
    InvalidConversionFactorError,
    PriceRuleViolationError,
    PricingError,
    UnitNotConfiguredError,
    VariationNotFoundError,
)
from .reason_codes import REASON_MESSAGES, ReasonCode
from .reason_mapper import describe_error, map_error_to_reason, render_reason

__all__ = [
    "ErrorCode",
    "PricingError",
    "UnitNotConfiguredError",
    "InvalidAmountError",
    "InvalidConversionFactorError",
    "PriceRuleViolationError",
    "VariationNotFoundError",
    "ReasonCode",
    "REASON_MESSAGES",
    "map_error_to_reason",
    "render_reason",
    "describe_error",
]
