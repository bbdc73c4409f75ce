# 💸 pos_pricing/__init__.py
"""
💸 pos_pricing — багаторівневий рушій визначення цін для POS.

Ціна для (варіація, одиниця, точка, вид) визначається у суворому порядку:
перевизначення точки → перевизначення одиниці → базова ціна × коефіцієнт.
"""

from .domain.pricing import (
    LocationUnitPrice,
    Money,
    PriceKind,
    PriceProvenance,
    PriceResolutionFacade,
    ResolvedPrice,
)
from .errors import InvalidAmountError, PricingError, UnitNotConfiguredError

__version__ = "0.1.0"

__all__ = [
    "LocationUnitPrice",
    "Money",
    "PriceKind",
    "PriceProvenance",
    "PriceResolutionFacade",
    "ResolvedPrice",
    "PricingError",
    "UnitNotConfiguredError",
    "InvalidAmountError",
    "__version__",
]
