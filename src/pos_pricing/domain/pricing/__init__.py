# 💸 pos_pricing/domain/pricing/__init__.py
"""
💸 Пакет `domain.pricing` публікує контракти, DTO, резолвери та фасад ціноутворення.

🔹 `money.py` — value object `Money` на Decimal.
🔹 `rounding.py` — `quantize`, `q2`, `percent_multiplier`, `PricingConfig`.
🔹 `interfaces.py` — PriceKind/PriceProvenance, ResolvedPrice, порти сховища.
🔹 `conversion.py` — `UnitConversionTable`.
🔹 `resolvers.py` — `UnitPriceResolver`, `LocationPriceResolver`.
🔹 `facade.py` — `PriceResolutionFacade` (єдина точка входу).
🔹 `management.py` — `PriceOverrideManager` (запис перевизначень).
"""

# 🧩 Внутрішні модулі проєкту
from .conversion import BASE_UNIT_FACTOR, UnitConversionTable
from .facade import PriceResolutionFacade
from .interfaces import (
    IGenerationSource,
    IPriceOverrideStore,
    IPriceRepository,
    IPriceResolutionFacade,
    LocationId,
    LocationUnitPrice,
    PriceKind,
    PriceProvenance,
    ResolvedPrice,
    UnitId,
    UnitPriceResolution,
    VariationId,
)
from .management import LocationPriceInput, PriceOverrideManager, SaveSummary
from .money import Money, to_decimal
from .resolvers import LocationPriceResolver, UnitPriceResolver
from .rounding import PricingConfig, percent_multiplier, q2, quantize


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    # DTO / типи
    "Money",
    "PriceKind",
    "PriceProvenance",
    "ResolvedPrice",
    "UnitPriceResolution",
    "LocationUnitPrice",
    "LocationPriceInput",
    "SaveSummary",
    "VariationId",
    "UnitId",
    "LocationId",
    # Контракти
    "IPriceRepository",
    "IPriceOverrideStore",
    "IGenerationSource",
    "IPriceResolutionFacade",
    # Сервіси
    "UnitConversionTable",
    "UnitPriceResolver",
    "LocationPriceResolver",
    "PriceResolutionFacade",
    "PriceOverrideManager",
    # Утиліти
    "BASE_UNIT_FACTOR",
    "PricingConfig",
    "percent_multiplier",
    "q2",
    "quantize",
    "to_decimal",
]
