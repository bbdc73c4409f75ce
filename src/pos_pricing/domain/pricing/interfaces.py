# 🧩 pos_pricing/domain/pricing/interfaces.py
"""
🧩 Контракти та DTO домену ціноутворення.

🔹 `PriceKind` / `PriceProvenance` — вид ціни та рівень, що її дав.
🔹 `ResolvedPrice`, `UnitPriceResolution`, `LocationUnitPrice` — результати резолвінгу.
🔹 `IPriceRepository` — порт читання (реалізується поверх реляційного сховища).
🔹 `IPriceOverrideStore` / `IGenerationSource` — порт запису перевизначень і маркер поколінь для кешу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod                                    # 🧱 Абстрактні контракти
from dataclasses import dataclass                                      # 🧱 DTO
from decimal import Decimal                                            # 🔢 Коефіцієнти конверсії
from enum import Enum                                                  # 🏷️ Перерахування
from typing import Hashable, Optional, Protocol, Sequence, runtime_checkable

# 🧩 Внутрішні модулі проєкту
from .money import Money                                               # 💵 Value object суми

# ================================
# 🧾 ПУБЛІЧНІ ТИПИ (АЛІАСИ)
# ================================
VariationId = Hashable                                                 # 🏷️ Ідентифікатор варіації товару
UnitId = Hashable                                                      # 📏 Ідентифікатор одиниці (piece/box/roll)
LocationId = Hashable                                                  # 🏬 Ідентифікатор торгової точки


# ================================
# 🏷️ ПЕРЕРАХУВАННЯ
# ================================
class PriceKind(str, Enum):
    """Вид ціни; кожен вид резолвиться незалежно."""

    PURCHASE = "purchase"
    SELLING = "selling"


class PriceProvenance(str, Enum):
    """Рівень, який дав ціну."""

    LOCATION_OVERRIDE = "location-override"
    UNIT_OVERRIDE = "unit-override"
    BASE_CONVERTED = "base-converted"


# ================================
# 🏛️ СТРУКТУРИ ДАНИХ (DTO)
# ================================
@dataclass(frozen=True, slots=True)
class UnitPriceResolution:
    """Результат глобального (без точки продажу) рівня."""

    price: Money
    provenance: PriceProvenance


@dataclass(frozen=True, slots=True)
class ResolvedPrice:
    """Ефективна ціна для (варіація, одиниця, точка, вид) з міткою походження."""

    variation_id: VariationId
    unit_id: UnitId
    location_id: LocationId
    kind: PriceKind
    price: Money
    provenance: PriceProvenance

    @property
    def is_location_specific(self) -> bool:
        return self.provenance is PriceProvenance.LOCATION_OVERRIDE


@dataclass(frozen=True, slots=True)
class LocationUnitPrice:
    """Рядок матриці «точка × одиниця» з обома видами ціни."""

    location_id: LocationId
    unit_id: UnitId
    multiplier: Decimal
    is_base_unit: bool
    purchase: ResolvedPrice
    selling: ResolvedPrice

    @property
    def is_location_specific(self) -> bool:
        return self.purchase.is_location_specific or self.selling.is_location_specific


# ================================
# 📖 ПОРТ ЧИТАННЯ
# ================================
class IPriceRepository(ABC):
    """
    📖 Джерело даних для резолверів. Реалізація може ходити в БД, кеш тощо;
    помилки читання прокидаються як є, резолвери їх не перехоплюють.
    """

    @abstractmethod
    async def find_location_override(
        self,
        variation_id: VariationId,
        unit_id: UnitId,
        location_id: LocationId,
        kind: PriceKind,
    ) -> Optional[Money]:
        """Ціна, перевизначена для точки продажу, або None."""

    @abstractmethod
    async def find_unit_override(self, variation_id: VariationId, unit_id: UnitId, kind: PriceKind) -> Optional[Money]:
        """Глобальна ціна для одиниці, або None."""

    @abstractmethod
    async def get_base_price(self, variation_id: VariationId, kind: PriceKind) -> Money:
        """Базова ціна у базовій одиниці варіації."""

    @abstractmethod
    async def get_conversion_factor(self, variation_id: VariationId, unit_id: UnitId) -> Optional[Decimal]:
        """Коефіцієнт одиниці відносно базової; None означає, що одиницю не налаштовано."""

    @abstractmethod
    async def get_base_unit_id(self, variation_id: VariationId) -> UnitId:
        """Базова одиниця варіації."""

    @abstractmethod
    async def list_unit_ids(self, variation_id: VariationId) -> Sequence[UnitId]:
        """Базова одиниця + налаштовані підодиниці (базова першою)."""


# ================================
# ✍️ ПОРТ ЗАПИСУ ПЕРЕВИЗНАЧЕНЬ
# ================================
class IPriceOverrideStore(ABC):
    """✍️ Запис перевизначень. Кожна зміна мусить збільшувати покоління варіації."""

    @abstractmethod
    async def upsert_unit_override(
        self, variation_id: VariationId, unit_id: UnitId, kind: PriceKind, price: Money
    ) -> None: ...

    @abstractmethod
    async def delete_unit_override(self, variation_id: VariationId, unit_id: UnitId, kind: PriceKind) -> bool: ...

    @abstractmethod
    async def upsert_location_override(
        self,
        variation_id: VariationId,
        unit_id: UnitId,
        location_id: LocationId,
        kind: PriceKind,
        price: Money,
        *,
        updated_by: Optional[Hashable] = None,
    ) -> None: ...

    @abstractmethod
    async def delete_location_override(
        self, variation_id: VariationId, unit_id: UnitId, location_id: LocationId, kind: PriceKind
    ) -> bool: ...

    @abstractmethod
    async def delete_location_overrides(
        self,
        *,
        variation_id: Optional[VariationId] = None,
        location_id: Optional[LocationId] = None,
    ) -> int:
        """Масове видалення за варіацією та/або точкою; повертає кількість записів."""


@runtime_checkable
class IGenerationSource(Protocol):
    """🔖 Лічильник поколінь перевизначень для інвалідації кешу."""

    async def get_generation(self, variation_id: VariationId) -> int: ...


# ================================
# 🚪 КОНТРАКТ ФАСАДУ
# ================================
class IPriceResolutionFacade(ABC):
    """🚪 Єдина точка входу для касових і звітних викликів."""

    @abstractmethod
    async def get_price(
        self, variation_id: VariationId, unit_id: UnitId, location_id: LocationId, kind: PriceKind
    ) -> ResolvedPrice: ...

    async def get_purchase_price(
        self, variation_id: VariationId, unit_id: UnitId, location_id: LocationId
    ) -> ResolvedPrice:
        return await self.get_price(variation_id, unit_id, location_id, PriceKind.PURCHASE)

    async def get_selling_price(
        self, variation_id: VariationId, unit_id: UnitId, location_id: LocationId
    ) -> ResolvedPrice:
        return await self.get_price(variation_id, unit_id, location_id, PriceKind.SELLING)

    @abstractmethod
    async def list_location_prices(
        self, variation_id: VariationId, location_ids: Sequence[LocationId]
    ) -> list[LocationUnitPrice]: ...


__all__ = [
    "VariationId",
    "UnitId",
    "LocationId",
    "PriceKind",
    "PriceProvenance",
    "UnitPriceResolution",
    "ResolvedPrice",
    "LocationUnitPrice",
    "IPriceRepository",
    "IPriceOverrideStore",
    "IGenerationSource",
    "IPriceResolutionFacade",
]
