# 🗃️ pos_pricing/infrastructure/storage/in_memory_repository.py
"""
🗃️ In-memory реалізація портів читання та запису цін.

🔹 Використовується в тестах і як еталон поведінки для SQL-адаптерів.
🔹 Зберігає per-variation лічильник поколінь: кожен запис перевизначення його збільшує.
🔹 Мутації не містять `await` всередині, тому в межах одного event loop атомарні.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування
from collections import defaultdict                                    # 🔢 Лічильники поколінь
from dataclasses import dataclass, field                               # 🧱 Записи сховища
from datetime import datetime, timezone                                # ⏱️ Мітки оновлення
from decimal import Decimal                                            # 🔢 Коефіцієнти
from typing import Dict, Hashable, Optional, Sequence, Tuple           # 🧰 Анотації

# 🧩 Внутрішні модулі проєкту
from pos_pricing.domain.pricing.interfaces import (
    IPriceOverrideStore,
    IPriceRepository,
    LocationId,
    PriceKind,
    UnitId,
    VariationId,
)
from pos_pricing.domain.pricing.money import Amount, Money, to_decimal
from pos_pricing.errors.custom_errors import VariationNotFoundError
from pos_pricing.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.storage")

_UnitKey = Tuple[VariationId, UnitId, PriceKind]
_LocationKey = Tuple[VariationId, UnitId, LocationId, PriceKind]


# ================================
# 🧱 ЗАПИСИ СХОВИЩА
# ================================
@dataclass
class _VariationRecord:
    base_unit_id: UnitId
    base_prices: Dict[PriceKind, Money]
    factors: Dict[UnitId, Decimal] = field(default_factory=dict)       # 📏 Порядок вставки = порядок одиниць


@dataclass(frozen=True)
class LocationOverrideRecord:
    """Перевизначення точки разом з аудитом (хто й коли оновив)."""

    price: Money
    updated_by: Optional[Hashable]
    updated_at: datetime


# ================================
# 🗃️ РЕПОЗИТОРІЙ
# ================================
class InMemoryPriceRepository(IPriceRepository, IPriceOverrideStore):
    """Словникове сховище варіацій, коефіцієнтів і перевизначень."""

    def __init__(self) -> None:
        self._variations: Dict[VariationId, _VariationRecord] = {}
        self._unit_overrides: Dict[_UnitKey, Money] = {}
        self._location_overrides: Dict[_LocationKey, LocationOverrideRecord] = {}
        self._generations: Dict[VariationId, int] = defaultdict(int)

    # ================================
    # 🌱 НАПОВНЕННЯ (керування товарами поза рушієм)
    # ================================
    def add_variation(
        self,
        variation_id: VariationId,
        *,
        base_unit_id: UnitId,
        purchase_price: Amount,
        selling_price: Amount,
    ) -> None:
        """Додає/оновлює варіацію. Суми зберігаються як є, валідує їх резолвер."""
        existing = self._variations.get(variation_id)
        self._variations[variation_id] = _VariationRecord(
            base_unit_id=base_unit_id,
            base_prices={
                PriceKind.PURCHASE: Money(to_decimal(purchase_price)),
                PriceKind.SELLING: Money(to_decimal(selling_price)),
            },
            factors=existing.factors if existing else {},
        )
        self._bump(variation_id)

    def set_conversion_factor(self, variation_id: VariationId, unit_id: UnitId, factor: Amount) -> None:
        """Реєструє підодиницю з коефіцієнтом відносно базової одиниці."""
        self._record(variation_id).factors[unit_id] = to_decimal(factor, field="conversion_factor")
        self._bump(variation_id)

    # ================================
    # 📖 ПОРТ ЧИТАННЯ
    # ================================
    async def find_location_override(
        self,
        variation_id: VariationId,
        unit_id: UnitId,
        location_id: LocationId,
        kind: PriceKind,
    ) -> Optional[Money]:
        record = self._location_overrides.get((variation_id, unit_id, location_id, kind))
        return record.price if record else None

    async def find_unit_override(self, variation_id: VariationId, unit_id: UnitId, kind: PriceKind) -> Optional[Money]:
        return self._unit_overrides.get((variation_id, unit_id, kind))

    async def get_base_price(self, variation_id: VariationId, kind: PriceKind) -> Money:
        return self._record(variation_id).base_prices[kind]

    async def get_conversion_factor(self, variation_id: VariationId, unit_id: UnitId) -> Optional[Decimal]:
        return self._record(variation_id).factors.get(unit_id)

    async def get_base_unit_id(self, variation_id: VariationId) -> UnitId:
        return self._record(variation_id).base_unit_id

    async def list_unit_ids(self, variation_id: VariationId) -> Sequence[UnitId]:
        record = self._record(variation_id)
        sub_units = [unit_id for unit_id in record.factors if unit_id != record.base_unit_id]
        return [record.base_unit_id, *sub_units]

    # ================================
    # ✍️ ПОРТ ЗАПИСУ
    # ================================
    async def upsert_unit_override(
        self, variation_id: VariationId, unit_id: UnitId, kind: PriceKind, price: Money
    ) -> None:
        self._unit_overrides[(variation_id, unit_id, kind)] = price
        self._bump(variation_id)

    async def delete_unit_override(self, variation_id: VariationId, unit_id: UnitId, kind: PriceKind) -> bool:
        removed = self._unit_overrides.pop((variation_id, unit_id, kind), None) is not None
        if removed:
            self._bump(variation_id)
        return removed

    async def upsert_location_override(
        self,
        variation_id: VariationId,
        unit_id: UnitId,
        location_id: LocationId,
        kind: PriceKind,
        price: Money,
        *,
        updated_by: Optional[Hashable] = None,
    ) -> None:
        self._location_overrides[(variation_id, unit_id, location_id, kind)] = LocationOverrideRecord(
            price=price,
            updated_by=updated_by,
            updated_at=datetime.now(timezone.utc),
        )
        self._bump(variation_id)

    async def delete_location_override(
        self, variation_id: VariationId, unit_id: UnitId, location_id: LocationId, kind: PriceKind
    ) -> bool:
        removed = self._location_overrides.pop((variation_id, unit_id, location_id, kind), None) is not None
        if removed:
            self._bump(variation_id)
        return removed

    async def delete_location_overrides(
        self,
        *,
        variation_id: Optional[VariationId] = None,
        location_id: Optional[LocationId] = None,
    ) -> int:
        if variation_id is None and location_id is None:
            raise ValueError("variation_id or location_id is required")
        doomed = [
            key
            for key in self._location_overrides
            if (variation_id is None or key[0] == variation_id) and (location_id is None or key[2] == location_id)
        ]
        for key in doomed:
            del self._location_overrides[key]
        for affected in {key[0] for key in doomed}:
            self._bump(affected)
        return len(doomed)

    def location_override_record(
        self, variation_id: VariationId, unit_id: UnitId, location_id: LocationId, kind: PriceKind
    ) -> Optional[LocationOverrideRecord]:
        """Аудит-запис перевизначення (для екранів історії та тестів)."""
        return self._location_overrides.get((variation_id, unit_id, location_id, kind))

    # ================================
    # 🔖 ПОКОЛІННЯ
    # ================================
    async def get_generation(self, variation_id: VariationId) -> int:
        return self._generations.get(variation_id, 0)

    # ================================
    # 🔒 ВНУТРІШНІ МЕТОДИ
    # ================================
    def _record(self, variation_id: VariationId) -> _VariationRecord:
        try:
            return self._variations[variation_id]
        except KeyError:
            raise VariationNotFoundError(variation_id) from None

    def _bump(self, variation_id: VariationId) -> None:
        self._generations[variation_id] += 1
        logger.debug("🔖 Generation bumped | variation=%r → %d", variation_id, self._generations[variation_id])


__all__ = ["InMemoryPriceRepository", "LocationOverrideRecord"]
