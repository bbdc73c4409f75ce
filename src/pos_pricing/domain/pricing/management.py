# 🛠️ pos_pricing/domain/pricing/management.py
"""
🛠️ `PriceOverrideManager` — керування перевизначеннями цін (сторона запису).

🔹 Валідує всі вхідні ціни ДО першого запису: невідʼємні, selling ≥ purchase.
🔹 Для кожного виду окремо: ціна, що збігається з глобальною, видаляє перевизначення точки,
   інша зберігається (upsert).
🔹 Масові операції: скидання точок до глобальних цін та відсоткове коригування.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування
from dataclasses import dataclass                                      # 🧱 DTO
from decimal import Decimal                                            # 🔢 Відсотки
from typing import Hashable, Optional, Sequence                        # 🧰 Анотації

# 🧩 Внутрішні модулі проєкту
from pos_pricing.errors.custom_errors import (
    InvalidAmountError,
    PriceRuleViolationError,
    PricingError,
    UnitNotConfiguredError,
)
from pos_pricing.shared.utils.logger import LOG_NAME
from .interfaces import (
    IPriceOverrideStore,
    IPriceRepository,
    IPriceResolutionFacade,
    LocationId,
    PriceKind,
    UnitId,
    VariationId,
)
from .money import Amount, Money
from .resolvers import UnitPriceResolver
from .rounding import PricingConfig, percent_multiplier

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing.management")


# ================================
# 🏛️ DTO
# ================================
@dataclass(frozen=True, slots=True)
class LocationPriceInput:
    """Нові ціни обох видів для (точка, одиниця)."""

    location_id: LocationId
    unit_id: UnitId
    purchase_price: Amount
    selling_price: Amount


@dataclass(frozen=True, slots=True)
class SaveSummary:
    """Підсумок збереження: скільки перевизначень записано, видалено, пропущено."""

    upserted: int = 0
    removed: int = 0
    skipped: int = 0


@dataclass(frozen=True, slots=True)
class _ValidatedInput:
    location_id: LocationId
    unit_id: UnitId
    prices: dict


# ================================
# 🛠️ СЕРВІС
# ================================
class PriceOverrideManager:
    """Запис перевизначень через `IPriceOverrideStore`; читання через фасад і резолвер."""

    def __init__(
        self,
        repository: IPriceRepository,
        store: IPriceOverrideStore,
        facade: IPriceResolutionFacade,
        unit_resolver: Optional[UnitPriceResolver] = None,
        config: Optional[PricingConfig] = None,
    ) -> None:
        self._repository = repository
        self._store = store
        self._facade = facade
        self._cfg = config or PricingConfig()
        self._unit_resolver = unit_resolver or UnitPriceResolver(repository, config=self._cfg)

    # ================================
    # 📏 ГЛОБАЛЬНІ (ОДИНИЦЯ)
    # ================================
    async def set_unit_override(
        self, variation_id: VariationId, unit_id: UnitId, kind: PriceKind, amount: Amount
    ) -> Money:
        price = Money.of(amount, field=f"unit_override.{kind.value}")
        await self._require_unit(variation_id, unit_id)
        await self._store.upsert_unit_override(variation_id, unit_id, kind, price)
        logger.info("📏 Unit override set | variation=%r unit=%r kind=%s → %s", variation_id, unit_id, kind.value, price)
        return price

    async def clear_unit_override(self, variation_id: VariationId, unit_id: UnitId, kind: PriceKind) -> bool:
        removed = await self._store.delete_unit_override(variation_id, unit_id, kind)
        logger.info("🧹 Unit override cleared | variation=%r unit=%r kind=%s removed=%s", variation_id, unit_id, kind.value, removed)
        return removed

    # ================================
    # 🏬 ПЕРЕВИЗНАЧЕННЯ ТОЧОК
    # ================================
    async def save_location_prices(
        self,
        variation_id: VariationId,
        prices: Sequence[LocationPriceInput],
        *,
        updated_by: Optional[Hashable] = None,
    ) -> SaveSummary:
        """
        Зберігає ціни точок для варіації.

        Raises:
            InvalidAmountError: відʼємна чи нечислова ціна (нічого не записано).
            PriceRuleViolationError: selling < purchase (нічого не записано).
            UnitNotConfiguredError / InvalidConversionFactorError: глобальну ціну не визначено
                (усі глобальні ціни читаються до першого запису, тож нічого не записано).
        """
        logger.info("💾 Saving %d location unit prices | variation=%r", len(prices), variation_id)
        validated = [self._validate(item) for item in prices]

        configured_units = set(await self._repository.list_unit_ids(variation_id))
        skipped = 0

        # --- 1. Читання: глобальні ціни для всіх пар до першого запису ---
        planned: list[tuple[_ValidatedInput, PriceKind, Money, Money]] = []
        global_prices: dict[tuple[UnitId, PriceKind], Money] = {}
        for item in validated:
            if item.unit_id not in configured_units:
                logger.warning(
                    "⚠️ Unit %r is not configured for variation %r, skipping location %r",
                    item.unit_id,
                    variation_id,
                    item.location_id,
                )
                skipped += 1
                continue

            for kind, price in item.prices.items():
                key = (item.unit_id, kind)
                if key not in global_prices:
                    global_prices[key] = (await self._unit_resolver.resolve(variation_id, item.unit_id, kind)).price
                planned.append((item, kind, price, global_prices[key]))

        # --- 2. Запис ---
        upserted = removed = 0
        for item, kind, price, global_price in planned:
            if price == global_price:
                if await self._store.delete_location_override(variation_id, item.unit_id, item.location_id, kind):
                    removed += 1
                logger.debug(
                    "🧹 Same as global, location override removed | location=%r unit=%r kind=%s",
                    item.location_id,
                    item.unit_id,
                    kind.value,
                )
            else:
                await self._store.upsert_location_override(
                    variation_id, item.unit_id, item.location_id, kind, price, updated_by=updated_by
                )
                upserted += 1

        summary = SaveSummary(upserted=upserted, removed=removed, skipped=skipped)
        logger.info("✅ Location prices saved | variation=%r %s", variation_id, summary)
        return summary

    async def copy_global_prices_to_locations(
        self,
        variation_id: VariationId,
        location_ids: Sequence[LocationId],
        *,
        updated_by: Optional[Hashable] = None,
    ) -> SaveSummary:
        """Скидає вказані точки до глобальних цін (прибирає їхні перевизначення)."""
        unit_ids = list(await self._repository.list_unit_ids(variation_id))
        if not unit_ids:
            raise PricingError(f"No units configured for variation {variation_id!r}")

        inputs: list[LocationPriceInput] = []
        for location_id in location_ids:
            for unit_id in unit_ids:
                purchase = await self._unit_resolver.resolve(variation_id, unit_id, PriceKind.PURCHASE)
                selling = await self._unit_resolver.resolve(variation_id, unit_id, PriceKind.SELLING)
                inputs.append(LocationPriceInput(location_id, unit_id, purchase.price, selling.price))

        logger.info("📋 Copying global prices to %d locations | variation=%r", len(location_ids), variation_id)
        return await self.save_location_prices(variation_id, inputs, updated_by=updated_by)

    async def apply_price_adjustment(
        self,
        variation_id: VariationId,
        location_ids: Sequence[LocationId],
        purchase_adjustment_pct: Decimal | int | str,
        selling_adjustment_pct: Decimal | int | str,
        *,
        updated_by: Optional[Hashable] = None,
    ) -> SaveSummary:
        """Множить поточні ефективні ціни точок на (1 + pct/100) та зберігає результат."""
        multipliers = {
            PriceKind.PURCHASE: percent_multiplier(purchase_adjustment_pct),
            PriceKind.SELLING: percent_multiplier(selling_adjustment_pct),
        }
        rows = await self._facade.list_location_prices(variation_id, location_ids)
        inputs = [
            LocationPriceInput(
                location_id=row.location_id,
                unit_id=row.unit_id,
                purchase_price=self._adjust(row.purchase.price, multipliers[PriceKind.PURCHASE]),
                selling_price=self._adjust(row.selling.price, multipliers[PriceKind.SELLING]),
            )
            for row in rows
        ]
        logger.info(
            "📊 Adjusting prices by %s%%/%s%% | variation=%r rows=%d",
            purchase_adjustment_pct,
            selling_adjustment_pct,
            variation_id,
            len(inputs),
        )
        return await self.save_location_prices(variation_id, inputs, updated_by=updated_by)

    async def delete_variation_location_prices(self, variation_id: VariationId) -> int:
        deleted = await self._store.delete_location_overrides(variation_id=variation_id)
        logger.info("🗑️ Deleted %d location prices | variation=%r", deleted, variation_id)
        return deleted

    async def delete_location_prices(self, location_id: LocationId) -> int:
        deleted = await self._store.delete_location_overrides(location_id=location_id)
        logger.info("🗑️ Deleted %d location prices | location=%r", deleted, location_id)
        return deleted

    # ================================
    # 🔒 ВНУТРІШНІ МЕТОДИ
    # ================================
    def _validate(self, item: LocationPriceInput) -> _ValidatedInput:
        purchase = Money.of(item.purchase_price, field="purchase_price")
        selling = Money.of(item.selling_price, field="selling_price")
        if selling < purchase:
            raise PriceRuleViolationError(
                f"Selling price cannot be less than purchase price for unit {item.unit_id!r} "
                f"at location {item.location_id!r}"
            )
        return _ValidatedInput(
            location_id=item.location_id,
            unit_id=item.unit_id,
            prices={
                PriceKind.PURCHASE: purchase.rounded(self._cfg.fraction_digits, self._cfg.rounding),
                PriceKind.SELLING: selling.rounded(self._cfg.fraction_digits, self._cfg.rounding),
            },
        )

    def _adjust(self, price: Money, multiplier: Decimal) -> Money:
        if multiplier <= 0:
            raise InvalidAmountError(multiplier, field="adjustment_multiplier")
        return price.multiply(multiplier).rounded(self._cfg.fraction_digits, self._cfg.rounding)

    async def _require_unit(self, variation_id: VariationId, unit_id: UnitId) -> None:
        if unit_id not in set(await self._repository.list_unit_ids(variation_id)):
            raise UnitNotConfiguredError(variation_id, unit_id)


__all__ = ["LocationPriceInput", "PriceOverrideManager", "SaveSummary"]
