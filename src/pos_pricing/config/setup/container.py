# 📦 pos_pricing/config/setup/container.py
"""
📦 Контейнер залежностей рушія цін.

🔹 Створює сервіси в правильному порядку DI:
   сховище → таблиця конверсій → резолвери → фасад → кеш → менеджер перевизначень
🔹 Зчитує параметри округлення, кешу та метрик із ConfigService
🔹 Дає єдину точку доступу до `price_service` для викликачів
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
# (зовнішніх залежностей у цьому модулі немає)

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from typing import Any, Optional                                         # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from pos_pricing.config.config_service import ConfigService              # ⚙️ Джерело конфігурацій
from pos_pricing.domain.pricing import (
    IGenerationSource,
    IPriceOverrideStore,
    IPriceRepository,
    IPriceResolutionFacade,
    LocationPriceResolver,
    PriceOverrideManager,
    PriceResolutionFacade,
    PricingConfig,
    ResolvedPrice,
    UnitConversionTable,
    UnitPriceResolver,
)
from pos_pricing.domain.pricing.rounding import (
    DEFAULT_FRACTION_DIGITS,
    DEFAULT_ROUNDING,
    ROUNDING_MODES,
)
from pos_pricing.infrastructure.cache.cached_price_facade import CachedPriceResolutionFacade  # 🧊 Кешований фасад
from pos_pricing.infrastructure.storage.in_memory_repository import InMemoryPriceRepository  # 🗃️ Сховище за замовчуванням
from pos_pricing.shared.cache.price_lru_cache import PriceLruCache       # ♻️ LRU+TTL кеш
from pos_pricing.shared.metrics.exporters import maybe_start_prometheus  # 📈 Bootstrap метрик
from pos_pricing.shared.utils.logger import LOG_NAME, init_logging_from_config  # 🧾 Конфіг логування

logger = logging.getLogger(LOG_NAME)                                     # 🧾 Модульний логер контейнера


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _int_or_default(value: Any, default: int) -> int:
    """
    Повертає ціле число або запасне значення, якщо каст неможливий.
    """
    if value is None:                                                    # 🚫 Значення відсутнє
        return default

    try:
        return int(value)                                                # 🔢 Результат приведення
    except (TypeError, ValueError):                                      # ⚠️ Неможливо привести до int
        return default


def _rounding_or_default(value: Any) -> str:
    """Повертає назву режиму округлення `decimal` або ROUND_HALF_UP."""
    mode = str(value or "").strip().upper()
    if mode in ROUNDING_MODES:
        return mode
    if mode:
        logger.warning("⚠️ Невідомий режим округлення %r, використовуємо %s", value, DEFAULT_ROUNDING)
    return DEFAULT_ROUNDING


def bootstrap_logging() -> logging.Logger:
    """
    Зчитує конфіг логування і запускає логер пакета.
    """
    cfg = ConfigService()                                                # ⚙️ Singleton-конфіг
    node = cfg.get("logging", {}) or {}                                  # 📄 Вузол логування
    return init_logging_from_config(node)                                # 🧾 Стартуємо логер за конфігом


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """
    Координує ініціалізацію сховища, доменних сервісів цін і кешу.
    """

    # ================================
    # ⚙️ ІНІЦІАЛІЗАЦІЯ
    # ================================
    def __init__(
        self,
        config: Optional[ConfigService] = None,
        repository: Optional[IPriceRepository] = None,
        store: Optional[IPriceOverrideStore] = None,
    ) -> None:
        self.config = config or ConfigService()                           # ⚙️ Джерело конфігурацій DI
        logger.info("🚀 Стартуємо побудову контейнера цін")
        self._bootstrap_metrics_if_enabled()                              # 📈 Можливий запуск експорту метрик
        self._setup_storage(repository, store)                            # 🗃️ Порти читання/запису
        self._setup_domain_services()                                     # 🏭 Резолвери та фасад
        self._setup_cache()                                               # 🧊 Необовʼязковий кеш
        self._setup_managers()                                            # ✍️ Менеджер перевизначень
        logger.info("✅ Контейнер ініціалізовано успішно")

    # ================================
    # 📈 МЕТРИКИ
    # ================================
    def _bootstrap_metrics_if_enabled(self) -> None:
        """
        Стартує Prometheus-експортер, якщо це дозволено конфігурацією.
        """
        try:                                                             # 🧪 Ізолюємо збої метрик
            if not self.config.get("metrics.enabled", False, cast=bool):
                logger.debug("📉 Prometheus вимкнено конфігом")
                return
            exporter_name = (self.config.get("metrics.exporter", "prometheus") or "prometheus").lower()
            if exporter_name != "prometheus":                            # 🚫 Поки підтримуємо лише Prometheus
                logger.debug("📉 Експортер %s не підтримується", exporter_name)
                return
            port = _int_or_default(self.config.get("metrics.prometheus.port", 9108, cast=int), 9108)
            maybe_start_prometheus(port)                                 # 📈 Підіймаємо HTTP-експортер
            logger.info("📈 Prometheus запущено на порті %s", port)
        except OSError:                                                  # ⚠️ Порт зайнятий / недоступний
            logger.exception("⚠️ Не вдалося стартувати експортер метрик")

    # ================================
    # 🗃️ СХОВИЩЕ
    # ================================
    def _setup_storage(
        self,
        repository: Optional[IPriceRepository],
        store: Optional[IPriceOverrideStore],
    ) -> None:
        """
        Приймає зовнішні адаптери або створює in-memory сховище.
        """
        self.repository: IPriceRepository = repository or InMemoryPriceRepository()
        if store is None and isinstance(self.repository, IPriceOverrideStore):
            store = self.repository                                      # 🔁 Один адаптер на обидва порти
        self.store: Optional[IPriceOverrideStore] = store
        logger.debug("🗃️ Сховище: %s (store=%s)", type(self.repository).__name__, type(store).__name__)

    # ================================
    # 🏭 ДОМЕННІ СЕРВІСИ
    # ================================
    def _setup_domain_services(self) -> None:
        """
        Готує PricingConfig, таблицю конверсій, резолвери та фасад.
        """
        digits = _int_or_default(
            self.config.get("pricing.fraction_digits", DEFAULT_FRACTION_DIGITS, cast=int),
            DEFAULT_FRACTION_DIGITS,
        )
        if digits < 0:
            logger.warning("⚠️ fraction_digits=%s < 0, використовуємо %s", digits, DEFAULT_FRACTION_DIGITS)
            digits = DEFAULT_FRACTION_DIGITS
        self.pricing_config = PricingConfig(
            fraction_digits=digits,
            rounding=_rounding_or_default(self.config.get("pricing.rounding", DEFAULT_ROUNDING)),
        )
        self.conversion_table = UnitConversionTable(self.repository)
        self.unit_price_resolver = UnitPriceResolver(
            self.repository,
            conversion_table=self.conversion_table,
            config=self.pricing_config,
        )
        self.location_price_resolver = LocationPriceResolver(
            self.repository,
            unit_resolver=self.unit_price_resolver,
            config=self.pricing_config,
        )
        self.price_resolution_facade = PriceResolutionFacade(
            self.repository,
            location_resolver=self.location_price_resolver,
            conversion_table=self.conversion_table,
        )
        self.price_service: IPriceResolutionFacade = self.price_resolution_facade  # 🎯 Точка входу для викликачів
        logger.debug(
            "🏭 Доменні сервіси готові (digits=%s, rounding=%s)",
            self.pricing_config.fraction_digits,
            self.pricing_config.rounding,
        )

    # ================================
    # 🧊 КЕШ
    # ================================
    def _setup_cache(self) -> None:
        """
        Обгортає фасад кешем, якщо він увімкнений і сховище віддає покоління.
        """
        self.price_cache: Optional[PriceLruCache[ResolvedPrice]] = None
        if not self.config.get("cache.enabled", True, cast=bool):
            logger.debug("🧊 Кеш цін вимкнено конфігом")
            return
        if not isinstance(self.repository, IGenerationSource):
            logger.warning("⚠️ Сховище %s не надає поколінь, кеш вимкнено", type(self.repository).__name__)
            return
        max_entries = _int_or_default(self.config.get("cache.max_entries", 4096, cast=int), 4096)
        ttl_sec = _int_or_default(self.config.get("cache.ttl_sec", 300, cast=int), 300)
        self.price_cache = PriceLruCache(max_entries=max_entries, ttl_sec=ttl_sec)
        self.price_service = CachedPriceResolutionFacade(
            self.price_resolution_facade,
            generations=self.repository,
            cache=self.price_cache,
        )
        logger.debug("🧊 Кеш цін активовано (max=%s, ttl=%ss)", max_entries, ttl_sec)

    # ================================
    # ✍️ МЕНЕДЖЕРИ
    # ================================
    def _setup_managers(self) -> None:
        """
        Створює менеджер перевизначень, якщо є порт запису.
        """
        self.price_override_manager: Optional[PriceOverrideManager] = None
        if self.store is None:
            logger.debug("✍️ Порт запису відсутній, менеджер перевизначень не створено")
            return
        self.price_override_manager = PriceOverrideManager(
            self.repository,
            self.store,
            self.price_service,
            unit_resolver=self.unit_price_resolver,
            config=self.pricing_config,
        )


__all__ = ["Container", "bootstrap_logging"]
