# ⚙️ pos_pricing/config/config_service.py
"""
⚙️ config_service.py — Сервіс для доступу до статичної конфігурації рушія цін.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з config.yaml та змінних середовища (.env).
- Надає єдиний метод .get() для доступу до будь-якого параметра.
- Працює як Singleton.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Callable, Dict, Optional

# 🧩 Внутрішні модулі проєкту
from pos_pricing.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

# 🔐 Змінна середовища → крапковий ключ конфігурації
ENV_KEYS: Dict[str, str] = {
    "POS_PRICING_FRACTION_DIGITS": "pricing.fraction_digits",
    "POS_PRICING_ROUNDING": "pricing.rounding",
    "POS_PRICING_LOG_LEVEL": "logging.level",
    "POS_PRICING_CACHE_ENABLED": "cache.enabled",
    "POS_PRICING_METRICS_ENABLED": "metrics.enabled",
}

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів рушія.
    Працює як Singleton: конфігурація зчитується лише один раз.
    """

    _instance: Optional["ConfigService"] = None      # 🧩 Singleton-екземпляр
    _config: Dict[str, Any]                          # 📦 Обʼєднана конфігурація зі всіх джерел
    YAML_PATH: Path = Path(__file__).parent / "config.yaml"

    def __new__(cls) -> "ConfigService":
        # ✅ Патерн Singleton: створюємо лише один екземпляр
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs()             # 🔄 Завантаження конфігурації під час першого виклику
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    def reload(self) -> None:
        """🔁 Перечитує всі джерела (зміни в середовищі / YAML)."""
        self._config = {}
        self._load_all_configs()

    def _load_all_configs(self) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет (останнє перемагає): config.yaml → .env / середовище.
        """

        # --- 1. YAML-файл ---
        try:
            logger.debug("📘 Завантаження %s", self.YAML_PATH)
            with open(self.YAML_PATH, "r", encoding="utf-8") as f:
                self._deep_update(self._config, yaml.safe_load(f) or {})
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити config.yaml: %s", e)

        # --- 2. .env та змінні середовища ---
        load_dotenv()                                # 🔐 Ініціалізує змінні середовища з файлу .env
        env_vars = {key: os.getenv(env) for env, key in ENV_KEYS.items()}
        env_vars = {key: value for key, value in env_vars.items() if value is not None}
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.debug("✅ Конфігурацію завантажено (env overrides: %s)", sorted(env_vars))

    def get(self, key: str, default: Any = None, cast: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'pricing.fraction_digits').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.
            cast: Необовʼязкове приведення типу (`int`, `bool`, `str`...).

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for part in key.split("."):                  # ⛓️ Розбиваємо ключ за крапкою
            if isinstance(value, dict) and part in value:
                value = value[part]                  # 🔎 Переходимо глибше в структуру
            else:
                return default                       # ❌ Ключ не знайдено, повертаємо дефолт

        if cast is None or value is None:
            return value
        return self._cast(key, value, cast, default)

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ
    # ===============================
    @staticmethod
    def _cast(key: str, value: Any, cast: Callable[[Any], Any], default: Any) -> Any:
        if cast is bool and isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
            logger.warning("⚠️ '%s' не схоже на булеве значення: %r", key, value)
            return default
        try:
            return cast(value)
        except (TypeError, ValueError):
            logger.warning("⚠️ Не вдалося привести '%s'=%r до %s", key, value, getattr(cast, "__name__", cast))
            return default

    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'pricing.rounding' → {'pricing': {'rounding': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """
        🔁 Рекурсивно обʼєднує два словники.
        Вкладені словники обʼєднуються глибоко.
        """
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                self._deep_update(source[key], value)  # 🔁 Глибоке обʼєднання
            else:
                source[key] = value                    # 🧩 Перезапис простого значення


__all__ = ["ConfigService", "ENV_KEYS"]
