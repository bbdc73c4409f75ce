# 📜 pos_pricing/shared/utils/logger.py
"""
📜 Єдина схема логування для рушія ціноутворення.

🔹 Ініціалізує кореневий логер пакета з консоллю та (опційно) файлом з ротацією.
🔹 Підтримує JSON-формат для файлу та suppress сторонніх бібліотек.
🔹 Кореневий логер Python не змінюється, налаштовується лише префікс `LOG_NAME`.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json                                                            # 📦 Серіалізація payload логів
import logging                                                         # 🪵 Робота з логерами Python
import sys                                                             # 🧵 Потік stdout
import threading                                                       # 🔒 Захист ініціалізації
from dataclasses import dataclass, field                               # 🧱 DTO-конфіг логування
from logging.handlers import TimedRotatingFileHandler                  # 📁 Хендлер з ротацією файлів
from pathlib import Path                                               # 📂 Файлові шляхи
from typing import Any, Dict, Mapping, Optional, Union                 # 🧰 Типи

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "pos_pricing"                                          # 🏷️ Базовий префікс логерів
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(name)s: %(message)s"

# Атрибути LogRecord, які не потрапляють у JSON як extra-поля
_RESERVED_RECORD_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}

_lock = threading.Lock()                                               # 🔒 Блокуємо одночасну ініціалізацію


# ================================
# 🧾 DTO КОНФІГУРАЦІЇ
# ================================
@dataclass
class LoggingConfig:
    """Контейнер налаштувань логування з дефолтними значеннями."""
    level: str = "INFO"
    console: bool = True
    json: bool = False
    file: Optional[str] = None                                         # 📁 None → без файлового виводу
    when: str = "midnight"
    interval: int = 1
    backup_count: int = 7
    encoding: str = "utf-8"
    suppress: Dict[str, str] = field(default_factory=dict)             # 🙊 Треті сторони та їх рівні
    console_format: str = CONSOLE_FORMAT
    file_format: str = PLAIN_FORMAT


# ================================
# 🧰 ФОРМАТТЕРИ
# ================================
class JsonFormatter(logging.Formatter):
    """Форматує записи у плоский JSON разом із `extra`-полями (variation_id, tier…)."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_RECORD_KEYS or key in payload:
                continue
            try:
                json.dumps(value)                                      # ✅ Перевіряємо серіалізованість
                payload[key] = value
            except (TypeError, ValueError):                            # ⚠️ Decimal, Enum тощо
                payload[key] = str(value)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# ================================
# 🛠️ ДОПОМОЖНІ ФУНКЦІЇ
# ================================
def _to_level(value: Union[str, int, None], default: int) -> int:
    """Перетворює рядок/інт у числовий рівень логування."""
    if isinstance(value, int):
        return value
    if not value:
        return default
    return getattr(logging, str(value).upper(), default)


def _make_file_handler(cfg: LoggingConfig, fmt: logging.Formatter) -> logging.Handler:
    """Готує файловий хендлер із ротацією за часом."""
    log_path = Path(str(cfg.file))
    log_path.parent.mkdir(parents=True, exist_ok=True)                 # 🧱 Гарантуємо існування директорії
    handler = TimedRotatingFileHandler(
        filename=str(log_path),
        when=cfg.when,
        interval=cfg.interval,
        backupCount=cfg.backup_count,
        encoding=cfg.encoding,
    )
    handler.setFormatter(fmt)
    return handler


def _suppress_third_party(suppress: Mapping[str, str]) -> None:
    """Знижує рівні логування для сторонніх бібліотек."""
    for name, level in (suppress or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.WARNING))


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(cfg: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Ініціалізує логер пакета за єдиною схемою.

    Повторний виклик прибирає попередньо встановлені нами хендлери,
    тож функцію безпечно викликати з кожного `Container`.
    """
    cfg = cfg or LoggingConfig()
    with _lock:
        root_logger = logging.getLogger(LOG_NAME)
        root_logger.setLevel(_to_level(cfg.level, logging.INFO))

        for handler in list(root_logger.handlers):                     # 🧹 Очищаємо попередні хендлери
            if getattr(handler, "_pos_pricing_owned", False):
                root_logger.removeHandler(handler)
                handler.close()

        if cfg.console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(cfg.console_format))
            console_handler._pos_pricing_owned = True                  # type: ignore[attr-defined]
            root_logger.addHandler(console_handler)

        if cfg.file:
            fmt_file = JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format)
            file_handler = _make_file_handler(cfg, fmt_file)
            file_handler._pos_pricing_owned = True                     # type: ignore[attr-defined]
            root_logger.addHandler(file_handler)

        _suppress_third_party(cfg.suppress)

        root_logger.info(
            "✅ Logging initialized | level=%s console=%s json=%s file=%s",
            str(cfg.level).upper(),
            "ON" if cfg.console else "OFF",
            "ON" if cfg.json else "OFF",
            cfg.file or "-",
        )
        return root_logger


def init_logging_from_config(node: Optional[Mapping[str, Any]]) -> logging.Logger:
    """
    Ініціалізує логування з розділу `logging` ConfigService.

    Args:
        node: Словник налаштувань (ключі збігаються з полями `LoggingConfig`).

    Returns:
        logging.Logger: Налаштований логер пакета.
    """
    node = node or {}
    defaults = LoggingConfig()
    cfg = LoggingConfig(
        level=str(node.get("level") or defaults.level),
        console=defaults.console if node.get("console") is None else bool(node.get("console")),
        json=bool(node.get("json", defaults.json)),
        file=node.get("file") or None,
        backup_count=int(node.get("backup_count", defaults.backup_count)),
        suppress=dict(node.get("suppress") or {}),
        console_format=node.get("console_format") or defaults.console_format,
        file_format=node.get("file_format") or defaults.file_format,
    )
    return init_logging(cfg)


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Повертає дочірній логер із префіксом `LOG_NAME`."""
    logger_name = LOG_NAME if not suffix else f"{LOG_NAME}.{suffix}"
    return logging.getLogger(logger_name)
