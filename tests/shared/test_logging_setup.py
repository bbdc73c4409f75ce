"""
🧪 test_logging_setup.py — unit-тести для pos_pricing.shared.utils.logger

Перевіряє:
- Налаштування логера пакета з конфіг-вузла
- Відсутність дублювання хендлерів при повторній ініціалізації
- JSON-формат файлового логу разом з extra-полями
- Дочірні логери з префіксом LOG_NAME
- bootstrap_logging: рівень береться з ConfigService (env має пріоритет)
"""

import json
import logging

from pos_pricing.config.config_service import ENV_KEYS, ConfigService
from pos_pricing.config.setup.container import bootstrap_logging
from pos_pricing.shared.utils.logger import (
    LOG_NAME,
    JsonFormatter,
    LoggingConfig,
    get_logger,
    init_logging,
    init_logging_from_config,
)


def _owned(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if getattr(h, "_pos_pricing_owned", False)]


def test_init_from_config_and_no_duplicates():
    logger = init_logging_from_config({"level": "debug", "console": True})
    count_before = len(_owned(logger))

    logger = init_logging_from_config({"level": "debug", "console": True})

    assert logger.name == LOG_NAME
    assert logger.level == logging.DEBUG
    assert len(_owned(logger)) == count_before == 1

    init_logging(LoggingConfig(console=False))  # 🧹 Не тримаємо stdout pytest після тесту


def test_json_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "pricing.log"
    logger = init_logging(LoggingConfig(level="INFO", console=False, json=True, file=str(log_file)))

    get_logger("domain.pricing").warning("⚠️ test", extra={"variation_id": "V", "unit_id": "box"})
    for handler in _owned(logger):
        handler.flush()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    record = lines[-1]
    assert record["name"] == f"{LOG_NAME}.domain.pricing"
    assert record["variation_id"] == "V"
    assert record["level"] == "WARNING"

    init_logging(LoggingConfig(console=False))  # 🧹 Закриваємо файловий хендлер


def test_json_formatter_stringifies_unserializable():
    from decimal import Decimal

    record = logging.LogRecord(LOG_NAME, logging.INFO, __file__, 1, "msg", None, None)
    record.price = Decimal("1.10")

    payload = json.loads(JsonFormatter().format(record))

    assert payload["price"] == "1.10"
    assert payload["message"] == "msg"


def test_get_logger_prefix():
    assert get_logger().name == LOG_NAME
    assert get_logger("cache").name == f"{LOG_NAME}.cache"


def test_bootstrap_logging_reads_config(monkeypatch):
    for env_name in ENV_KEYS:
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.setenv("POS_PRICING_LOG_LEVEL", "WARNING")
    monkeypatch.setattr(ConfigService, "_instance", None)

    logger = bootstrap_logging()

    assert logger.name == LOG_NAME
    assert logger.level == logging.WARNING
    assert len(_owned(logger)) == 1

    init_logging(LoggingConfig(console=False))  # 🧹 Не тримаємо stdout pytest після тесту
    ConfigService._instance = None
