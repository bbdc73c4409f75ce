# 🚀 pos_pricing/shared/metrics/exporters.py
"""
🚀 Легкий bootstrap HTTP-експортера `/metrics`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import start_http_server                        # 🌐 Вбудований HTTP-сервер

# 🔠 Системні імпорти
import logging
import threading

# 🧩 Внутрішні модулі проєкту
from pos_pricing.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.metrics")

_started_ports: set[int] = set()                                       # 🔢 Вже запущені експортери
_lock = threading.Lock()


def maybe_start_prometheus(port: int) -> bool:
    """Запускає експортер один раз на порт; повертає True, якщо запустили зараз."""
    with _lock:
        if port in _started_ports:
            logger.debug("📈 Prometheus exporter already running on %s", port)
            return False
        start_http_server(port)
        _started_ports.add(port)
        logger.info("📈 Prometheus exporter started on %s", port)
        return True


__all__ = ["maybe_start_prometheus"]
