# 📊 pos_pricing/shared/metrics/__init__.py
"""
📊 Пакет метрик Prometheus.

🔹 Лічильники резолвінгу (за рівнем) та кешу цін.
🔹 Bootstrap експортера `/metrics`.
"""

from __future__ import annotations

from .exporters import maybe_start_prometheus
from .pricing import (
    PRICE_CACHE_HIT,
    PRICE_CACHE_MISS,
    PRICE_RESOLUTION_FAILURE,
    PRICE_RESOLUTION_SECONDS,
    PRICE_RESOLVED,
)

# ================================
# 📦 ЕКСПОРТ ПАКЕТУ
# ================================
__all__ = [
    "PRICE_RESOLVED",
    "PRICE_RESOLUTION_FAILURE",
    "PRICE_RESOLUTION_SECONDS",
    "PRICE_CACHE_HIT",
    "PRICE_CACHE_MISS",
    "maybe_start_prometheus",
]
