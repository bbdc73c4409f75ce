# 📊 pos_pricing/shared/metrics/pricing.py
"""
📊 Prometheus-метрики резолвінгу цін та кешу.

🔹 `PRICE_RESOLVED` — скільки цін дав кожен рівень (location / unit / base).
🔹 `PRICE_RESOLUTION_FAILURE` — помилки резолвінгу за кодом причини.
🔹 `PRICE_CACHE_HIT` / `PRICE_CACHE_MISS` — ефективність кешу.
🔹 `PRICE_RESOLUTION_SECONDS` — гістограма часу резолвінгу.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter, Histogram                       # 📊 Prometheus-метрики

# ================================
# 📊 ЛІЧИЛЬНИКИ РЕЗОЛВІНГУ
# ================================
PRICE_RESOLVED = Counter(
    "pos_pricing_price_resolved_total",                                # 🏷️ Імʼя метрики
    "Resolved prices by tier that produced them",                      # 📝 Опис у Prometheus
    ["tier", "kind"],
)

PRICE_RESOLUTION_FAILURE = Counter(
    "pos_pricing_price_resolution_failure_total",
    "Price resolutions that raised a pricing error",
    ["reason"],
)

# ================================
# 🧊 ЛІЧИЛЬНИКИ КЕША
# ================================
PRICE_CACHE_HIT = Counter(
    "pos_pricing_price_cache_hit_total",
    "Resolved price served from cache",
)

PRICE_CACHE_MISS = Counter(
    "pos_pricing_price_cache_miss_total",
    "Resolved price computed on cache miss",
)

# ================================
# ⏱️ ГІСТОГРАМА ЛАТЕНТНОСТІ
# ================================
PRICE_RESOLUTION_SECONDS = Histogram(
    "pos_pricing_price_resolution_seconds",                            # 🏷️ Базова назва гістограми
    "Time to resolve a single price through the tier chain",
)


__all__ = [
    "PRICE_RESOLVED",
    "PRICE_RESOLUTION_FAILURE",
    "PRICE_CACHE_HIT",
    "PRICE_CACHE_MISS",
    "PRICE_RESOLUTION_SECONDS",
]
