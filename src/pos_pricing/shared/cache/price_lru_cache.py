# ♻️ pos_pricing/shared/cache/price_lru_cache.py
"""
♻️ Асинхронний LRU+TTL кеш для результатів резолвінгу цін.

🔹 Обмеження за кількістю елементів (LRU) та часом життя (TTL; 0 вимикає TTL).
🔹 Паралельні запити до одного ключа синхронізуються через per-key locks.
🔹 Ключі — довільні hashable-кортежі; кеш не знає, що саме зберігає.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio                                                         # 🧵 Асинхронні locks
import time                                                            # ⏱️ Вимірювання TTL
from collections import OrderedDict                                    # 🔁 Реалізація LRU
from typing import Callable, Dict, Generic, Hashable, Optional, Tuple, TypeVar

V = TypeVar("V")


# ================================
# 🔒 ВНУТРІШНІЙ LRU-КОНТЕЙНЕР
# ================================
class _LRU(Generic[V]):
    """Внутрішня реалізація LRU з підтримкою TTL."""

    def __init__(self, max_entries: int, ttl_sec: float, clock: Callable[[], float]) -> None:
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max = int(max_entries)                                    # 🔢 Максимальна кількість записів
        self.ttl = float(ttl_sec)                                      # ⏳ Час життя запису
        self._clock = clock
        self._data: "OrderedDict[Hashable, Tuple[float, V]]" = OrderedDict()

    def get(self, key: Hashable) -> Optional[V]:
        item = self._data.get(key)
        if item is None:
            return None
        stored_at, value = item
        if self.ttl > 0 and (self._clock() - stored_at) > self.ttl:    # ⏰ TTL вичерпано
            self._data.pop(key, None)
            return None
        self._data.move_to_end(key, last=True)                         # 🔁 Найсвіжіше використання
        return value

    def set(self, key: Hashable, value: V) -> None:
        self._data[key] = (self._clock(), value)
        self._data.move_to_end(key, last=True)
        while len(self._data) > self.max:
            self._data.popitem(last=False)                             # 🚮 Виселяємо найстаріший

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


# ================================
# ♻️ КЕШ ЦІН
# ================================
class PriceLruCache(Generic[V]):
    """Async-safe кеш з LRU та TTL; один екземпляр на контейнер."""

    def __init__(
        self,
        max_entries: int = 4096,
        ttl_sec: float = 300,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._lru: _LRU[V] = _LRU(max_entries, ttl_sec, clock)
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._global_lock = asyncio.Lock()

    async def get(self, key: Hashable) -> Optional[V]:
        return self._lru.get(key)

    async def set(self, key: Hashable, value: V) -> None:
        if value is not None:                                          # ✅ Ігноруємо порожні значення
            self._lru.set(key, value)

    async def key_lock(self, key: Hashable) -> asyncio.Lock:
        """Повертає lock для конкретного ключа (створює під глобальним lock)."""
        async with self._global_lock:
            if key not in self._locks:
                self._locks[key] = asyncio.Lock()
            return self._locks[key]

    async def release_key_lock(self, key: Hashable) -> None:
        """Прибирає lock ключа, якщо його ніхто не тримає."""
        async with self._global_lock:
            lock = self._locks.get(key)
            if lock is not None and not lock.locked():
                del self._locks[key]

    async def clear(self) -> None:
        self._lru.clear()

    def __len__(self) -> int:
        return len(self._lru)


__all__ = ["PriceLruCache"]
