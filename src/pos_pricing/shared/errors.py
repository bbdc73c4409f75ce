# 🚨 pos_pricing/shared/errors.py
"""
🚨 Базова ієрархія винятків застосунку.

🔹 `AppError` — корінь усіх доменних помилок, несе `details` для логів.
🔹 `UserVisibleError` — помилки, зміст яких можна показати оператору каси.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, Optional                                      # 📐 Типізація


# ================================
# 🧠 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """🧠 Базовий виняток застосунку."""

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message                                         # 💬 Основний текст
        self.details = details                                         # 🧾 Технічні подробиці

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_type": type(self).__name__}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        return self.message


class UserVisibleError(AppError):
    """👀 Помилка, яку можна показати користувачу без технічних деталей."""


__all__ = ["AppError", "UserVisibleError"]
