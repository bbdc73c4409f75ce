# tests/conftest.py
import sys
from pathlib import Path

# Додаємо src в sys.path, щоб працював імпорт "pos_pricing.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
