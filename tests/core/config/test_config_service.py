"""
🧪 test_config_service.py — unit-тести для ConfigService

Перевіряє:
- Singleton та читання дефолтного config.yaml
- Пріоритет змінних середовища POS_PRICING_* над YAML
- Приведення типів у get(..., cast=...)
- Поведінку за відсутності YAML-файлу
"""

import pytest

from pos_pricing.config.config_service import ENV_KEYS, ConfigService


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for env_name in ENV_KEYS:
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.setattr(ConfigService, "_instance", None)
    yield
    ConfigService._instance = None


def test_singleton_and_yaml_defaults():
    service = ConfigService()

    assert service is ConfigService()
    assert service.get("pricing.fraction_digits") == 2
    assert service.get("pricing.rounding") == "ROUND_HALF_UP"
    assert service.get("cache.enabled") is True
    assert service.get("metrics.enabled") is False


def test_env_overrides_yaml(monkeypatch):
    monkeypatch.setenv("POS_PRICING_FRACTION_DIGITS", "3")
    monkeypatch.setenv("POS_PRICING_CACHE_ENABLED", "off")

    service = ConfigService()

    assert service.get("pricing.fraction_digits", cast=int) == 3
    assert service.get("cache.enabled", True, cast=bool) is False
    assert service.get("cache.max_entries") == 4096            # ✅ Сусідні ключі YAML не зачеплені


def test_get_default_and_bad_cast(monkeypatch):
    monkeypatch.setenv("POS_PRICING_FRACTION_DIGITS", "two")
    service = ConfigService()

    assert service.get("missing.key", "fallback") == "fallback"
    assert service.get("pricing.fraction_digits", 2, cast=int) == 2
    assert service.get("logging") and service.get("logging.level") == "INFO"


def test_custom_yaml_and_reload(monkeypatch, tmp_path):
    yaml_file = tmp_path / "config.yaml"
    yaml_file.write_text("pricing:\n  fraction_digits: 4\n", encoding="utf-8")
    monkeypatch.setattr(ConfigService, "YAML_PATH", yaml_file)

    service = ConfigService()
    assert service.get("pricing.fraction_digits") == 4

    monkeypatch.setenv("POS_PRICING_ROUNDING", "ROUND_DOWN")
    service.reload()
    assert service.get("pricing.rounding") == "ROUND_DOWN"


def test_missing_yaml_logs_warning(monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(ConfigService, "YAML_PATH", tmp_path / "absent.yaml")

    service = ConfigService()

    assert service.get("pricing.fraction_digits", 2) == 2
    assert "config.yaml" in caplog.text
