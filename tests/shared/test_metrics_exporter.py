"""
🧪 test_metrics_exporter.py — unit-тести для maybe_start_prometheus

Перевіряє:
- Запуск HTTP-експортера лише один раз на порт
"""

from pos_pricing.shared.metrics import exporters


def test_exporter_started_once_per_port(monkeypatch):
    started = []
    monkeypatch.setattr(exporters, "start_http_server", started.append)
    monkeypatch.setattr(exporters, "_started_ports", set())

    assert exporters.maybe_start_prometheus(9200) is True
    assert exporters.maybe_start_prometheus(9200) is False
    assert exporters.maybe_start_prometheus(9201) is True
    assert started == [9200, 9201]
