"""
Спільні утиліти: логування, базові винятки, кеші та метрики.
"""
