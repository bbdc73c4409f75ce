"""
Доменний шар: чиста логіка без знання про БД, HTTP та кеші.
"""
