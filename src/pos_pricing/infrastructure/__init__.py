"""
Інфраструктурний шар: адаптери сховища та кешування поверх доменних портів.
"""
