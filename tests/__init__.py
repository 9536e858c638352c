"""
Тесты numeric-ranges

Содержит:
- tests/unit/          : Unit тесты отдельных модулей
"""
