"""
Учебный сценарий бронирования номера в отеле.

Показывает, как классические паттерны (адаптер, стратегия, декоратор,
одиночка, наблюдатель, фабрика) собираются вокруг одной операции
``book_room``.
"""

__version__ = "0.1.0"
