"""
Общее ядро (Shared Kernel): типы, используемые всеми частями домена.
"""

from .clock import utc_now, utc_today
from .value_objects import Currency, DateRange, Money

__all__ = [
    # Объекты-значения
    "Currency",
    "DateRange",
    "Money",
    # Утилиты
    "utc_now",
    "utc_today",
]
