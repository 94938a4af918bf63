"""
Доменная модель Bookify.

Содержит тип результата, базу сущностей и событий, объекты-значения
и сущности апартаментов, бронирований и пользователей.
"""

from . import abstractions, apartments, bookings, shared, users

__all__ = [
    "abstractions",
    "apartments",
    "bookings",
    "shared",
    "users",
]
