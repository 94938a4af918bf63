"""
Прикладной слой: публикация доменных событий после единицы работы.
"""

from .events import DomainEventDispatcher, EventHandler

__all__ = [
    "DomainEventDispatcher",
    "EventHandler",
]
