"""
Базовые абстракции сущностей и доменных событий.

Сущность владеет идентификатором и буфером ожидающих доменных событий.
События добавляются только самой сущностью во время переходов состояния,
а внешний диспетчер один раз за единицу работы читает и очищает буфер.
"""

from __future__ import annotations

from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from ..shared.clock import utc_now


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on_utc: datetime = Field(default_factory=utc_now)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__


class DomainEventBuffer:
    """Упорядоченный буфер доменных событий, ожидающих публикации."""

    def __init__(self) -> None:
        self._events: List[DomainEvent] = []

    def append(self, event: DomainEvent) -> None:
        self._events.append(event)

    def snapshot(self) -> List[DomainEvent]:
        """Возвращает копию событий в порядке их генерации."""
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


class Entity:
    """
    Базовый класс для Сущностей.
    Определяет идентичность через id и реализует сравнение по id.
    Буфер событий хранится отдельным объектом, сущность лишь делегирует ему.
    """

    def __init__(self, entity_id: UUID) -> None:
        if entity_id is None:
            raise ValueError("Entity ID cannot be None")
        self._id: UUID = entity_id
        self._domain_events = DomainEventBuffer()

    @property
    def id(self) -> UUID:
        return self._id

    def get_domain_events(self) -> List[DomainEvent]:
        """Возвращает копию накопленных событий, не очищая буфер."""
        return self._domain_events.snapshot()

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def _raise_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        # Сущности разных классов не равны даже при совпадении id, как и их хеши
        if type(self) is not type(other):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__, self.id))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
