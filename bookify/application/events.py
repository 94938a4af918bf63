"""
Диспетчер доменных событий.

После завершения единицы работы диспетчер читает события сущностей,
очищает их буферы и передает события зарегистрированным обработчикам.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Type, TypeVar

import structlog

from ..domain.abstractions import DomainEvent, Entity

logger = structlog.get_logger(__name__)

# Определяем TypeVar, чтобы обработчик подтипа DomainEvent считался валидным.
T_Event = TypeVar("T_Event", bound=DomainEvent)

EventHandler = Callable[[DomainEvent], None]


class DomainEventDispatcher:
    """Простой синхронный диспетчер доменных событий."""

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    def register(
        self, event_type: Type[T_Event], handler: Callable[[T_Event], None]
    ) -> None:
        """Регистрирует обработчик для указанного типа события и его подтипов."""
        self._handlers.setdefault(event_type, []).append(handler)  # type: ignore[arg-type]
        logger.debug(
            "event_handler_registered",
            event_type=event_type.__name__,
            handler=getattr(handler, "__name__", repr(handler)),
        )

    def dispatch(self, event: DomainEvent) -> None:
        """
        Отправляет событие всем обработчикам его типа и базовых типов.
        Ошибка в одном обработчике логируется и не мешает остальным.
        """
        handlers = self._handlers_for(type(event))
        if not handlers:
            logger.debug("event_has_no_handlers", event_type=event.event_type)
            return

        logger.debug(
            "event_dispatched",
            event_type=event.event_type,
            event_id=str(event.event_id),
            handlers=len(handlers),
        )
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "event_handler_failed",
                    event_type=event.event_type,
                    event_id=str(event.event_id),
                    handler=getattr(handler, "__name__", repr(handler)),
                )

    def dispatch_batch(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            self.dispatch(event)

    def publish_from(self, *entities: Entity) -> List[DomainEvent]:
        """Забирает события у сущностей, очищает их буферы и отправляет события."""
        published: List[DomainEvent] = []
        for entity in entities:
            events = entity.get_domain_events()
            entity.clear_domain_events()
            published.extend(events)

        self.dispatch_batch(published)
        return published

    def _handlers_for(self, event_type: Type[DomainEvent]) -> List[EventHandler]:
        handlers: List[EventHandler] = []
        # Обработчики базовых классов вызываются после обработчиков конкретного типа
        for klass in event_type.__mro__:
            handlers.extend(self._handlers.get(klass, []))
        return handlers
