from uuid import UUID

from ..abstractions import DomainEvent


class UserCreated(DomainEvent):
    """Событие: пользователь создан."""

    user_id: UUID
