from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from ..abstractions import Entity
from ..shared import utc_now as current_utc_time
from .events import UserCreated
from .value_objects import Email, FirstName, LastName


class User(Entity):
    """Пользователь, бронирующий апартаменты."""

    def __init__(
        self, user_id: UUID, first_name: FirstName, last_name: LastName, email: Email
    ) -> None:
        super().__init__(user_id)
        self._first_name = first_name
        self._last_name = last_name
        self._email = email

    @property
    def first_name(self) -> FirstName:
        return self._first_name

    @property
    def last_name(self) -> LastName:
        return self._last_name

    @property
    def email(self) -> Email:
        return self._email

    @classmethod
    def create(
        cls,
        first_name: FirstName,
        last_name: LastName,
        email: Email,
        utc_now: Optional[datetime] = None,
    ) -> User:
        """Создает нового пользователя и генерирует событие UserCreated."""
        user = cls(uuid4(), first_name, last_name, email)
        user._raise_domain_event(
            UserCreated(user_id=user.id, occurred_on_utc=utc_now or current_utc_time())
        )
        return user
