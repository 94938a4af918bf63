from .events import UserCreated
from .user import User
from .value_objects import Email, FirstName, LastName

__all__ = [
    "Email",
    "FirstName",
    "LastName",
    "User",
    "UserCreated",
]
