"""Models package."""

from userbio.models.user import User, UserBase, UserCreate, UserUpdate

__all__ = [
    "User",
    "UserBase",
    "UserCreate",
    "UserUpdate",
]
