"""
Data models for the User Resource service.

This module defines the plain data structures the service works with.
Users live only in memory, so these are dataclasses rather than
database-mapped models.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    """
    User record held by the in-memory collection.

    Attributes:
        id: Unique identifier assigned by the service.
        name: Display name of the user.
        email: Contact address (presence is checked, format is not).
    """

    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the user to a dictionary representation.

        Returns:
            Dictionary containing all user fields.
        """
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }

    def __repr__(self) -> str:
        """Return string representation of the user."""
        return f"<User {self.id}: {self.name}>"


@dataclass(frozen=True)
class UserCreate:
    """Validated input for creating a user. The id is never client-supplied."""

    name: str
    email: str

    def to_user(self, user_id: int) -> User:
        return User(id=user_id, name=self.name, email=self.email)
