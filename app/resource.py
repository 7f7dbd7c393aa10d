"""
In-memory user collection and its HTTP-shaped operations.

UserResource owns an ordered list of users and the next-id counter.
Each operation returns a ``(status, body)`` pair so the routing layer
only has to serialize the result; domain failures are returned as
values, never raised.

Operations:
    list()              - All users in insertion order
    get_by_id(raw_id)   - One user, or NOT_FOUND
    create(payload)     - New user, or BAD_REQUEST
"""

import logging
import re
import threading
from collections.abc import Iterable, Mapping
from http import HTTPStatus
from typing import Any

from app.models import User, UserCreate

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "User not found"
USER_FIELDS_REQUIRED_MESSAGE = "Name and email are required."

REQUIRED_USER_FIELDS = ("name", "email")

# Leading ASCII integer of a path segment: "12", " 7", "-3", "1abc" -> 1
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

Result = tuple[HTTPStatus, Any]


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def parse_user_id(raw_id: Any) -> int | None:
    """
    Parse a user id taken from a URL path segment.

    Args:
        raw_id: Path segment as received, or an int.

    Returns:
        The leading integer of the segment, or None if it has none.
    """
    if isinstance(raw_id, bool):
        return None
    if isinstance(raw_id, int):
        return raw_id
    if not isinstance(raw_id, str):
        return None

    match = _LEADING_INT.match(raw_id)
    if match is None:
        return None
    return int(match.group(1))


def validate_user_data(data: Any) -> tuple[bool, str | None]:
    """
    Validate user data from request.

    Both required fields must be present and truthy; anything that
    is not a mapping counts as missing every field.

    Args:
        data: Decoded request body.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not isinstance(data, Mapping):
        return False, USER_FIELDS_REQUIRED_MESSAGE

    for field in REQUIRED_USER_FIELDS:
        if not data.get(field):
            return False, USER_FIELDS_REQUIRED_MESSAGE

    return True, None


# -----------------------------------------------------------------------------
# Resource
# -----------------------------------------------------------------------------

class UserResource:
    """
    Ordered in-memory user collection with sequential id assignment.

    One instance is owned per application, so each test can build its
    own. A single lock serializes access to the list and the counter.

    Attributes:
        next_id: Id the next successful create will receive.
    """

    def __init__(
        self,
        seed: Iterable[Mapping[str, Any]] | None = None,
        next_id: int | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._users: list[User] = [
            User(id=int(record["id"]), name=record["name"], email=record["email"])
            for record in (seed or [])
        ]

        if next_id is None:
            next_id = max((user.id for user in self._users), default=0) + 1
        self.next_id = next_id

        logger.info(
            f"User resource ready with {len(self._users)} users, next id {self.next_id}"
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def users(self) -> list[User]:
        """Return a snapshot of the collection in insertion order."""
        with self._lock:
            return list(self._users)

    def list(self) -> Result:
        """
        List all users.

        Returns:
            OK and the users as dictionaries, seeded records first.
        """
        return HTTPStatus.OK, [user.to_dict() for user in self.users()]

    def get_by_id(self, raw_id: Any) -> Result:
        """
        Look up one user by id.

        Args:
            raw_id: Id as taken from the request path.

        Returns:
            OK and the user, or NOT_FOUND and an error message.
        """
        user_id = parse_user_id(raw_id)

        if user_id is not None:
            with self._lock:
                user = next((u for u in self._users if u.id == user_id), None)
            if user is not None:
                return HTTPStatus.OK, user.to_dict()

        logger.warning(f"User {raw_id!r} not found")
        return HTTPStatus.NOT_FOUND, {"message": USER_NOT_FOUND_MESSAGE}

    def create(self, payload: Any) -> Result:
        """
        Create a user from a decoded request body.

        Args:
            payload: Mapping with ``name`` and ``email``. Extra keys,
                including ``id``, are ignored.

        Returns:
            CREATED and the new user, or BAD_REQUEST and an error
            message. Nothing changes on BAD_REQUEST.
        """
        is_valid, error = validate_user_data(payload)
        if not is_valid:
            logger.warning(f"Validation failed: {error}")
            return HTTPStatus.BAD_REQUEST, {"message": error}

        data = UserCreate(name=payload["name"], email=payload["email"])

        with self._lock:
            user = data.to_user(self.next_id)
            self.next_id += 1
            self._users.append(user)

        logger.info(f"Created user with ID: {user.id}")
        return HTTPStatus.CREATED, user.to_dict()
