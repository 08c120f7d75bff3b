from datetime import datetime
from typing import Protocol, runtime_checkable
from uuid import UUID

from viewcore.domain.context import RequestContext
from viewcore.domain.entities import Session, User

from .models import AuthError


@runtime_checkable
class Authenticator(Protocol):
    """Authenticates the user of a request context."""

    def authenticate(self, context: RequestContext) -> tuple[bool, AuthError | None]:
        """
        Return the auth result in ok; err is only for real errors,
        never for a negative authentication.
        """
        ...


class UserRepoPort(Protocol):
    def get_by_id(self, user_id: UUID) -> User | None: ...


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


class SessionStorePort(Protocol):
    """Port for session lookup."""

    def get(self, token: str) -> Session | None:
        """Get session by token."""
        ...
