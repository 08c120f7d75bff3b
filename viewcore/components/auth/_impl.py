"""
Authenticators and their combinators.

Functional Core - every authenticator returns (ok, err) and leaves
logging to the shell.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from viewcore.domain.context import RequestContext
from viewcore.domain.entities import RoleType

from .models import AuthError
from .ports import Authenticator, SessionStorePort, TimePort, UserRepoPort

AuthResult = tuple[bool, AuthError | None]


# --- Leaves ---


class BoolAuth:
    """
    Always returns its value from authenticate().
    Can be used for debugging.
    """

    def __init__(self, value: bool) -> None:
        self.value = value

    def authenticate(self, context: RequestContext) -> AuthResult:
        return self.value, None

    def __repr__(self) -> str:
        return f"BoolAuth({self.value!r})"


class FuncAuth:
    """Adapts a plain function to the Authenticator interface."""

    def __init__(self, func: Callable[[RequestContext], AuthResult]) -> None:
        self.func = func

    def authenticate(self, context: RequestContext) -> AuthResult:
        return self.func(context)


class LoggedInAuth:
    """Passes when the request carries an active user."""

    def authenticate(self, context: RequestContext) -> AuthResult:
        user = context.user
        return user is not None and user.status == "active", None


class RoleAuth:
    """Passes when the request user holds any of the given roles."""

    def __init__(self, roles: Iterable[RoleType]) -> None:
        self.roles = frozenset(roles)

    def authenticate(self, context: RequestContext) -> AuthResult:
        user = context.user
        if user is None or user.status != "active":
            return False, None
        return not self.roles.isdisjoint(user.roles), None


class SessionAuth:
    """
    Resolves the request's session token to a user.

    A missing, unknown or expired session is a denial. A store or
    repository that raises is an error. On success the user is set on
    the context for the authenticators that follow.
    """

    def __init__(
        self,
        session_store: SessionStorePort,
        user_repo: UserRepoPort,
        time: TimePort,
    ) -> None:
        self.session_store = session_store
        self.user_repo = user_repo
        self.time = time

    def authenticate(self, context: RequestContext) -> AuthResult:
        token = context.session_token
        if not token:
            return False, None

        try:
            session = self.session_store.get(token)
        except Exception as e:
            return False, AuthError(code="session_store_error", message=str(e))
        if session is None:
            return False, None
        if session.expires_at < self.time.now_utc():
            return False, None

        try:
            user = self.user_repo.get_by_id(session.user_id)
        except Exception as e:
            return False, AuthError(code="user_repo_error", message=str(e))
        if user is None or user.status != "active":
            return False, None

        context.user = user
        return True, None


# --- Combinators ---


class AnyAuthenticator:
    """
    Returns true if any of its authenticators returns true.

    Stops at the first success or the first error.
    """

    def __init__(self, authenticators: Iterable[Authenticator] = ()) -> None:
        self.authenticators = tuple(authenticators)

    def authenticate(self, context: RequestContext) -> AuthResult:
        for auth in self.authenticators:
            ok, err = auth.authenticate(context)
            if ok or err is not None:
                return ok, err
        return False, None

    def __repr__(self) -> str:
        return f"AnyAuthenticator({list(self.authenticators)!r})"


class AllAuthenticators:
    """
    Returns true if all of its authenticators return true.

    Stops at the first failure, passing on its error if it had one.
    """

    def __init__(self, authenticators: Iterable[Authenticator] = ()) -> None:
        self.authenticators = tuple(authenticators)

    def authenticate(self, context: RequestContext) -> AuthResult:
        for auth in self.authenticators:
            ok, err = auth.authenticate(context)
            if not ok:
                return False, err
        return True, None

    def __repr__(self) -> str:
        return f"AllAuthenticators({list(self.authenticators)!r})"
