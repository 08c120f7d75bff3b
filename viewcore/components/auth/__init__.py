"""
Auth component - Composable request authenticators.

Authenticators answer (ok, err): ok is the decision, err is set only
when no decision could be reached.
"""

from ._impl import (
    AllAuthenticators,
    AnyAuthenticator,
    AuthResult,
    BoolAuth,
    FuncAuth,
    LoggedInAuth,
    RoleAuth,
    SessionAuth,
)
from .component import run_authenticate
from .models import AuthenticateInput, AuthError, AuthOutput
from .ports import Authenticator, SessionStorePort, TimePort, UserRepoPort

__all__ = [
    # Entry points
    "run_authenticate",
    # Authenticators
    "AllAuthenticators",
    "AnyAuthenticator",
    "BoolAuth",
    "FuncAuth",
    "LoggedInAuth",
    "RoleAuth",
    "SessionAuth",
    "AuthResult",
    # Models
    "AuthenticateInput",
    "AuthError",
    "AuthOutput",
    # Ports
    "Authenticator",
    "SessionStorePort",
    "TimePort",
    "UserRepoPort",
]
