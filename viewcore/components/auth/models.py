from dataclasses import dataclass

from viewcore.domain.context import RequestContext


@dataclass(frozen=True)
class AuthError:
    """
    A failure to reach an auth decision.

    Distinct from a denial: the caller must fail closed and surface it.
    """

    code: str
    message: str


@dataclass
class AuthenticateInput:
    context: RequestContext


@dataclass
class AuthOutput:
    ok: bool = False
    denied: bool = False
    error: AuthError | None = None
