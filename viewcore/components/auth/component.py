"""
Auth component - Request authentication entry point.

Shell Layer - turns (ok, err) into an output model and logs.
"""

from __future__ import annotations

import logging

from viewcore.rules.models import AuthRules

from .models import AuthenticateInput, AuthOutput
from .ports import Authenticator

logger = logging.getLogger(__name__)


def run_authenticate(
    inp: AuthenticateInput,
    authenticator: Authenticator,
    *,
    rules: AuthRules | None = None,
) -> AuthOutput:
    """
    Evaluate an authenticator for a request.

    An error always fails closed and is reported separately from an
    ordinary denial.
    """
    ok, err = authenticator.authenticate(inp.context)

    if err is not None:
        logger.warning(
            "Authentication failed for %s: %s (%s)", inp.context.path, err.message, err.code
        )
        return AuthOutput(ok=False, denied=False, error=err)

    if not ok:
        if rules is None or rules.log_denials:
            logger.info("Access denied for %s", inp.context.path)
        return AuthOutput(ok=False, denied=True)

    return AuthOutput(ok=True)
