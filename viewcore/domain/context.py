"""
Per-request context handed to link resolution and authenticators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from viewcore.domain.entities import User


@dataclass
class RequestContext:
    """
    State of a single request during one rendering pass.

    Link and auth code treat it as an opaque handle; pages and
    authenticators read whatever they need from it.
    """

    path: str = "/"
    user: User | None = None
    session_token: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
