"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from viewcore.domain.view import View

from .ports import PagePort


class PageRef:
    """
    Rebindable slot holding the page a link points to.

    Links share the slot rather than the page, so ``bind`` swaps the
    target for every link built from it. There is no locking; rebinding
    while another thread renders is the caller's problem.
    """

    def __init__(self, page: PagePort | None = None) -> None:
        self._page = page

    @property
    def page(self) -> PagePort:
        if self._page is None:
            raise LookupError("PageRef is not bound to a page")
        return self._page

    def bind(self, page: PagePort) -> None:
        self._page = page

    @property
    def is_bound(self) -> bool:
        return self._page is not None


# --- Input Models ---


@dataclass(frozen=True)
class ResolveLinkInput:
    """Input for resolving a link source."""

    source: Any
    content: tuple[Any, ...] = ()
    title: str | None = None
    rel: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ResolvedLink:
    """A link evaluated once for a rendering pass."""

    href: str
    title: str
    content: View
    rel: str
