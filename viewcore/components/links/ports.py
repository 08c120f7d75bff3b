"""
Links component - Capability interfaces.

A link source is recognised by what it can do, not by its class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from viewcore.domain.context import RequestContext
from viewcore.domain.view import View


@runtime_checkable
class URLPort(Protocol):
    """Anything that can produce a URL for a request."""

    def url(self, context: RequestContext, *args: str) -> str:
        """Build the URL, optionally filling in positional arguments."""
        ...


@runtime_checkable
class PagePort(Protocol):
    """A page entity that can be linked to."""

    def url(self, context: RequestContext, *args: str) -> str: ...

    def link_title(self, context: RequestContext) -> str:
        """Title used when a link to this page has none of its own."""
        ...


@runtime_checkable
class LinkModel(Protocol):
    """Render-ready link: URL, title, content and rel."""

    def url(self, context: RequestContext, *args: str) -> str: ...

    def link_content(self, context: RequestContext) -> View: ...

    def link_title(self, context: RequestContext) -> str: ...

    def link_rel(self, context: RequestContext) -> str: ...
