"""
Renderable view nodes.

Link resolution only builds and combines views; turning them into
response bytes is the job of the surrounding page renderer.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from viewcore.domain.context import RequestContext


@runtime_checkable
class View(Protocol):
    """A node that renders itself for a request."""

    def render(self, context: RequestContext) -> str:
        """Render the node to markup."""
        ...


@dataclass(frozen=True)
class HTML:
    """Markup that is rendered verbatim."""

    content: str

    def render(self, context: RequestContext) -> str:
        return self.content


@dataclass(frozen=True)
class Text:
    """Plain text, escaped on render."""

    content: str

    def render(self, context: RequestContext) -> str:
        return html.escape(self.content)


@dataclass(frozen=True)
class Views:
    """Ordered composite of views rendered back to back."""

    items: tuple[View, ...] = ()

    def render(self, context: RequestContext) -> str:
        return "".join(item.render(context) for item in self.items)

    def __len__(self) -> int:
        return len(self.items)


def new_view(value: Any) -> View | None:
    """
    Coerce a value into a view.

    None stays None, views pass through, anything else becomes HTML
    from its string form.
    """
    if value is None:
        return None
    if isinstance(value, View):
        return value
    if isinstance(value, str):
        return HTML(value)
    return HTML(str(value))


def new_views(*values: Any) -> Views:
    """Combine values into one composite view, skipping None."""
    items = tuple(v for v in (new_view(value) for value in values) if v is not None)
    return Views(items=items)
