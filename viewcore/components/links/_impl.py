"""
Link resolution - turns any link source into a LinkModel.

Functional Core - no I/O, no logging.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from viewcore.domain.context import RequestContext
from viewcore.domain.view import Text, View, new_views

from .models import PageRef
from .ports import LinkModel, URLPort

# --- URL helpers ---

POSITIONAL_PLACEHOLDER = re.compile(r"\{(\d+)\}")


@dataclass(frozen=True)
class StringURL:
    """
    A literal URL.

    Positional placeholders already in the literal ({0}, {1}, ...) are
    filled from the url() arguments. Placeholders without a matching
    argument, named placeholders and other braces are left as they are.
    """

    value: str

    def url(self, context: RequestContext, *args: str) -> str:
        if not args:
            return self.value

        def fill(match: re.Match[str]) -> str:
            index = int(match.group(1))
            return args[index] if index < len(args) else match.group(0)

        return POSITIONAL_PLACEHOLDER.sub(fill, self.value)


# --- Link variants ---


@dataclass(eq=False)
class PageLink:
    """Link to a page held in a shared PageRef."""

    page: PageRef
    content: View | None = None  # If None, link_title() is rendered
    title: str = ""  # If "", the page's own link title is used
    rel: str = ""

    def url(self, context: RequestContext, *args: str) -> str:
        return self.page.page.url(context, *args)

    def link_content(self, context: RequestContext) -> View:
        if self.content is None:
            return Text(self.link_title(context))
        return self.content

    def link_title(self, context: RequestContext) -> str:
        if self.title == "":
            return self.page.page.link_title(context)
        return self.title

    def link_rel(self, context: RequestContext) -> str:
        return self.rel


@dataclass(eq=False)
class StringLink:
    """Link to a literal URL string."""

    href: str
    content: View | None = None  # If None, link_title() is rendered
    title: str = ""  # If "", href is used
    rel: str = ""

    def url(self, context: RequestContext, *args: str) -> str:
        return StringURL(self.href).url(context, *args)

    def link_content(self, context: RequestContext) -> View:
        if self.content is None:
            return Text(self.link_title(context))
        return self.content

    def link_title(self, context: RequestContext) -> str:
        if self.title == "":
            return self.href
        return self.title

    def link_rel(self, context: RequestContext) -> str:
        return self.rel


@dataclass(eq=False)
class URLLink:
    """Link whose URL comes from another URL-capable object."""

    url_source: URLPort
    content: View | None = None  # If None, link_title() is rendered
    title: str = ""  # If "", the generated URL is used
    rel: str = ""

    def url(self, context: RequestContext, *args: str) -> str:
        return self.url_source.url(context, *args)

    def link_content(self, context: RequestContext) -> View:
        if self.content is None:
            return Text(self.link_title(context))
        return self.content

    def link_title(self, context: RequestContext) -> str:
        if self.title == "":
            return self.url_source.url(context)
        return self.title

    def link_rel(self, context: RequestContext) -> str:
        return self.rel


# --- Capability probes ---


def _is_link_model(source: Any) -> bool:
    return isinstance(source, LinkModel) and all(
        callable(getattr(source, name))
        for name in ("url", "link_content", "link_title", "link_rel")
    )


def _is_url_source(source: Any) -> bool:
    return isinstance(source, URLPort) and callable(source.url)


def _is_stringer(source: Any) -> bool:
    """True for objects whose class defines its own string form."""
    if isinstance(source, (str, bytes, bytearray, memoryview)):
        return False
    return type(source).__str__ is not object.__str__


# --- Constructors ---


def new_page_link(page: PageRef, title: str = "") -> PageLink:
    return PageLink(page=page, title=title)


def new_link_model(source: Any, *content: Any) -> LinkModel:
    """
    Resolve a link source into a LinkModel.

    Sources are tried in this order, first match wins:
    PageRef, LinkModel, URL-capable object, object with its own
    ``__str__``, plain string. Extra content items are combined into
    one Views; without them the link renders its title.

    Raises:
        TypeError: if the source is none of the above.
    """
    link_content = new_views(*content) if content else None

    if isinstance(source, PageRef):
        return PageLink(page=source, content=link_content)
    if _is_link_model(source):
        if content:
            return URLLink(url_source=source, content=link_content)
        return source
    if _is_url_source(source):
        return URLLink(url_source=source, content=link_content)
    if _is_stringer(source):
        return StringLink(href=str(source), content=link_content)
    if not isinstance(source, str):
        raise TypeError(f"Invalid type for url: {type(source).__name__}")
    return StringLink(href=str(source), content=link_content)
