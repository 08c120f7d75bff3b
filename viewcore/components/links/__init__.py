"""
Links component - Resolve link sources into render-ready links.

A link source may be a page slot, an existing link, anything with a
url() method, or something with a string form.
"""

from ._impl import (
    PageLink,
    StringLink,
    StringURL,
    URLLink,
    new_link_model,
    new_page_link,
)
from .component import run_render, run_resolve
from .models import PageRef, ResolvedLink, ResolveLinkInput
from .ports import LinkModel, PagePort, URLPort

__all__ = [
    # Entry points
    "run_resolve",
    "run_render",
    # Constructors
    "new_link_model",
    "new_page_link",
    # Link variants
    "PageLink",
    "StringLink",
    "URLLink",
    "StringURL",
    # Models
    "PageRef",
    "ResolveLinkInput",
    "ResolvedLink",
    # Ports
    "LinkModel",
    "PagePort",
    "URLPort",
]
