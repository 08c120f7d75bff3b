"""
Links component - Link resolution entry points.

Shell Layer - applies configured defaults and logs.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from viewcore.domain.context import RequestContext
from viewcore.rules.models import LinkRules

from ._impl import PageLink, StringLink, URLLink, new_link_model
from .models import ResolvedLink, ResolveLinkInput
from .ports import LinkModel

logger = logging.getLogger(__name__)


def _is_external(href: str, rules: LinkRules) -> bool:
    scheme = urlsplit(href).scheme.lower()
    return scheme in rules.external_schemes


def run_resolve(
    inp: ResolveLinkInput,
    *,
    rules: LinkRules | None = None,
) -> LinkModel:
    """
    Resolve a link source into a LinkModel.

    Title and rel overrides are applied only to links created here; a
    LinkModel passed through unchanged is never modified.

    Raises:
        TypeError: if the source cannot be used as a link.
    """
    link = new_link_model(inp.source, *inp.content)

    if link is inp.source:
        logger.debug("Link source is already a LinkModel, passing through")
        return link

    if isinstance(link, (PageLink, StringLink, URLLink)):
        if inp.title is not None:
            link.title = inp.title
        if inp.rel is not None:
            link.rel = inp.rel
        elif (
            rules is not None
            and rules.external_rel
            and isinstance(link, StringLink)
            and _is_external(link.href, rules)
        ):
            link.rel = rules.external_rel

    logger.debug("Resolved %s to %s", type(inp.source).__name__, type(link).__name__)
    return link


def run_render(link: LinkModel, context: RequestContext, *args: str) -> ResolvedLink:
    """Evaluate every part of a link once for the current request."""
    return ResolvedLink(
        href=link.url(context, *args),
        title=link.link_title(context),
        content=link.link_content(context),
        rel=link.link_rel(context),
    )
