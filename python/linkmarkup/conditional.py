from __future__ import annotations

from typing import Any, Callable, Mapping

from .config import HelperConfig
from .links import link_to
from .routing import UrlContext, as_link_target
from .tags import escape_html

# Called with (name, target, html_options) in place of the link.
LinkFallback = Callable[[Any, Any, Mapping[str, Any] | None], str]


def link_to_unless(
    condition: Any,
    name: Any,
    target: Any,
    html_options: Mapping[str, Any] | None = None,
    fallback: LinkFallback | None = None,
    *,
    context: UrlContext | None = None,
    config: HelperConfig | None = None,
) -> str:
    """Link to ``target`` unless ``condition`` holds.

    When it holds, the result of ``fallback`` is returned, or the escaped
    ``name`` without one. The target is not resolved in that case.
    """
    if condition:
        if fallback is not None:
            return fallback(name, target, html_options)
        return escape_html(name)
    return link_to(name, target, html_options, context=context, config=config)


def link_to_if(
    condition: Any,
    name: Any,
    target: Any,
    html_options: Mapping[str, Any] | None = None,
    fallback: LinkFallback | None = None,
    *,
    context: UrlContext | None = None,
    config: HelperConfig | None = None,
) -> str:
    return link_to_unless(
        not condition,
        name,
        target,
        html_options,
        fallback,
        context=context,
        config=config,
    )


def current_page(
    target: Any,
    *,
    context: UrlContext,
    config: HelperConfig | None = None,
) -> bool:
    """True when ``target`` resolves to the URI of the in-flight request."""
    return as_link_target(target).resolve(context, config) == context.request_uri()


def link_to_unless_current(
    name: Any,
    target: Any,
    html_options: Mapping[str, Any] | None = None,
    fallback: LinkFallback | None = None,
    *,
    context: UrlContext,
    config: HelperConfig | None = None,
) -> str:
    """Like :func:`link_to`, but only the name (or fallback) for the current page.

    Useful for navigation bars that should not link to the page being viewed.
    """
    return link_to_unless(
        current_page(target, context=context, config=config),
        name,
        target,
        html_options,
        fallback,
        context=context,
        config=config,
    )
