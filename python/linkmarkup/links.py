from __future__ import annotations

from typing import Any, Mapping

from .attributes import apply_confirm, normalize_boolean_attributes, stringify_keys
from .config import DEFAULT_CONFIG, HelperConfig
from .routing import UrlContext, as_link_target
from .tags import content_tag, escape_html, tag


def link_to(
    name: Any,
    target: Any,
    html_options: Mapping[str, Any] | None = None,
    *,
    context: UrlContext | None = None,
    config: HelperConfig | None = None,
) -> str:
    """Create an anchor for ``target``, a literal URL or route options.

    ``name`` defaults to the URL when empty. A ``confirm`` entry in
    ``html_options`` becomes a JavaScript ``onclick`` guard. The link text is
    not escaped.

    Example:
        >>> link_to("Home", "/")
        '<a href="/">Home</a>'
        >>> link_to(None, "/about")
        '<a href="/about">/about</a>'
    """
    attrs = apply_confirm(stringify_keys(html_options))
    url = as_link_target(target).resolve(context, config)
    attrs["href"] = url
    return content_tag("a", name or url, attrs)


def button_to(
    name: Any,
    target: Any,
    html_options: Mapping[str, Any] | None = None,
    *,
    context: UrlContext | None = None,
    config: HelperConfig | None = None,
) -> str:
    """Generate a one-button form that POSTs to ``target``.

    Use this instead of :func:`link_to` for actions without safe GET
    semantics. ``html_options`` apply to the inner ``input``; pass
    ``disabled=True/False`` to toggle the button. The form gets the
    configured class (``button-to`` by default).
    """
    cfg = config or DEFAULT_CONFIG
    attrs = stringify_keys(html_options)
    normalize_boolean_attributes(attrs, cfg.boolean_attributes)
    apply_confirm(attrs)
    url = as_link_target(target).resolve(context, cfg)
    attrs["type"] = "submit"
    attrs["value"] = name or url
    return (
        f'<form method="post" action="{escape_html(url)}" class="{escape_html(cfg.button_class)}"><div>'
        + tag("input", attrs)
        + "</div></form>"
    )


def _default_alt(src: str) -> str:
    stem = src.split("/")[-1].split(".")[0]
    return stem.capitalize()


def link_image_to(
    src: str,
    target: Any,
    html_options: Mapping[str, Any] | None = None,
    *,
    context: UrlContext | None = None,
    config: HelperConfig | None = None,
) -> str:
    """Wrap an ``<img />`` for ``src`` in a link to ``target``.

    A bare ``src`` is looked up under the configured images directory and gets
    the default extension when it has none. ``alt``, ``size`` ("WxH"),
    ``border`` and ``align`` move from the link options to the image.
    """
    cfg = config or DEFAULT_CONFIG
    image_src = src if "/" in src else f"{cfg.images_dir.rstrip('/')}/{src}"
    if "." not in image_src:
        image_src += cfg.default_image_extension
    image_options: dict[str, Any] = {"src": image_src}

    attrs = stringify_keys(html_options)
    alt = attrs.pop("alt", None)
    image_options["alt"] = alt if alt is not None else _default_alt(src)

    size = attrs.pop("size", None)
    if size:
        width, _, height = str(size).partition("x")
        image_options["width"] = width
        image_options["height"] = height or None

    for key in ("border", "align"):
        value = attrs.pop(key, None)
        if value is not None:
            image_options[key] = value

    return link_to(tag("img", image_options), target, attrs, context=context, config=cfg)


link_to_image = link_image_to
