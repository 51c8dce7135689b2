from __future__ import annotations

from html import escape
from typing import Any, Mapping

from .errors import _warn


def escape_html(text: Any) -> str:
    """Entity-escape ``& < > " '`` for use as element text."""
    if text is None:
        return ""
    return escape(str(text), quote=True)


def _escape_attr_value(value: str) -> str:
    # Single quotes stay literal: confirm guards rely on their JS quoting.
    return escape(value, quote=False).replace('"', "&quot;")


def _render_attr_value(name: str, value: Any) -> str:
    if isinstance(value, bool):
        _warn(
            f"Boolean value for attribute {name!r} rendered as {str(value).lower()!r}; "
            "minimize it with normalize_boolean_attributes",
        )
        return "true" if value else "false"
    return str(value)


def _render_attrs(attrs: Mapping[str, Any] | None) -> str:
    if not attrs:
        return ""
    parts: list[str] = []
    for key, value in attrs.items():
        if value is None:
            continue
        rendered = _escape_attr_value(_render_attr_value(key, value))
        parts.append(f'{key}="{rendered}"')
    return (" " + " ".join(parts)) if parts else ""


def render_tag(
    name: str,
    attrs: Mapping[str, Any] | None = None,
    content: Any = None,
    self_closing: bool = False,
) -> str:
    """Serialize one element.

    Attributes render in mapping order. ``None`` values are skipped. Content
    is emitted as-is; escape it with :func:`escape_html` first when it is
    untrusted.
    """
    rendered_attrs = _render_attrs(attrs)
    if self_closing:
        return f"<{name}{rendered_attrs} />"
    body = "" if content is None else str(content)
    return f"<{name}{rendered_attrs}>{body}</{name}>"


def tag(name: str, attrs: Mapping[str, Any] | None = None) -> str:
    return render_tag(name, attrs, self_closing=True)


def content_tag(name: str, content: Any, attrs: Mapping[str, Any] | None = None) -> str:
    return render_tag(name, attrs, content=content)
