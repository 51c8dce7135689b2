"""
Mail link rendering with optional address obfuscation.

Three encodings are available:

- ``none``: a plain ``mailto:`` anchor.
- ``hex``: every character of the address is percent-encoded in the href.
- ``javascript``: the whole anchor is percent-encoded and rebuilt in the
  browser with ``eval(unescape(...))``.

Header fields (``cc``, ``bcc``, ``body``, ``subject``) are URI-escaped and
appended as a query string in that fixed order. The address and link text
are not JavaScript-escaped, so a single quote in them breaks the
``javascript`` encoding.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping
from urllib.parse import quote

from .attributes import stringify_keys
from .errors import MailEncodingWarning, _warn
from .tags import content_tag

__all__ = [
    "MailEncoding",
    "mail_to",
    "mail_query_suffix",
    "hex_encode_address",
    "javascript_escape",
]

MAIL_HEADER_FIELDS = ("cc", "bcc", "body", "subject")


class MailEncoding(str, Enum):
    NONE = "none"
    HEX = "hex"
    JAVASCRIPT = "javascript"


def _coerce_encoding(value: Any) -> MailEncoding:
    if value is None:
        return MailEncoding.NONE
    if isinstance(value, MailEncoding):
        return value
    try:
        return MailEncoding(str(value).strip().lower())
    except ValueError:
        _warn(
            f"Unsupported mail encoding {value!r}; rendering a plain mailto link",
            MailEncodingWarning,
        )
        return MailEncoding.NONE


def mail_query_suffix(headers: Mapping[str, Any]) -> str:
    """
    Build the ``?cc=..&bcc=..&body=..&subject=..`` suffix for a mailto URL.

    Values are percent-encoded with ``urllib.parse.quote``: spaces become
    ``%20`` and only the RFC 3986 unreserved characters (letters, digits,
    ``-._~``) stay literal.

    Args:
        headers: Mapping that may hold cc, bcc, body and subject.
                 None values are skipped.

    Returns:
        Query string starting with "?" or empty string if no headers

    Example:
        >>> mail_query_suffix({"subject": "Hi there", "cc": "a@b.com"})
        '?cc=a%40b.com&subject=Hi%20there'
    """
    extras = ""
    for key in MAIL_HEADER_FIELDS:
        value = headers.get(key)
        if value is None:
            continue
        extras += f"{key}={quote(str(value), safe='', errors='surrogatepass')}&"
    if extras.endswith("&"):
        extras = extras[:-1]
    return f"?{extras}" if extras else ""


def hex_encode_address(address: str) -> str:
    """
    Percent-encode every character of ``address`` as lowercase hex.

    Separators such as ``@`` and ``.`` are encoded too. Non-ASCII characters
    are encoded byte by byte from their UTF-8 form. Lone surrogates are
    encoded as their raw three-byte sequence rather than rejected.

    Example:
        >>> hex_encode_address("me@x.com")
        '%6d%65%40%78%2e%63%6f%6d'
    """
    return "".join(f"%{byte:02x}" for byte in str(address).encode("utf-8", "surrogatepass"))


def javascript_escape(text: str) -> str:
    """Percent-encode every character for JavaScript's ``unescape``."""
    parts: list[str] = []
    for char in text:
        code = ord(char)
        if code <= 0xFF:
            parts.append(f"%{code:02x}")
        else:
            # unescape() only understands %uXXXX units; astral chars become
            # a surrogate pair and lone surrogates pass through as one unit.
            encoded = char.encode("utf-16-be", "surrogatepass")
            for i in range(0, len(encoded), 2):
                parts.append(f"%u{encoded[i]:02x}{encoded[i + 1]:02x}")
    return "".join(parts)


def mail_to(
    address: str,
    name: Any = None,
    html_options: Mapping[str, Any] | None = None,
) -> str:
    """
    Create a ``mailto:`` link for ``address``.

    Args:
        address: Mail address; also the link text when name is empty
        name: Link text
        html_options: Anchor attributes plus the special keys ``encode``
                      ("none", "hex" or "javascript"), ``cc``, ``bcc``,
                      ``subject`` and ``body``

    Returns:
        Anchor HTML, or a script block for the javascript encoding

    Example:
        >>> mail_to("me@domain.com", "My email")
        '<a href="mailto:me@domain.com">My email</a>'
    """
    attrs = stringify_keys(html_options)
    encoding = _coerce_encoding(attrs.pop("encode", None))
    headers = {key: attrs.pop(key, None) for key in MAIL_HEADER_FIELDS}
    extras = mail_query_suffix(headers)
    text = name or address

    if encoding is MailEncoding.JAVASCRIPT:
        attrs["href"] = f"mailto:{address}{extras}"
        statement = f"document.write('{content_tag('a', text, attrs)}');"
        return (
            '<script type="text/javascript" language="javascript">'
            f"eval(unescape('{javascript_escape(statement)}'))"
            "</script>"
        )
    if encoding is MailEncoding.HEX:
        attrs["href"] = f"mailto:{hex_encode_address(address)}{extras}"
        return content_tag("a", text, attrs)
    attrs["href"] = f"mailto:{address}{extras}"
    return content_tag("a", text, attrs)
