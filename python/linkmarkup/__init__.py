# SPDX-License-Identifier: AGPL-3.0-only
"""HTML link, button-form and mail-link helpers for server-rendered views.

URL resolution and the current request URI are supplied by the host framework
through :class:`UrlContext`; everything else here is pure string building.
"""

__version__ = "0.1.0"

from .attributes import apply_confirm, normalize_boolean_attributes, stringify_keys
from .conditional import current_page, link_to_if, link_to_unless, link_to_unless_current
from .config import DEFAULT_CONFIG, HelperConfig
from .errors import MailEncodingWarning, MarkupWarning, RouteResolutionError
from .helper import UrlHelper
from .links import button_to, link_image_to, link_to, link_to_image
from .mail import MailEncoding, hex_encode_address, mail_query_suffix, mail_to
from .routing import LinkTarget, LiteralUrl, RouteOptions, UrlContext, as_link_target, url_for
from .tags import content_tag, escape_html, render_tag, tag

__all__ = [
    "__version__",
    # tags
    "escape_html",
    "render_tag",
    "tag",
    "content_tag",
    # attributes
    "normalize_boolean_attributes",
    "apply_confirm",
    "stringify_keys",
    # routing
    "LinkTarget",
    "LiteralUrl",
    "RouteOptions",
    "UrlContext",
    "as_link_target",
    "url_for",
    # links
    "link_to",
    "button_to",
    "link_image_to",
    "link_to_image",
    # mail
    "MailEncoding",
    "mail_to",
    "mail_query_suffix",
    "hex_encode_address",
    # conditional
    "link_to_unless",
    "link_to_if",
    "current_page",
    "link_to_unless_current",
    # config / errors
    "HelperConfig",
    "DEFAULT_CONFIG",
    "RouteResolutionError",
    "MarkupWarning",
    "MailEncodingWarning",
    "UrlHelper",
]
