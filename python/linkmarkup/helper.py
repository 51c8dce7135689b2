from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .conditional import LinkFallback, current_page, link_to_if, link_to_unless, link_to_unless_current
from .config import DEFAULT_CONFIG, HelperConfig
from .links import button_to, link_image_to, link_to
from .mail import mail_to
from .routing import RequestUriProvider, UrlContext, UrlResolver, url_for


@dataclass
class UrlHelper:
    """View-side facade binding one request's collaborators and a config.

    Build one per request and hand it to templates:

        helper = UrlHelper.for_request(router.url_for, lambda: request.path)
        helper.link_to("Edit", {"action": "edit", "id": 3})
    """

    context: UrlContext = field(default_factory=UrlContext)
    config: HelperConfig = DEFAULT_CONFIG

    @classmethod
    def for_request(
        cls,
        resolve_url: UrlResolver | None = None,
        current_request_uri: RequestUriProvider | None = None,
        config: HelperConfig | None = None,
    ) -> "UrlHelper":
        return cls(
            context=UrlContext(resolve_url=resolve_url, current_request_uri=current_request_uri),
            config=config or DEFAULT_CONFIG,
        )

    def url_for(self, target: Any) -> str:
        return url_for(target, context=self.context, config=self.config)

    def link_to(self, name: Any, target: Any, html_options: Mapping[str, Any] | None = None) -> str:
        return link_to(name, target, html_options, context=self.context, config=self.config)

    def button_to(self, name: Any, target: Any, html_options: Mapping[str, Any] | None = None) -> str:
        return button_to(name, target, html_options, context=self.context, config=self.config)

    def link_image_to(self, src: str, target: Any, html_options: Mapping[str, Any] | None = None) -> str:
        return link_image_to(src, target, html_options, context=self.context, config=self.config)

    def mail_to(self, address: str, name: Any = None, html_options: Mapping[str, Any] | None = None) -> str:
        return mail_to(address, name, html_options)

    def current_page(self, target: Any) -> bool:
        return current_page(target, context=self.context, config=self.config)

    def link_to_unless(
        self,
        condition: Any,
        name: Any,
        target: Any,
        html_options: Mapping[str, Any] | None = None,
        fallback: LinkFallback | None = None,
    ) -> str:
        return link_to_unless(
            condition, name, target, html_options, fallback, context=self.context, config=self.config
        )

    def link_to_if(
        self,
        condition: Any,
        name: Any,
        target: Any,
        html_options: Mapping[str, Any] | None = None,
        fallback: LinkFallback | None = None,
    ) -> str:
        return link_to_if(
            condition, name, target, html_options, fallback, context=self.context, config=self.config
        )

    def link_to_unless_current(
        self,
        name: Any,
        target: Any,
        html_options: Mapping[str, Any] | None = None,
        fallback: LinkFallback | None = None,
    ) -> str:
        return link_to_unless_current(
            name, target, html_options, fallback, context=self.context, config=self.config
        )
