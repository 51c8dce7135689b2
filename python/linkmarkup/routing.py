from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .config import DEFAULT_CONFIG, HelperConfig
from .errors import RouteResolutionError

UrlResolver = Callable[[dict[str, Any]], str]
RequestUriProvider = Callable[[], str]


@dataclass(frozen=True)
class UrlContext:
    """Request-scoped collaborators supplied by the host framework."""

    resolve_url: UrlResolver | None = None
    current_request_uri: RequestUriProvider | None = None

    def request_uri(self) -> str:
        if self.current_request_uri is None:
            raise RuntimeError("UrlContext has no current_request_uri provider")
        return self.current_request_uri()


@dataclass(frozen=True)
class LiteralUrl:
    url: str

    def resolve(self, context: UrlContext | None = None, config: HelperConfig | None = None) -> str:
        return self.url


@dataclass(frozen=True)
class RouteOptions:
    params: Mapping[str, Any] = field(default_factory=dict)

    # Parameter values may be unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def with_defaults(self, config: HelperConfig | None = None) -> dict[str, Any]:
        cfg = config or DEFAULT_CONFIG
        options = dict(self.params)
        if cfg.default_only_path and "only_path" not in options:
            options = {"only_path": True, **options}
        return options

    def resolve(self, context: UrlContext | None = None, config: HelperConfig | None = None) -> str:
        options = self.with_defaults(config)
        if context is None or context.resolve_url is None:
            raise RouteResolutionError("No URL resolver configured for route options", options)
        try:
            url = context.resolve_url(options)
        except RouteResolutionError:
            raise
        except (LookupError, ValueError) as exc:
            raise RouteResolutionError(f"Could not resolve route {options!r}: {exc}", options) from exc
        return str(url)


LinkTarget = LiteralUrl | RouteOptions


def as_link_target(value: Any) -> LinkTarget:
    """Wrap a caller-supplied target into its ``LinkTarget`` variant."""
    if isinstance(value, (LiteralUrl, RouteOptions)):
        return value
    if isinstance(value, str):
        return LiteralUrl(value)
    if isinstance(value, Mapping):
        return RouteOptions({str(k): v for k, v in value.items()})
    raise TypeError(f"Unsupported link target {type(value).__name__}; expected str, mapping or LinkTarget")


def url_for(
    target: Any,
    *,
    context: UrlContext | None = None,
    config: HelperConfig | None = None,
) -> str:
    """Return the URL for a literal string or a set of route options.

    Route options get ``only_path=True`` unless the caller set ``only_path``.

    Example:
        >>> url_for("/about")
        '/about'
        >>> ctx = UrlContext(resolve_url=lambda opts: f"/{opts['controller']}")
        >>> url_for({"controller": "feeds"}, context=ctx)
        '/feeds'
    """
    return as_link_target(target).resolve(context, config)
