from __future__ import annotations

from typing import Any, Iterable, Mapping


def stringify_keys(attrs: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Return a fresh attribute dict with ``str`` keys, preserving order."""
    if not attrs:
        return {}
    return {str(key): value for key, value in attrs.items()}


def _is_unset(value: Any) -> bool:
    return value is None or value is False


def normalize_boolean_attributes(attrs: dict[str, Any], bool_names: Iterable[str]) -> dict[str, Any]:
    """Convert boolean flags in ``attrs`` to their minimized HTML form.

    For each name in ``bool_names`` that is present in ``attrs``: ``None`` or
    ``False`` removes the key, any other value (``""`` and ``0`` included) is
    replaced by the attribute name (``disabled="disabled"``). Keys outside
    ``bool_names`` are left alone.

    The mapping is modified in place and returned.

    Example:
        >>> normalize_boolean_attributes({"disabled": True, "checked": False}, ["disabled", "checked"])
        {'disabled': 'disabled'}
    """
    for name in bool_names:
        if name not in attrs:
            continue
        if _is_unset(attrs[name]):
            del attrs[name]
        else:
            attrs[name] = name
    return attrs


def confirm_javascript(message: Any) -> str:
    escaped = str(message).replace("'", "\\'")
    return f"return confirm('{escaped}');"


def apply_confirm(attrs: dict[str, Any]) -> dict[str, Any]:
    """Rewrite a ``confirm`` pseudo-attribute into an ``onclick`` guard.

    Any existing ``onclick`` is replaced. Modifies ``attrs`` in place and
    returns it; without a ``confirm`` key this is a no-op.
    """
    if "confirm" not in attrs:
        return attrs
    message = attrs.pop("confirm")
    if _is_unset(message):
        return attrs
    attrs["onclick"] = confirm_javascript(message)
    return attrs
