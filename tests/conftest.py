from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest


ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC = ROOT / "python"

if str(PYTHON_SRC) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC))
else:
    sys.path.remove(str(PYTHON_SRC))
    sys.path.insert(0, str(PYTHON_SRC))


class RecordingResolver:
    """Route resolver double: ``/controller/action/id`` plus remaining params as a query."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def __call__(self, options: dict[str, Any]) -> str:
        self.calls.append(dict(options))
        parts = [str(options[key]) for key in ("controller", "action", "id") if key in options]
        path = "/" + "/".join(parts)
        extra = [
            f"{key}={value}"
            for key, value in options.items()
            if key not in ("controller", "action", "id", "only_path")
        ]
        if extra:
            path += "?" + "&".join(extra)
        if not options.get("only_path", False):
            path = "http://example.test" + path
        return path


@pytest.fixture
def resolver() -> RecordingResolver:
    return RecordingResolver()


@pytest.fixture
def context(resolver: RecordingResolver):
    from linkmarkup import UrlContext

    return UrlContext(resolve_url=resolver, current_request_uri=lambda: "/feeds/index")
