# SPDX-License-Identifier: AGPL-3.0-only
from __future__ import annotations

import os
import sys
import warnings
from typing import Any

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class RouteResolutionError(LookupError):
    """Raised when route options cannot be turned into a URL."""

    def __init__(self, message: str, options: Any = None) -> None:
        super().__init__(message)
        self.options = options


class MarkupWarning(UserWarning):
    """Warning emitted for suspicious helper inputs that still render."""


class MailEncodingWarning(MarkupWarning):
    pass


def _warn(msg: str, category: type[Warning] = MarkupWarning) -> None:
    # Attribute the warning to the first frame outside this package.
    frame = sys._getframe(1)
    stacklevel = 2
    while frame is not None and os.path.dirname(os.path.abspath(frame.f_code.co_filename)) == _PACKAGE_DIR:
        frame = frame.f_back
        stacklevel += 1
    warnings.warn(msg, category, stacklevel=stacklevel)
