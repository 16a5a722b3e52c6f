# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from types import TracebackType
from typing import Any, TextIO

import logging
import traceback

from pythonjsonlogger.json import JsonFormatter as _JsonFormatter

from domtree.errors import MalformedDescription, NoApplicableRenderer

_SysExcInfoType = (
    tuple[type[BaseException], BaseException, TracebackType | None] | tuple[None, None, None]
)


class JsonFormatter(_JsonFormatter):
    def formatException(self, ei: _SysExcInfoType) -> dict[str, Any] | None:  # type: ignore[override]
        exc_type, exc_value, exc_traceback = ei
        if exc_type is None or exc_value is None:
            return None

        trace = traceback.extract_tb(exc_traceback)

        details: dict[str, Any] = {
            "type": exc_type.__name__,
            "message": str(exc_value),
            "traceback": [
                {
                    "source": f"{frame.filename}:{frame.lineno}",
                    "method": frame.name,
                    "code": frame.line,
                }
                for frame in reversed(trace)
            ],
            "cause": (
                self.formatException(
                    (
                        type(exc_value.__cause__),
                        exc_value.__cause__,
                        exc_value.__cause__.__traceback__,
                    ),
                )
                if exc_value.__cause__
                else None
            ),
        }

        if isinstance(exc_value, MalformedDescription):
            details["form"] = repr(exc_value.form)
        elif isinstance(exc_value, NoApplicableRenderer):
            details["value_type"] = type(exc_value.value).__qualname__

        return details


def install_handler(
    level: int = logging.INFO,
    *,
    json_indent: int | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Send ``domtree`` log records to ``stream`` (stderr by default) as JSON."""
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        JsonFormatter("%(levelname)s %(name)s %(message)s", json_indent=json_indent),
    )
    handler.setLevel(level)

    logger = logging.getLogger("domtree")
    logger.addHandler(handler)
    logger.setLevel(level)

    return handler
