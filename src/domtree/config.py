# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Mapping

import dataclasses
import logging
import os

from dotenv import dotenv_values

from domtree.errors import ConfigError

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    },
)

_NEWLINES = {"lf": "\n", "crlf": "\r\n", "none": ""}


@dataclasses.dataclass(frozen=True)
class RenderOptions:
    newline: str = "\n"
    void_elements: frozenset[str] = VOID_ELEMENTS

    def is_void(self, name: str) -> bool:
        return name.lower() in self.void_elements

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        dotenv_path: str | os.PathLike[str] | None = None,
    ) -> RenderOptions:
        """Load options from ``DOMTREE_*`` variables.

        Values from ``dotenv_path`` (if given) are read first, then overridden
        by ``environ`` (the process environment when omitted).
        """
        values: dict[str, str | None] = {}
        if dotenv_path is not None:
            values.update(dotenv_values(dotenv_path))
        values.update(os.environ if environ is None else environ)

        options: dict[str, object] = {}

        if newline := values.get("DOMTREE_NEWLINE"):
            if newline.lower() not in _NEWLINES:
                raise ConfigError(
                    f"DOMTREE_NEWLINE must be one of {', '.join(_NEWLINES)}, got {newline!r}",
                )
            options["newline"] = _NEWLINES[newline.lower()]

        if void := values.get("DOMTREE_VOID_ELEMENTS"):
            options["void_elements"] = frozenset(
                name.strip().lower() for name in void.split(",") if name.strip()
            )

        logger.debug("Loaded render options from environment: %s", options)

        return cls(**options)  # type: ignore[arg-type]


DEFAULT_OPTIONS = RenderOptions()
