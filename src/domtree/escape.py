# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""The escaping primitive shared by text content and attribute values."""

from __future__ import annotations as _future_annotations

from domtree.errors import InvalidCharacter

_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
}

_TABLE = str.maketrans(_ESCAPES)


def escape_char(char: str) -> str:
    if len(char) != 1:
        raise InvalidCharacter(f"Expected a single character, got {char!r}")

    return _ESCAPES.get(char, char)


def escape(text: str) -> str:
    """Escape every character of ``text`` in order, using :func:`escape_char` rules."""
    return text.translate(_TABLE)
