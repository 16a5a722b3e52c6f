# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Exceptions raised by domtree."""

from __future__ import annotations as _future_annotations

from typing import Any


class DomError(Exception):
    """Base class for every error raised by domtree."""


class MalformedDescription(DomError, ValueError):
    """A builder description does not follow the tag-form grammar.

    The whole build is aborted; no partial tree is returned.
    """

    form: Any

    def __init__(self, message: str, form: Any) -> None:
        self.form = form
        super().__init__(f"{message}: {form!r}")


class NoApplicableRenderer(DomError, TypeError):
    """A value reached the writer without a usable textual form."""

    value: Any

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        super().__init__(f"Cannot render {type(value).__name__} value {value!r}: {reason}")


class ConfigError(DomError, ValueError):
    pass


class InvalidCharacter(DomError, ValueError):
    """``escape_char`` was given something other than a single character."""
