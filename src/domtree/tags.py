# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Tag identifiers for builder descriptions.

``T.span`` (or ``T["my-widget"]``) is a :class:`Tag`. At the head of a list or
tuple it marks a tag form for :func:`domtree.build`; called directly it
constructs an :class:`~domtree.tree.Element`::

    build([T.p, "Hello ", [(T.a, "href", "/"), "home"]])
    T.p("Hello ", T.a("home", href="/"))
"""

from __future__ import annotations as _future_annotations

from typing import Any

from domtree.tree import Element


class Tag(str):
    __slots__ = ()

    def __call__(self, /, *children: Any, **attributes: Any) -> Element:
        return Element(self, *children, **attributes)

    def __repr__(self) -> str:
        return f"T[{str.__repr__(self)}]"


class TagFactory:  # pylint: disable=too-few-public-methods
    def __getattr__(self, name: str) -> Tag:
        if name.startswith("__"):
            raise AttributeError(name)
        return Tag(name.strip("_"))

    def __getitem__(self, name: str) -> Tag:
        return Tag(name)


T = TagFactory()
