# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Turn nested literal descriptions into node trees.

A tag form is a list or tuple whose head is a :class:`~domtree.tags.Tag`, or
whose head is itself a list or tuple of a tag followed by flat
attribute-name/value pairs. Remaining items of the form are built recursively
as the element's children. Anything else (text, numbers, pre-built nodes,
plain lists) is passed through unchanged and escaped only when rendered.
"""

from __future__ import annotations as _future_annotations

from typing import Any

from domtree.errors import MalformedDescription
from domtree.tags import Tag
from domtree.tree import Element, NodeList


def build(*forms: Any) -> NodeList:
    return NodeList(*(_build(form) for form in forms))


def is_tag_form(form: Any) -> bool:
    if not isinstance(form, (list, tuple)) or not form:
        return False

    head = form[0]
    if isinstance(head, Tag):
        return True

    return isinstance(head, (list, tuple)) and bool(head) and isinstance(head[0], Tag)


def _build(form: Any) -> Any:
    if not is_tag_form(form):
        return form

    head, *body = form
    name, attributes = _split_head(head)

    return Element.from_parts(name, attributes, [_build(child) for child in body])


def _split_head(head: Tag | list[Any] | tuple[Any, ...]) -> tuple[str, list[tuple[str, Any]]]:
    if isinstance(head, Tag):
        return head, []

    name, *flat = head
    if len(flat) % 2:
        raise MalformedDescription("Attribute list has an odd number of items", head)

    attributes = list(zip(flat[::2], flat[1::2], strict=True))
    for key, _ in attributes:
        if not isinstance(key, str) or not key:
            raise MalformedDescription(f"Attribute name {key!r} is not a non-empty string", head)

    return name, attributes
