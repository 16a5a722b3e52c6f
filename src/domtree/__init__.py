# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Build markup as plain data, then render it with context-correct escaping."""

from __future__ import annotations as _future_annotations

from domtree.builder import build, is_tag_form
from domtree.config import DEFAULT_OPTIONS, VOID_ELEMENTS, RenderOptions
from domtree.document import Document
from domtree.errors import (
    ConfigError,
    DomError,
    InvalidCharacter,
    MalformedDescription,
    NoApplicableRenderer,
)
from domtree.escape import escape, escape_char
from domtree.tags import T, Tag, TagFactory
from domtree.tree import (
    DOCTYPE,
    Element,
    Node,
    NodeList,
    Renderable,
    Sentinel,
    Sink,
    UnsafeText,
    register_literal,
    render_to_stream,
    render_to_text,
    write,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "DOCTYPE",
    "VOID_ELEMENTS",
    "ConfigError",
    "Document",
    "DomError",
    "Element",
    "InvalidCharacter",
    "MalformedDescription",
    "NoApplicableRenderer",
    "Node",
    "NodeList",
    "Renderable",
    "RenderOptions",
    "Sentinel",
    "Sink",
    "T",
    "Tag",
    "TagFactory",
    "UnsafeText",
    "build",
    "escape",
    "escape_char",
    "is_tag_form",
    "register_literal",
    "render_to_stream",
    "render_to_text",
    "write",
]
