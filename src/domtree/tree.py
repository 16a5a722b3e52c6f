# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Node model and the escaping writer.

A tree is made of :class:`Element`, :class:`UnsafeText` and :class:`NodeList`
nodes, plus plain values: strings are escaped text, lists and tuples are
sequences, registered :class:`Sentinel` values render as fixed literals, and
anything else is converted to text (via :class:`Renderable` where available)
and escaped.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Protocol, runtime_checkable

import abc
import io
import logging

import multidict

from domtree.config import DEFAULT_OPTIONS, RenderOptions
from domtree.errors import DomError, NoApplicableRenderer
from domtree.escape import escape

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, text: str, /) -> Any:
        pass


@runtime_checkable
class Renderable(Protocol):
    def to_text(self) -> str:
        pass


class Node(abc.ABC):
    @abc.abstractmethod
    def write(self, sink: Sink, options: RenderOptions = DEFAULT_OPTIONS) -> None:
        pass

    @property
    def html(self) -> str:
        return render_to_text(self)

    def __str__(self) -> str:
        return self.html


class NodeList(Node, Sequence[Any]):  # pylint: disable=too-few-public-methods
    nodes: tuple[Any, ...]

    __slots__ = ("nodes",)

    def __init__(self, *nodes: Any) -> None:
        self.nodes = tuple(_freeze(node) for node in nodes)

    def write(self, sink: Sink, options: RenderOptions = DEFAULT_OPTIONS) -> None:
        for node in self.nodes:
            write(node, sink, options)

    def __getitem__(self, index: Any) -> Any:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeList):
            return NotImplemented
        return self.nodes == other.nodes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"NodeList{self.nodes!r}"


class UnsafeText(Node, str):
    __slots__ = ()

    def write(self, sink: Sink, options: RenderOptions = DEFAULT_OPTIONS) -> None:
        sink.write(str.__str__(self))

    def __repr__(self) -> str:
        return f"UnsafeText({str.__repr__(self)})"


class Element(Node):  # pylint: disable=too-few-public-methods
    name: str
    attributes: multidict.MultiDictProxy[Any]
    children: tuple[Any, ...]

    __slots__ = ("attributes", "children", "name")

    def __init__(self, name: str, /, *children: Any, **attributes: Any) -> None:
        self._setup(
            name,
            ((key.strip("_"), value) for key, value in attributes.items()),
            children,
        )

    @classmethod
    def from_parts(
        cls,
        name: str,
        attributes: Iterable[tuple[str, Any]],
        children: Iterable[Any],
    ) -> Element:
        """Create an element from ordered attribute pairs, which may repeat keys."""
        element = cls.__new__(cls)
        element._setup(name, attributes, children)
        return element

    def _setup(
        self,
        name: str,
        attributes: Iterable[tuple[str, Any]],
        children: Iterable[Any],
    ) -> None:
        self.name = name
        self.attributes = multidict.MultiDictProxy(multidict.MultiDict(list(attributes)))
        self.children = tuple(_freeze(child) for child in children)

    def write(self, sink: Sink, options: RenderOptions = DEFAULT_OPTIONS) -> None:
        name = self.name.lower()

        sink.write(f"<{name}")
        for key, value in self.attributes.items():
            if value is None or value is False:
                continue
            text = key.lower() if value is True else _to_text(value)
            sink.write(f' {key.lower()}="{escape(text)}"')
        sink.write(">")
        sink.write(options.newline)

        for child in self.children:
            write(child, sink, options)

        if not options.is_void(name):
            sink.write(f"</{name}>")
            sink.write(options.newline)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return (
            self.name == other.name
            and list(self.attributes.items()) == list(other.attributes.items())
            and self.children == other.children
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        attributes = "".join(f", {key}={value!r}" for key, value in self.attributes.items())
        children = "".join(f", {child!r}" for child in self.children)
        return f"Element({self.name!r}{children}{attributes})"


class Sentinel:
    """A fixed-form atom rendered from the literal registry."""

    name: str

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"<Sentinel {self.name}>"


_LITERALS: dict[Sentinel, str] = {}


def register_literal(sentinel: Sentinel, text: str) -> None:
    """Make ``sentinel`` render as ``text`` followed by the line break, unescaped."""
    existing = _LITERALS.get(sentinel)
    if existing is not None and existing != text:
        raise DomError(f"{sentinel!r} is already registered as {existing!r}")

    _LITERALS[sentinel] = text
    logger.debug("Registered literal %r for %r", text, sentinel)


DOCTYPE = Sentinel("doctype")
register_literal(DOCTYPE, "<!doctype html>")


def write(node: Any, sink: Sink, options: RenderOptions | None = None) -> None:
    options = options or DEFAULT_OPTIONS

    if isinstance(node, Node):
        node.write(sink, options)
    elif isinstance(node, str):
        sink.write(escape(node))
    elif isinstance(node, (list, tuple)):
        for child in node:
            write(child, sink, options)
    elif isinstance(node, Sentinel):
        if node not in _LITERALS:
            raise NoApplicableRenderer(node, "sentinel has no registered literal")
        sink.write(_LITERALS[node])
        sink.write(options.newline)
    elif node is None:
        return
    else:
        sink.write(escape(_to_text(node)))


def render_to_text(nodes: Any, options: RenderOptions | None = None) -> str:
    sink = io.StringIO()
    write(nodes, sink, options)
    return sink.getvalue()


def render_to_stream(nodes: Any, sink: Sink, options: RenderOptions | None = None) -> None:
    write(nodes, sink, options)


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value

    text = value.to_text() if isinstance(value, Renderable) else str(value)
    if not isinstance(text, str):
        raise NoApplicableRenderer(value, f"to_text() returned {type(text).__name__}")

    return text


def _freeze(child: Any) -> Any:
    if isinstance(child, (list, Iterator)):
        return tuple(_freeze(item) for item in child)
    return child
