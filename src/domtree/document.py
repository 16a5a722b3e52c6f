# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Iterable
from typing import Any

from domtree.config import DEFAULT_OPTIONS, RenderOptions
from domtree.tree import DOCTYPE, Element, Node, NodeList, Sink


class Document(Node):  # pylint: disable=too-few-public-methods
    title: str
    lang: str
    styles: tuple[str, ...]
    scripts: tuple[str, ...]
    children: tuple[Any, ...]
    attributes: dict[str, Any]

    def __init__(  # noqa: PLR0913 page metadata is passed as keywords.
        self,
        title: str,
        /,
        *elements: Any,
        styles: Iterable[str] = (),
        scripts: Iterable[str] = (),
        lang: str = "en",
        **attributes: Any,
    ) -> None:
        self.title = title
        self.lang = lang
        self.styles = tuple(styles)
        self.scripts = tuple(scripts)
        self.children = tuple(elements)
        self.attributes = {k.strip("_"): v for k, v in attributes.items()}

    @property
    def tree(self) -> NodeList:
        styles = [Element("link", rel="stylesheet", href=style) for style in self.styles]
        scripts = [
            Element("script", type="module", async_=True, defer=True, src=script)
            for script in self.scripts
        ]

        return NodeList(
            DOCTYPE,
            Element(
                "html",
                Element(
                    "head",
                    Element("meta", charset="utf-8"),
                    Element(
                        "meta",
                        name="viewport",
                        content="width=device-width, initial-scale=1",
                    ),
                    Element("title", self.title),
                    *styles,
                    *scripts,
                ),
                Element("body", *self.children, **self.attributes),
                lang=self.lang,
            ),
        )

    def write(self, sink: Sink, options: RenderOptions = DEFAULT_OPTIONS) -> None:
        self.tree.write(sink, options)
