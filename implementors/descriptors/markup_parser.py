"""Parse rendered implementor markup into :class:`ImplementorDescriptor`.

The generator renders each entry as text with anchors, for example::

    impl&lt;V:&nbsp;<a class="trait" href=".." title="trait core::hash::Hash">Hash</a>&gt;
    <a class="trait" ...>Hash</a> for <a class="struct" href=".."
    title="struct vec_map::VecMap">VecMap</a>&lt;V&gt;

The implemented trait is the last ``trait`` anchor outside the impl generics
and before the top-level ``for``; the implementing type is the first anchor
after it.
"""

from __future__ import annotations

from dataclasses import dataclass
from html.parser import HTMLParser
from typing import List, Optional, Tuple

from implementors.errors import MarkupParseError

from .implementor_descriptor import ImplementorDescriptor

__all__ = ["parse_implementor", "markup_to_text"]

_FOR = " for "


@dataclass
class _Anchor:
    kind: Optional[str]
    href: Optional[str]
    title: Optional[str]
    start: int
    end: int = -1
    text: str = ""

    @property
    def path(self) -> Optional[str]:
        # titles look like "trait core::hash::Hash" or "struct clap::Error"
        if not self.title:
            return None
        _, _, path = self.title.partition(" ")
        return path or self.title


class _MarkupParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.chunks: List[str] = []
        self.anchors: List[_Anchor] = []
        self._offset = 0
        self._open: Optional[_Anchor] = None

    def handle_starttag(self, tag, attrs):
        if tag != "a":
            return
        attributes = dict(attrs)
        self._open = _Anchor(
            kind=attributes.get("class"),
            href=attributes.get("href"),
            title=attributes.get("title"),
            start=self._offset,
        )

    def handle_endtag(self, tag):
        if tag != "a" or self._open is None:
            return
        anchor = self._open
        anchor.end = self._offset
        anchor.text = "".join(self.chunks)[anchor.start:anchor.end]
        self.anchors.append(anchor)
        self._open = None

    def handle_data(self, data):
        data = data.replace("\xa0", " ")
        self.chunks.append(data)
        self._offset += len(data)

    @property
    def text(self) -> str:
        return "".join(self.chunks)


def _feed(markup: str) -> _MarkupParser:
    parser = _MarkupParser()
    parser.feed(markup)
    parser.close()
    return parser


def markup_to_text(markup: str) -> str:
    """Strip tags and unescape entities, e.g. ``impl Hash for Flags``."""
    return _feed(markup).text


def _depths(text: str) -> List[int]:
    """Angle-bracket nesting depth before each character of ``text``."""
    depths = []
    depth = 0
    previous = ""
    for ch in text:
        depths.append(depth)
        if ch == "<":
            depth += 1
        elif ch == ">" and previous != "-" and depth > 0:
            depth -= 1
        previous = ch
    return depths


def _top_level_for(text: str, depths: List[int]) -> int:
    start = text.find(_FOR)
    while start != -1:
        if depths[start] == 0:
            return start
        start = text.find(_FOR, start + 1)
    return -1


def _split_anchors(
    anchors: List[_Anchor], depths: List[int], for_at: int
) -> Tuple[Optional[_Anchor], Optional[_Anchor]]:
    trait = None
    for anchor in anchors:
        if anchor.start >= for_at:
            break
        if anchor.kind == "trait" and depths[anchor.start] == 0:
            trait = anchor
    implementor = next((a for a in anchors if a.start >= for_at + len(_FOR)), None)
    return trait, implementor


def parse_implementor(markup: str) -> ImplementorDescriptor:
    """Return the structured descriptor for one markup entry.

    Raises :class:`MarkupParseError` when the markup has no top-level
    ``for`` or lacks the trait or type anchor.
    """
    parser = _feed(markup)
    text = parser.text
    depths = _depths(text)
    for_at = _top_level_for(text, depths)
    if for_at == -1:
        raise MarkupParseError(f"No top-level 'for' in implementor markup: {text!r}")

    trait, implementor = _split_anchors(parser.anchors, depths, for_at)
    if trait is None or implementor is None:
        raise MarkupParseError(f"Missing trait or type link in implementor markup: {text!r}")

    head = text[:trait.start]
    generics = head[len("impl"):] if head.startswith("impl") else head
    return ImplementorDescriptor(
        text=text,
        trait_name=trait.text,
        trait_path=trait.path,
        trait_href=trait.href,
        type_name=implementor.text,
        type_kind=implementor.kind,
        type_path=implementor.path,
        type_href=implementor.href,
        generics=generics.strip(),
        type_args=text[implementor.end:].strip(),
    )
