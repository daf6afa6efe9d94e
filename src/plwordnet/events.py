"""Streaming XML event source backed by ``lxml.etree.iterparse``.

lxml reports ``start``/``end`` pairs and exposes text through ``.text`` and
``.tail``. :func:`iter_events` flattens that into the five event shapes the
loader consumes, in document order:

- :class:`StartElement` / :class:`EmptyElement` (an element whose end
  immediately follows its start, with no text in between)
- :class:`Text`
- :class:`EndElement` (never emitted for an :class:`EmptyElement`)
- :data:`EOF`

Comments and processing instructions are not reported, but text on either
side of one arrives as two separate :class:`Text` events.

Consumed elements are cleared and detached so memory stays bounded by the
current nesting depth rather than the document size.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

from lxml import etree

from plwordnet.exceptions import LoadIOError, MalformedXmlError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StartElement:
    tag: str
    attributes: Mapping[str, str]


@dataclass(frozen=True, slots=True)
class EmptyElement:
    tag: str
    attributes: Mapping[str, str]


@dataclass(frozen=True, slots=True)
class Text:
    content: str


@dataclass(frozen=True, slots=True)
class EndElement:
    tag: str


@dataclass(frozen=True, slots=True)
class Eof:
    pass


EOF = Eof()

Event = Union[StartElement, EmptyElement, Text, EndElement, Eof]

Source = Union[str, Path, BinaryIO]


def iter_events(source: Source) -> Iterator[Event]:
    """Yield parse events for *source* (a path or a binary file object).

    Every call starts a fresh pass over the input.

    Raises:
        LoadIOError: If the file cannot be opened or read.
        MalformedXmlError: If the document is not well-formed XML.
    """
    if hasattr(source, "read"):
        yield from _iter_stream(source)  # type: ignore[arg-type]
        return

    path = Path(source)  # type: ignore[arg-type]
    try:
        stream = open(path, "rb")
    except OSError as e:
        raise LoadIOError(f"Cannot open {path}: {e}") from e
    with stream:
        yield from _iter_stream(stream)


def _iter_stream(stream: BinaryIO) -> Iterator[Event]:
    context = etree.iterparse(
        stream,
        events=("start", "end", "comment", "pi"),
        huge_tree=True,
    )
    pending = None  # started, not yet known to be empty
    ended = None  # ended, tail not yet emitted

    try:
        for action, elem in context:
            if pending is not None:
                if action == "end" and elem is pending and not pending.text:
                    yield EmptyElement(pending.tag, dict(pending.attrib))
                    pending = None
                    ended = elem
                    continue
                yield StartElement(pending.tag, dict(pending.attrib))
                if pending.text:
                    yield Text(pending.text)
                pending = None

            if ended is not None:
                if ended.tail:
                    yield Text(ended.tail)
                ended = _release(ended)

            if action == "start":
                pending = elem
            elif action in ("comment", "pi"):
                # Skipped, but its tail stays a separate text chunk.
                ended = elem
            else:
                yield EndElement(elem.tag)
                ended = elem
    except etree.XMLSyntaxError as e:
        raise MalformedXmlError(f"Malformed XML: {e.msg}", e.position) from e
    except OSError as e:
        raise LoadIOError(f"Failed to read XML: {e}") from e

    if ended is not None:
        _release(ended)
    yield EOF


def _release(elem) -> None:
    """Drop *elem* and its already-consumed preceding siblings."""
    elem.clear()
    parent = elem.getparent()
    if parent is not None:
        while elem.getprevious() is not None:
            del parent[0]
    return None
