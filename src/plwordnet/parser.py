"""Single-pass loader that turns plWordNet XML events into a LexicalGraph."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Union

from plwordnet import binder
from plwordnet.config import LoaderConfig
from plwordnet.events import (
    EmptyElement,
    EndElement,
    Eof,
    Event,
    Source,
    StartElement,
    Text,
    iter_events,
)
from plwordnet.exceptions import (
    InvalidAttributeValueError,
    MissingRootError,
    UnexpectedElementError,
)
from plwordnet.models import (
    LexicalRelation,
    LexicalUnit,
    RelationType,
    RelationTypeTest,
    Synset,
    SynsetRelation,
    language_for_pos,
)

if TYPE_CHECKING:
    from plwordnet.graph import LexicalGraph

logger = logging.getLogger(__name__)

TAG_LEXICAL_UNIT = "lexical-unit"
TAG_SYNSET = "synset"
TAG_RELATION_TYPE = "relationtypes"
TAG_RELATION_TYPE_TEST = "test"
TAG_LEXICAL_RELATION = "lexicalrelations"
TAG_SYNSET_RELATION = "synsetrelations"
TAG_UNIT_ID = "unit-id"


# ---------------------------------------------------------------------------
# Parsing context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Idle:
    """No container element is open."""


@dataclass(frozen=True, slots=True)
class InsideSynset:
    """A ``<synset>`` is open; text inside it lists member unit ids."""

    id: int
    members: list[int] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class InsideRelationType:
    """A ``<relationtypes>`` is open; ``<test>`` children belong to it."""

    id: int
    tests: list[RelationTypeTest] = field(default_factory=list)


ParsingContext = Union[Idle, InsideSynset, InsideRelationType]

IDLE = Idle()


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class GraphBuilder:
    """Mutable accumulator for a graph under construction."""

    def __init__(self, root_tag: str = "array-list") -> None:
        self.root_tag = root_tag
        self.root_seen = False
        self.owner = ""
        self.date = ""
        self.version = ""
        self.lexical_units: dict[int, LexicalUnit] = {}
        self.synsets: dict[int, Synset] = {}
        self.relation_types: dict[int, RelationType] = {}
        self.lexical_relations: list[LexicalRelation] = []
        self.synset_relations: list[SynsetRelation] = []

    def open_root(self, tag: str, attributes) -> None:
        if self.root_seen:
            raise UnexpectedElementError(tag, f"Duplicate root container <{tag}>")
        meta = binder.bind_fields(tag, attributes, binder.ROOT_FIELDS)
        self.owner = meta["owner"]
        self.date = meta["date"]
        self.version = meta["version"]
        self.root_seen = True

    def require_root(self, tag: str) -> None:
        if not self.root_seen:
            raise MissingRootError(
                f"<{tag}> found before root container <{self.root_tag}>"
            )

    def close(self, context: ParsingContext) -> None:
        """Freeze the children collected while *context* was open."""
        if isinstance(context, InsideSynset):
            synset = self.synsets[context.id]
            self.synsets[context.id] = replace(
                synset, lexical_units=tuple(context.members)
            )
        elif isinstance(context, InsideRelationType):
            relation_type = self.relation_types[context.id]
            self.relation_types[context.id] = replace(
                relation_type, tests=tuple(context.tests)
            )

    def build(self) -> LexicalGraph:
        from plwordnet.graph import LexicalGraph

        return LexicalGraph(
            owner=self.owner,
            date=self.date,
            version=self.version,
            lexical_units=self.lexical_units,
            synsets=self.synsets,
            relation_types=self.relation_types,
            lexical_relations=tuple(self.lexical_relations),
            synset_relations=tuple(self.synset_relations),
        )


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------

def step(
    context: ParsingContext, event: Event, builder: GraphBuilder
) -> ParsingContext:
    """Apply one *event* to *builder* and return the next context."""
    if isinstance(event, StartElement):
        return _on_start(context, event, builder)
    if isinstance(event, EmptyElement):
        return _on_empty(context, event, builder)
    if isinstance(event, Text):
        if isinstance(context, InsideSynset):
            context.members.extend(_parse_member_ids(event.content))
        return context
    if isinstance(event, EndElement):
        if event.tag == TAG_SYNSET and isinstance(context, InsideSynset):
            builder.close(context)
            return IDLE
        if event.tag == TAG_RELATION_TYPE and isinstance(
            context, InsideRelationType
        ):
            builder.close(context)
            return IDLE
        return context
    return context


def _on_start(
    context: ParsingContext, event: StartElement, builder: GraphBuilder
) -> ParsingContext:
    tag = event.tag
    if tag == builder.root_tag:
        builder.open_root(tag, event.attributes)
        return context
    if tag == TAG_UNIT_ID:
        return context

    if tag == TAG_SYNSET:
        builder.require_root(tag)
        _require_idle(context, tag)
        synset = _bind_synset(event)
        builder.synsets[synset.id] = synset
        return InsideSynset(synset.id)

    if tag == TAG_RELATION_TYPE:
        builder.require_root(tag)
        _require_idle(context, tag)
        relation_type = _bind_relation_type(event)
        builder.relation_types[relation_type.id] = relation_type
        return InsideRelationType(relation_type.id)

    raise UnexpectedElementError(tag)


def _on_empty(
    context: ParsingContext, event: EmptyElement, builder: GraphBuilder
) -> ParsingContext:
    tag = event.tag
    attributes = event.attributes
    if tag == builder.root_tag:
        builder.open_root(tag, attributes)
        return context
    if tag == TAG_UNIT_ID:
        return context
    if tag not in _EMPTY_TAGS:
        raise UnexpectedElementError(tag)

    builder.require_root(tag)

    if tag == TAG_LEXICAL_UNIT:
        values = binder.bind_fields(tag, attributes, binder.LEXICAL_UNIT_FIELDS)
        unit = LexicalUnit(**values, language=language_for_pos(values["pos"]))
        builder.lexical_units[unit.id] = unit
    elif tag == TAG_LEXICAL_RELATION:
        builder.lexical_relations.append(
            binder.bind(LexicalRelation, tag, attributes, binder.RELATION_FIELDS)
        )
    elif tag == TAG_SYNSET_RELATION:
        builder.synset_relations.append(
            binder.bind(SynsetRelation, tag, attributes, binder.RELATION_FIELDS)
        )
    elif tag == TAG_SYNSET:
        _require_idle(context, tag)
        synset = _bind_synset(event)
        builder.synsets[synset.id] = synset
    elif tag == TAG_RELATION_TYPE:
        _require_idle(context, tag)
        relation_type = _bind_relation_type(event)
        builder.relation_types[relation_type.id] = relation_type
    elif tag == TAG_RELATION_TYPE_TEST:
        if not isinstance(context, InsideRelationType):
            raise UnexpectedElementError(
                tag, f"<{tag}> outside of <{TAG_RELATION_TYPE}>"
            )
        context.tests.append(
            binder.bind(
                RelationTypeTest, tag, attributes,
                binder.RELATION_TYPE_TEST_FIELDS,
            )
        )
    return context


_EMPTY_TAGS = frozenset({
    TAG_LEXICAL_UNIT,
    TAG_SYNSET,
    TAG_LEXICAL_RELATION,
    TAG_SYNSET_RELATION,
    TAG_RELATION_TYPE,
    TAG_RELATION_TYPE_TEST,
})


def _bind_synset(event: StartElement | EmptyElement) -> Synset:
    return binder.bind(
        Synset, event.tag, event.attributes, binder.SYNSET_FIELDS,
        lexical_units=(),
    )


def _bind_relation_type(event: StartElement | EmptyElement) -> RelationType:
    return binder.bind(
        RelationType, event.tag, event.attributes,
        binder.RELATION_TYPE_FIELDS,
        tests=(),
    )


def _require_idle(context: ParsingContext, tag: str) -> None:
    if not isinstance(context, Idle):
        raise UnexpectedElementError(tag, f"<{tag}> nested inside another container")


def _parse_member_ids(content: str) -> list[int]:
    ids = []
    for token in content.split():
        try:
            ids.append(binder.as_uint(token))
        except ValueError as e:
            raise InvalidAttributeValueError(
                TAG_SYNSET, "lexical_units", token
            ) from e
    return ids


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def parse_events(
    events: Iterable[Event], config: LoaderConfig | None = None
) -> LexicalGraph:
    """Build a :class:`LexicalGraph` from an event sequence.

    Raises:
        MissingRootError: If the root container never appears.
        UnexpectedElementError: On an element no transition accepts.
        InvalidAttributeValueError: On an attribute that fails to parse.
    """
    config = config or LoaderConfig()
    builder = GraphBuilder(config.root_tag)
    context: ParsingContext = IDLE

    count = 0
    for event in events:
        if isinstance(event, Eof):
            break
        context = step(context, event, builder)
        count += 1
        if count % config.progress_interval == 0:
            logger.debug(
                "Processed %d events (%d units, %d synsets)",
                count, len(builder.lexical_units), len(builder.synsets),
            )

    if not builder.root_seen:
        raise MissingRootError(
            f"End of input without root container <{config.root_tag}>"
        )
    builder.close(context)
    return builder.build()


def load(source: Source, config: LoaderConfig | None = None) -> LexicalGraph:
    """Load a plWordNet XML document from a path or binary file object."""
    logger.info("Loading plWordNet from %s", getattr(source, "name", source))
    started = time.perf_counter()
    graph = parse_events(iter_events(source), config)
    meta = graph.get_metadata()
    logger.info(
        "Loaded %d lexical units, %d synsets, %d relation types, "
        "%d lexical relations, %d synset relations in %.2fs",
        meta.lexical_units, meta.synsets, meta.relation_types,
        meta.lexical_relations, meta.synset_relations,
        time.perf_counter() - started,
    )
    return graph
