"""Resolved, cross-referenced projections of stored plWordNet entities.

Views are rebuilt on every call and share string objects with the store, so
they never copy text. Ids that do not resolve are tolerated: optional view
fields become ``None`` and unresolved synset members are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from plwordnet.models import (
    Language,
    LexicalRelation,
    LexicalUnit,
    RelationType,
    Synset,
    SynsetRelation,
    language_for_pos,
)

if TYPE_CHECKING:
    from plwordnet.graph import LexicalGraph


@dataclass(frozen=True, slots=True)
class LexicalUnitView:
    id: int
    name: str
    pos: str
    tagcount: int
    domain: str
    desc: str
    workstate: str
    source: str
    variant: int
    language: Language

    def to_simple(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class SynsetView:
    """A synset together with its resolved member lexical units."""

    id: int
    workstate: str
    split: int
    owner: str
    definition: str
    desc: str
    abstract: bool
    lexical_units: tuple[LexicalUnitView, ...]
    language: Language

    def to_simple(self) -> str:
        return ",".join(unit.to_simple() for unit in self.lexical_units)


@dataclass(frozen=True, slots=True)
class RelationTypeView:
    id: int
    type_: str
    reverse: int
    name: str
    description: str
    posstr: str
    display: str
    shortcut: str
    autoreverse: bool
    pwn: str


@dataclass(frozen=True, slots=True)
class LexicalRelationView:
    parent: LexicalUnitView | None
    child: LexicalUnitView | None
    relation: RelationTypeView | None
    valid: bool
    owner: str


@dataclass(frozen=True, slots=True)
class SynsetRelationView:
    parent: SynsetView | None
    child: SynsetView | None
    relation: RelationTypeView | None
    valid: bool
    owner: str


def lexical_unit_view(unit: LexicalUnit) -> LexicalUnitView:
    # Language is derived again from pos rather than copied from the store.
    return LexicalUnitView(
        id=unit.id,
        name=unit.name,
        pos=unit.pos,
        tagcount=unit.tagcount,
        domain=unit.domain,
        desc=unit.desc,
        workstate=unit.workstate,
        source=unit.source,
        variant=unit.variant,
        language=language_for_pos(unit.pos),
    )


def synset_view(graph: LexicalGraph, synset: Synset) -> SynsetView:
    """Resolve *synset*'s members; its language is that of the first one.

    A synset with no resolvable members is Polish.
    """
    units = graph.lexical_units
    members = tuple(
        lexical_unit_view(units[unit_id])
        for unit_id in synset.lexical_units
        if unit_id in units
    )
    language = members[0].language if members else Language.PL
    return SynsetView(
        id=synset.id,
        workstate=synset.workstate,
        split=synset.split,
        owner=synset.owner,
        definition=synset.definition,
        desc=synset.desc,
        abstract=synset.abstract,
        lexical_units=members,
        language=language,
    )


def relation_type_view(relation_type: RelationType) -> RelationTypeView:
    return RelationTypeView(
        id=relation_type.id,
        type_=relation_type.type_,
        reverse=relation_type.reverse,
        name=relation_type.name,
        description=relation_type.description,
        posstr=relation_type.posstr,
        display=relation_type.display,
        shortcut=relation_type.shortcut,
        autoreverse=relation_type.autoreverse,
        pwn=relation_type.pwn,
    )


def lexical_relation_view(
    graph: LexicalGraph, relation: LexicalRelation
) -> LexicalRelationView:
    return LexicalRelationView(
        parent=graph.get_lexical_unit(relation.parent),
        child=graph.get_lexical_unit(relation.child),
        relation=graph.get_relation_type(relation.relation),
        valid=relation.valid,
        owner=relation.owner,
    )


def synset_relation_view(
    graph: LexicalGraph, relation: SynsetRelation
) -> SynsetRelationView:
    return SynsetRelationView(
        parent=graph.get_synset(relation.parent),
        child=graph.get_synset(relation.child),
        relation=graph.get_relation_type(relation.relation),
        valid=relation.valid,
        owner=relation.owner,
    )
