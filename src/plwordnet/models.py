"""Domain model dataclasses and enums for plwordnet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

# Part-of-speech tags of Princeton WordNet entries carry this suffix.
PWN_POS_SUFFIX = " pwn"


class Language(str, Enum):
    """Language of a lexical unit or synset."""

    PL = "pl"
    EN = "en"

    @property
    def display_name(self) -> str:
        return "Polish" if self is Language.PL else "English"

    def __str__(self) -> str:
        return self.display_name


def language_for_pos(pos: str) -> Language:
    """English iff *pos* ends with the literal ``" pwn"`` suffix."""
    return Language.EN if pos.endswith(PWN_POS_SUFFIX) else Language.PL


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LexicalUnit:
    """A single word sense (word form + part of speech + sense metadata)."""

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


@dataclass(frozen=True, slots=True)
class Synset:
    """A set of synonymous lexical units, referenced by id."""

    id: int
    workstate: str
    split: int
    owner: str
    definition: str
    desc: str
    abstract: bool
    lexical_units: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class RelationTypeTest:
    """A test phrase attached to a relation type."""

    text: str
    pos: str


@dataclass(frozen=True, slots=True)
class RelationType:
    """A named kind of lexical or synset relation."""

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
    tests: tuple[RelationTypeTest, ...]


@dataclass(frozen=True, slots=True)
class LexicalRelation:
    """A directed, typed edge between two lexical units."""

    parent: int
    child: int
    relation: int
    valid: bool
    owner: str


@dataclass(frozen=True, slots=True)
class SynsetRelation:
    """A directed, typed edge between two synsets."""

    parent: int
    child: int
    relation: int
    valid: bool
    owner: str


@dataclass(frozen=True, slots=True)
class Metadata:
    """Header fields of a loaded graph plus collection sizes."""

    owner: str
    date: str
    version: str
    lexical_units: int
    synsets: int
    relation_types: int
    lexical_relations: int
    synset_relations: int
