"""LexicalGraph: the loaded, read-only plWordNet resource and its queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from plwordnet import views
from plwordnet.models import (
    Language,
    LexicalRelation,
    LexicalUnit,
    Metadata,
    RelationType,
    Synset,
    SynsetRelation,
)
from plwordnet.views import (
    LexicalRelationView,
    LexicalUnitView,
    RelationTypeView,
    SynsetRelationView,
    SynsetView,
)

if TYPE_CHECKING:
    from plwordnet.config import LoaderConfig
    from plwordnet.events import Source


@dataclass(frozen=True, slots=True, eq=False)
class LexicalGraph:
    """The whole plWordNet graph, immutable once loaded.

    Node-like entities are keyed by id in insertion (document) order; edge
    lists keep document order and duplicates. Ids stored inside entities are
    resolved only when a view is requested.

    Example::

        graph = LexicalGraph.from_file("plwordnet_4_2.xml")
        synset = graph.get_synset(100)
        print(synset.language, synset.to_simple())
    """

    owner: str
    date: str
    version: str
    lexical_units: Mapping[int, LexicalUnit] = field(repr=False)
    synsets: Mapping[int, Synset] = field(repr=False)
    relation_types: Mapping[int, RelationType] = field(repr=False)
    lexical_relations: tuple[LexicalRelation, ...] = field(repr=False)
    synset_relations: tuple[SynsetRelation, ...] = field(repr=False)

    def __post_init__(self) -> None:
        # Own copies, so later changes to the caller's dicts never show through.
        for name in ("lexical_units", "synsets", "relation_types"):
            value = dict(getattr(self, name))
            object.__setattr__(self, name, MappingProxyType(value))
        for name in ("lexical_relations", "synset_relations"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @classmethod
    def from_file(
        cls, source: Source, config: LoaderConfig | None = None
    ) -> LexicalGraph:
        """Parse a plWordNet XML document in a single streaming pass."""
        from plwordnet.parser import load

        return load(source, config)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def get_metadata(self) -> Metadata:
        return Metadata(
            owner=self.owner,
            date=self.date,
            version=self.version,
            lexical_units=len(self.lexical_units),
            synsets=len(self.synsets),
            relation_types=len(self.relation_types),
            lexical_relations=len(self.lexical_relations),
            synset_relations=len(self.synset_relations),
        )

    # ------------------------------------------------------------------
    # Lookup by id
    # ------------------------------------------------------------------

    def get_lexical_unit(self, unit_id: int) -> LexicalUnitView | None:
        unit = self.lexical_units.get(unit_id)
        return views.lexical_unit_view(unit) if unit is not None else None

    def get_synset(self, synset_id: int) -> SynsetView | None:
        synset = self.synsets.get(synset_id)
        return views.synset_view(self, synset) if synset is not None else None

    def get_relation_type(self, relation_id: int) -> RelationTypeView | None:
        relation_type = self.relation_types.get(relation_id)
        if relation_type is None:
            return None
        return views.relation_type_view(relation_type)

    # ------------------------------------------------------------------
    # Full iteration
    # ------------------------------------------------------------------

    def iter_lexical_units(self) -> Iterator[LexicalUnitView]:
        for unit in self.lexical_units.values():
            yield views.lexical_unit_view(unit)

    def iter_synsets(self) -> Iterator[SynsetView]:
        for synset in self.synsets.values():
            yield views.synset_view(self, synset)

    def iter_relation_types(self) -> Iterator[RelationTypeView]:
        for relation_type in self.relation_types.values():
            yield views.relation_type_view(relation_type)

    def iter_lexical_relations(self) -> Iterator[LexicalRelationView]:
        for relation in self.lexical_relations:
            yield views.lexical_relation_view(self, relation)

    def iter_synset_relations(self) -> Iterator[SynsetRelationView]:
        for relation in self.synset_relations:
            yield views.synset_relation_view(self, relation)

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def _is_polish(self, unit_id: int) -> bool:
        unit = self.lexical_units.get(unit_id)
        return unit is not None and unit.language is Language.PL

    def filter_synsets_by_lang(self, lang: Language) -> Iterator[Synset]:
        """Yield synsets of *lang*.

        A synset is Polish iff every member id names a Polish lexical unit;
        every other synset is English. Unlike :attr:`SynsetView.language`,
        this looks at all members, not just the first.
        """
        want_polish = Language(lang) is Language.PL
        for synset in self.synsets.values():
            polish = all(self._is_polish(i) for i in synset.lexical_units)
            if polish == want_polish:
                yield synset

    def synset_relations_by_id(self, relation_id: int) -> Iterator[SynsetRelation]:
        return (r for r in self.synset_relations if r.relation == relation_id)

    def lexical_relations_by_id(
        self, relation_id: int
    ) -> Iterator[LexicalRelation]:
        return (r for r in self.lexical_relations if r.relation == relation_id)

    def lexical_units_for_synset(self, synset_id: int) -> Iterator[LexicalUnitView]:
        synset = self.synsets.get(synset_id)
        if synset is None:
            return
        for unit_id in synset.lexical_units:
            unit = self.lexical_units.get(unit_id)
            if unit is not None:
                yield views.lexical_unit_view(unit)

    def lexical_units_for_synsets(
        self, synset_ids: Iterable[int]
    ) -> Iterator[LexicalUnitView]:
        for synset_id in synset_ids:
            yield from self.lexical_units_for_synset(synset_id)

    # ------------------------------------------------------------------
    # Simple rendering
    # ------------------------------------------------------------------

    def synset_to_simple(self, synset_id: int) -> str:
        """Comma-joined names of the synset's resolvable members."""
        return ",".join(u.to_simple() for u in self.lexical_units_for_synset(synset_id))

    def synsets_to_simple(self, synset_ids: Iterable[int]) -> str:
        return ",".join(self.synset_to_simple(i) for i in synset_ids)
