"""Tests for the streaming loader and its state machine."""

import io

import pytest

from plwordnet import (
    InvalidAttributeValueError,
    Language,
    LexicalGraph,
    LoaderConfig,
    MalformedXmlError,
    MissingRootError,
    UnexpectedElementError,
    load,
    parse_events,
)
from plwordnet.events import EOF, EmptyElement, EndElement, StartElement, Text
from plwordnet.models import RelationTypeTest, SynsetRelation
from plwordnet.parser import (
    IDLE,
    GraphBuilder,
    InsideRelationType,
    InsideSynset,
    step,
)


class TestSampleDocument:
    def test_counts(self, graph):
        meta = graph.get_metadata()
        assert meta.owner == "PWr"
        assert meta.date == "2023-01-01"
        assert meta.version == "4.2"
        assert meta.lexical_units == 4
        assert meta.synsets == 4
        assert meta.relation_types == 3
        assert meta.lexical_relations == 2
        assert meta.synset_relations == 5

    def test_lexical_unit_fields(self, graph):
        unit = graph.lexical_units[1]
        assert unit.name == "kot"
        assert unit.pos == "rzeczownik"
        assert unit.tagcount == 12
        assert unit.source == "użytkownika"
        assert unit.variant == 1
        assert unit.language is Language.PL

    def test_language_derived_from_pos(self, graph):
        for unit in graph.lexical_units.values():
            expected = Language.EN if unit.pos.endswith(" pwn") else Language.PL
            assert unit.language is expected
        assert graph.lexical_units[2].language is Language.EN

    def test_language_attribute_ignored(self, write_xml, document):
        body = '<lexical-unit id="1" pos="noun" language="en"/>'
        graph = load(write_xml(document(body)))
        assert graph.lexical_units[1].language is Language.PL

    def test_missing_tagcount_defaults_to_zero(self, graph):
        assert graph.lexical_units[3].tagcount == 0
        assert graph.lexical_units[3].desc == ""

    def test_synset_members_in_document_order(self, graph):
        assert graph.synsets[100].lexical_units == (1, 2)
        assert graph.synsets[102].lexical_units == (4, 777)
        assert graph.synsets[103].lexical_units == ()

    def test_synset_flags(self, graph):
        assert graph.synsets[101].abstract is True
        assert graph.synsets[100].abstract is False
        assert graph.synsets[100].definition == "domowy kot"

    def test_relation_type_tests(self, graph):
        relation_type = graph.relation_types[10]
        assert relation_type.type_ == "relacja synsetów"
        assert relation_type.reverse == 11
        assert relation_type.display == "<x#> jest hiperonimem <y#>"
        assert relation_type.tests == (
            RelationTypeTest("<x#> to <y#>", "rzeczownik"),
            RelationTypeTest("<x#> jest rodzajem <y#>", "rzeczownik"),
        )

    def test_self_closing_relation_type(self, graph):
        assert graph.relation_types[11].tests == ()
        assert graph.relation_types[11].autoreverse is True
        assert graph.relation_types[20].reverse == 0

    def test_edges_keep_order_and_duplicates(self, graph):
        assert [r.child for r in graph.synset_relations] == [101, 100, 999, 101, 100]
        assert graph.synset_relations[0] == graph.synset_relations[3]
        assert graph.synset_relations[4].valid is False

    def test_map_keys_match_ids(self, graph):
        for mapping in (graph.lexical_units, graph.synsets, graph.relation_types):
            for key, value in mapping.items():
                assert key == value.id

    def test_collections_read_only(self, graph):
        with pytest.raises(TypeError):
            graph.synsets[1] = None
        with pytest.raises(AttributeError):
            graph.synset_relations.append(None)


class TestSynsetText:
    def test_bare_text_members(self, write_xml, document):
        path = write_xml(document('<synset id="100">1 2</synset>'))
        graph = load(path)
        assert graph.synsets[100].lexical_units == (1, 2)

    def test_mixed_wrapped_and_bare(self, write_xml, document):
        body = '<synset id="5">\n  3\n  <unit-id>1</unit-id>\n  <unit-id>1</unit-id>\n</synset>'
        graph = load(write_xml(document(body)))
        assert graph.synsets[5].lexical_units == (3, 1, 1)

    def test_empty_synset(self, write_xml, document):
        body = '<synset id="5"></synset><synset id="6" abstract="true"/>'
        graph = load(write_xml(document(body)))
        assert graph.synsets[5].lexical_units == ()
        assert graph.synsets[6].abstract is True

    def test_non_numeric_member(self, write_xml, document):
        path = write_xml(document('<synset id="5"><unit-id>abc</unit-id></synset>'))
        with pytest.raises(InvalidAttributeValueError) as exc_info:
            load(path)
        assert exc_info.value.raw_value == "abc"

    def test_comment_splits_members(self, write_xml, document):
        body = '<synset id="1">1<!-- c -->2<?pi x?>3</synset>'
        graph = load(write_xml(document(body)))
        assert graph.synsets[1].lexical_units == (1, 2, 3)

    def test_comment_only_synset(self, write_xml, document):
        graph = load(write_xml(document('<synset id="1"><!-- none --></synset>')))
        assert graph.synsets[1].lexical_units == ()

    def test_text_outside_synset_ignored(self, write_xml, document):
        body = 'stray 12 <relationtypes id="1">text</relationtypes>'
        graph = load(write_xml(document(body)))
        assert graph.relation_types[1].tests == ()


class TestErrors:
    def test_invalid_tagcount_aborts(self, write_xml, document):
        body = '<lexical-unit id="1" name="kot" pos="noun" tagcount="not-a-number"/>'
        with pytest.raises(InvalidAttributeValueError) as exc_info:
            load(write_xml(document(body)))
        assert exc_info.value.field == "tagcount"

    def test_invalid_id(self, write_xml, document):
        body = '<synsetrelations parent="-1" child="2" relation="3"/>'
        with pytest.raises(InvalidAttributeValueError):
            load(write_xml(document(body)))

    def test_test_outside_relation_type(self, write_xml, document):
        body = '<synset id="1"><test text="x" pos="y"/></synset>'
        with pytest.raises(UnexpectedElementError) as exc_info:
            load(write_xml(document(body)))
        assert exc_info.value.tag == "test"

    def test_unknown_element(self, write_xml, document):
        with pytest.raises(UnexpectedElementError) as exc_info:
            load(write_xml(document("<something/>")))
        assert exc_info.value.tag == "something"

    def test_unknown_root(self, write_xml):
        with pytest.raises(UnexpectedElementError):
            load(write_xml('<wordnet><lexical-unit id="1"/></wordnet>'))

    def test_nested_synset(self, write_xml, document):
        body = '<synset id="1"><synset id="2"></synset></synset>'
        with pytest.raises(UnexpectedElementError):
            load(write_xml(document(body)))

    def test_entity_before_root(self):
        events = [EmptyElement("lexical-unit", {"id": "1"}), EOF]
        with pytest.raises(MissingRootError):
            parse_events(events)

    def test_eof_without_root(self):
        with pytest.raises(MissingRootError):
            parse_events([EOF])

    def test_duplicate_root(self):
        events = [StartElement("array-list", {}), StartElement("array-list", {})]
        with pytest.raises(UnexpectedElementError):
            parse_events(events)

    def test_malformed_xml(self, write_xml):
        with pytest.raises(MalformedXmlError):
            load(write_xml('<array-list><synset id="1"></array-list>'))


class TestStep:
    def test_synset_context(self):
        builder = GraphBuilder()
        builder.open_root("array-list", {})
        ctx = step(IDLE, StartElement("synset", {"id": "7"}), builder)
        assert isinstance(ctx, InsideSynset)
        assert ctx.id == 7

        ctx = step(ctx, Text(" 4\n 5 "), builder)
        assert ctx.members == [4, 5]
        assert builder.synsets[7].lexical_units == ()

        ctx = step(ctx, EndElement("synset"), builder)
        assert ctx is IDLE
        assert builder.synsets[7].lexical_units == (4, 5)

    def test_relation_type_context(self):
        builder = GraphBuilder()
        builder.open_root("array-list", {})
        ctx = step(IDLE, StartElement("relationtypes", {"id": "3"}), builder)
        assert isinstance(ctx, InsideRelationType)
        ctx = step(ctx, EmptyElement("test", {"text": "t", "pos": "p"}), builder)
        ctx = step(ctx, EndElement("relationtypes"), builder)
        assert ctx is IDLE
        assert builder.relation_types[3].tests == (RelationTypeTest("t", "p"),)

    def test_empty_relation_type_keeps_idle(self):
        builder = GraphBuilder()
        builder.open_root("array-list", {})
        ctx = step(IDLE, EmptyElement("relationtypes", {"id": "3"}), builder)
        assert ctx is IDLE
        assert 3 in builder.relation_types

    def test_edge_appended(self):
        builder = GraphBuilder()
        builder.open_root("array-list", {})
        attrs = {"parent": "1", "child": "2", "relation": "9", "valid": "true", "owner": "x"}
        step(IDLE, EmptyElement("synsetrelations", attrs), builder)
        assert builder.synset_relations == [SynsetRelation(1, 2, 9, True, "x")]

    def test_parse_events_without_eof(self):
        events = [
            StartElement("array-list", {"owner": "o"}),
            EmptyElement("lexical-unit", {"id": "1", "pos": "noun pwn"}),
            EndElement("array-list"),
        ]
        graph = parse_events(events)
        assert graph.owner == "o"
        assert graph.lexical_units[1].language is Language.EN


class TestConfig:
    def test_custom_root_tag(self, write_xml, document):
        path = write_xml(document('<lexical-unit id="1"/>', root="plwordnet"))
        graph = load(path, LoaderConfig(root_tag="plwordnet"))
        assert list(graph.lexical_units) == [1]

    def test_from_file_object(self):
        xml = b'<array-list owner="o"><lexical-unit id="9" name="x"/></array-list>'
        graph = LexicalGraph.from_file(io.BytesIO(xml))
        assert graph.lexical_units[9].name == "x"

    def test_progress_logging(self, sample_path, caplog):
        with caplog.at_level("DEBUG", logger="plwordnet.parser"):
            load(sample_path, LoaderConfig(progress_interval=5))
        assert any("Processed" in r.getMessage() for r in caplog.records)
        assert any("Loaded 4 lexical units" in r.getMessage() for r in caplog.records)


class TestBuilderIsolation:
    def test_builder_changes_after_build_not_visible(self):
        builder = GraphBuilder()
        builder.open_root("array-list", {})
        graph = builder.build()
        step(IDLE, EmptyElement("lexical-unit", {"id": "5"}), builder)
        assert 5 in builder.lexical_units
        assert len(graph.lexical_units) == 0
