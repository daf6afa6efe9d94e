"""Shared test fixtures for plwordnet."""

import pytest

from plwordnet import LexicalGraph

SAMPLE_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<array-list owner="PWr" date="2023-01-01" version="4.2">
  <lexical-unit id="1" name="kot" pos="rzeczownik" tagcount="12" domain="zw" desc="" workstate="Sprawdzone" source="użytkownika" variant="1"/>
  <lexical-unit id="2" name="cat" pos="rzeczownik pwn" tagcount="3" domain="zw" desc="feline" workstate="Sprawdzone" source="PWN" variant="1"/>
  <lexical-unit id="3" name="pies" pos="rzeczownik" domain="zw" workstate="Sprawdzone" source="" variant="2"/>
  <lexical-unit id="4" name="dog" pos="rzeczownik pwn" tagcount="0" domain="zw" variant="1"/>
  <synset id="100" workstate="Sprawdzone" split="1" owner="ann" definition="domowy kot" desc="" abstract="false">
    <unit-id>1</unit-id>
    <unit-id>2</unit-id>
  </synset>
  <synset id="101" workstate="Sprawdzone" split="1" owner="ann" definition="" desc="" abstract="true">
    <unit-id>3</unit-id>
  </synset>
  <synset id="102" workstate="Nie przetworzone" split="0" owner="" definition="" desc="" abstract="false">
    <unit-id>4</unit-id>
    <unit-id>777</unit-id>
  </synset>
  <synset id="103" workstate="" split="0" owner="" definition="" desc="" abstract="false">
  </synset>
  <relationtypes id="10" type="relacja synsetów" reverse="11" name="hiperonimia" description="nadrzędność" posstr="rzeczownik" display="&lt;x#&gt; jest hiperonimem &lt;y#&gt;" shortcut="hiper" autoreverse="false" pwn="@">
    <test text="&lt;x#&gt; to &lt;y#&gt;" pos="rzeczownik"/>
    <test text="&lt;x#&gt; jest rodzajem &lt;y#&gt;" pos="rzeczownik"/>
  </relationtypes>
  <relationtypes id="11" type="relacja synsetów" reverse="10" name="hiponimia" description="" posstr="" display="" shortcut="hipo" autoreverse="true" pwn="~"/>
  <relationtypes id="20" type="relacja leksykalna" name="antonimia" shortcut="ant" autoreverse="true"/>
  <lexicalrelations parent="1" child="3" relation="20" valid="true" owner="ann"/>
  <lexicalrelations parent="1" child="999" relation="20" valid="false" owner="bob"/>
  <synsetrelations parent="100" child="101" relation="10" valid="true" owner="ann"/>
  <synsetrelations parent="101" child="100" relation="11" valid="true" owner="ann"/>
  <synsetrelations parent="100" child="999" relation="10" valid="true" owner="x"/>
  <synsetrelations parent="100" child="101" relation="10" valid="true" owner="ann"/>
  <synsetrelations parent="102" child="100" relation="42" valid="yes" owner=""/>
</array-list>
"""


def build_document(body: str, root: str = "array-list") -> str:
    """Wrap *body* in a root container element."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<{root} owner="o" date="d" version="v">\n{body}\n</{root}>\n'
    )


@pytest.fixture
def write_xml(tmp_path):
    """Write XML text to a temporary file and return its path."""
    counter = iter(range(1_000_000))

    def _write(content: str):
        path = tmp_path / f"wordnet_{next(counter)}.xml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_path(write_xml):
    return write_xml(SAMPLE_XML)


@pytest.fixture
def graph(sample_path):
    """Graph loaded from SAMPLE_XML."""
    return LexicalGraph.from_file(sample_path)


@pytest.fixture
def document():
    """Return the helper that wraps a body in a root container."""
    return build_document
