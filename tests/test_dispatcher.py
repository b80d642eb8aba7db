import io
import json

import pytest
from rdflib import Graph, Literal, URIRef
from rdflib.namespace import RDF

from sdfconv.adapters import THRIFT_AVAILABLE
from sdfconv.config import ConversionConfig
from sdfconv.dispatcher import DispatcherState, FormatDispatcher, build_renderer, convert
from sdfconv.formats import OutputFormat
from sdfconv.io import PeriodicTable
from sdfconv.renderers import CypherRenderer, GraphRenderer, JsonLdHtmlRenderer, RDFaRenderer
from sdfconv.renderers.rdf import SCHEMA


def run(path, output_format, **kwargs):
    out = io.StringIO()
    count = convert(ConversionConfig(path, output_format, **kwargs), out)
    return count, out.getvalue()


class TestSingleRecordScenario:
    def test_cypher(self, three_atoms_path):
        count, text = run(three_atoms_path, OutputFormat.CYPHER)
        lines = text.splitlines()

        assert count == 1
        assert lines[0] == "CREATE (m:Molecule {`Formula`: 'C6H6'})"
        assert len([line for line in lines if ":Atom" in line]) == 3
        assert len([line for line in lines if ":BOND" in line]) == 2
        assert lines.count(";") == 1

    def test_cvme(self, three_atoms_path):
        count, text = run(three_atoms_path, OutputFormat.CVME)
        assert count == 1
        assert text.count("molecule m1 (") == 1
        assert text.count("structure m1 (") == 1
        assert text.count("  atom a") == 3
        assert text.count("  bond a") == 2


class TestTextModes:
    def test_cvme_always_expands_urls(self, chebi_path):
        _, text = run(chebi_path, OutputFormat.CVME)
        assert "'ChEBI ID' : 'https://www.ebi.ac.uk/chebi/searchId.do?chebiId=1234'" in text
        assert "'PubChem Database Molecule Links' : 'https://pubchem.ncbi.nlm.nih.gov/compound/962'" in text
        assert "molecule m2 (" in text

    def test_cypher_without_expansion_keeps_raw_values(self, chebi_path):
        _, text = run(chebi_path, OutputFormat.CYPHER)
        assert "`ChEBI ID`: 'CHEBI:1234'" in text
        assert text.count("CREATE (m:Molecule") == 2

    def test_cypher_with_expansion(self, chebi_path):
        _, text = run(chebi_path, OutputFormat.CYPHER, expand_urls=True)
        assert "`ChEBI ID`: 'https://www.ebi.ac.uk/chebi/searchId.do?chebiId=1234'" in text

    def test_cypher_periodic_enrichment(self, three_atoms_path):
        _, text = run(three_atoms_path, OutputFormat.CYPHER, periodic=True)
        assert "name: 'Carbon', number: 6" in text

    def test_periodic_ignored_for_other_modes(self, three_atoms_path, caplog):
        _, text = run(three_atoms_path, OutputFormat.RDFA, periodic=True)
        assert "Carbon" not in text
        assert "--periodic has no effect" in caplog.text

    def test_rdfa_framing_written_once(self, chebi_path):
        count, text = run(chebi_path, OutputFormat.RDFA)
        assert count == 2
        assert text.count("<!DOCTYPE html>") == 1
        assert text.count("</html>") == 1
        assert text.count("typeof='MolecularEntity'") == 2

    def test_microdata(self, chebi_path):
        _, text = run(chebi_path, OutputFormat.MICRODATA)
        assert text.count("itemtype='https://schema.org/MolecularEntity'") == 2


class TestGraphModes:
    def test_turtle_single_flush(self, chebi_path):
        count, text = run(chebi_path, OutputFormat.TURTLE)
        assert count == 2
        assert text.count("@prefix schema:") == 1

        graph = Graph().parse(data=text, format="turtle")
        assert len(list(graph.subjects(predicate=None, object=SCHEMA.MolecularEntity))) == 2

    def test_ntriples(self, three_atoms_path):
        _, text = run(three_atoms_path, OutputFormat.NTRIPLES)
        lines = [line for line in text.splitlines() if line.strip()]
        assert all(line.endswith(" .") for line in lines)
        assert len(Graph().parse(data=text, format="nt")) == len(lines)

    def test_jsonld(self, three_atoms_path):
        _, text = run(three_atoms_path, OutputFormat.JSONLD)
        assert isinstance(json.loads(text), (list, dict))

    def test_jsonld_html(self, three_atoms_path):
        _, text = run(three_atoms_path, OutputFormat.JSONLD_HTML)
        head, rest = text.split('<script type="application/ld+json">\n', 1)
        payload, tail = rest.split("    </script>", 1)

        assert head.startswith("<!DOCTYPE html>")
        assert isinstance(json.loads(payload), (list, dict))
        assert tail.strip().endswith("</html>")

    def test_rdfxml(self, three_atoms_path):
        _, text = run(three_atoms_path, OutputFormat.RDFXML)
        assert len(Graph().parse(data=text, format="xml")) > 0

    @pytest.mark.skipif(not THRIFT_AVAILABLE, reason="thrift is not installed")
    def test_rdfthrift_writes_bytes(self, three_atoms_path):
        raw = io.BytesIO()
        out = io.TextIOWrapper(raw, encoding="utf-8")
        count = convert(ConversionConfig(three_atoms_path, OutputFormat.RDFTHRIFT), out)
        out.flush()
        assert count == 1
        assert raw.getvalue()
        assert b"https://schema.org/" in raw.getvalue()

    @pytest.mark.skipif(THRIFT_AVAILABLE, reason="thrift is installed")
    def test_rdfthrift_requires_thrift(self, three_atoms_path):
        with pytest.raises(ImportError, match="pip install thrift"):
            run(three_atoms_path, OutputFormat.RDFTHRIFT)


class TestFormatDispatcher:
    def test_from_config_builds_renderer(self):
        out = io.StringIO()
        dispatcher = FormatDispatcher.from_config(ConversionConfig("-", "jsonldhtml"), out)
        assert isinstance(dispatcher.renderer, JsonLdHtmlRenderer)
        assert isinstance(dispatcher.graph, Graph)

        dispatcher = FormatDispatcher.from_config(ConversionConfig("-", "rdfa"), out)
        assert isinstance(dispatcher.renderer, RDFaRenderer)
        assert dispatcher.graph is None

    def test_supplied_periodic_table_is_used(self):
        table = PeriodicTable({"C": {"name": "Carbon"}})
        config = ConversionConfig("-", OutputFormat.CYPHER, periodic=True)
        dispatcher = FormatDispatcher.from_config(config, io.StringIO(), periodic_table=table)
        assert dispatcher.renderer.periodic_table is table

    def test_graph_mode_requires_graph(self):
        with pytest.raises(ValueError):
            FormatDispatcher(OutputFormat.TURTLE, io.StringIO(), CypherRenderer())
        with pytest.raises(ValueError):
            build_renderer(OutputFormat.TURTLE)

    def test_build_renderer_for_graph_mode(self):
        assert isinstance(build_renderer(OutputFormat.NTRIPLES, Graph()), GraphRenderer)

    def test_states(self, three_atoms_path):
        out = io.StringIO()
        dispatcher = FormatDispatcher(OutputFormat.CYPHER, out, CypherRenderer())
        assert dispatcher.state is DispatcherState.PREAMBLE

        seen = []
        render = dispatcher.renderer.render

        def spy(molecule, index, stream):
            seen.append(dispatcher.state)
            render(molecule, index, stream)

        dispatcher.renderer.render = spy
        with open(three_atoms_path, encoding="utf-8") as handle:
            assert dispatcher.run(handle) == 1

        assert seen == [DispatcherState.RENDERING]
        assert dispatcher.state is DispatcherState.POSTAMBLE
        assert dispatcher.molecule.is_empty

    def test_empty_input(self):
        out = io.StringIO()
        dispatcher = FormatDispatcher(OutputFormat.RDFA, out, RDFaRenderer())
        assert dispatcher.run([]) == 0
        assert out.getvalue().startswith("<!DOCTYPE html>")


class TestBadBondRecovery:
    def test_cvme_renders_following_record(self, bad_bond_path, caplog):
        count, text = run(bad_bond_path, OutputFormat.CVME)
        assert count == 2
        assert text.count("molecule m") == 2
        assert "structure m2 (" in text
        assert text.count("  bond a") == 1
        assert "skipping bond row" in caplog.text

    def test_cypher_renders_following_record(self, bad_bond_path):
        count, text = run(bad_bond_path, OutputFormat.CYPHER)
        assert count == 2
        assert "`Name`: 'second'" in text
        assert text.count(":BOND") == 1


class TestEscapedValues:
    NAME = "O\\'Brien \\\\ co"
    WIKIPEDIA = "https://en.wikipedia.org/wiki/Alzheimer\\'s_disease"

    def test_cvme(self, quoted_values_path):
        _, text = run(quoted_values_path, OutputFormat.CVME)
        assert text.count(f"'Name' : '{self.NAME}'") == 1
        assert f"'Wikipedia Database Links' : '{self.WIKIPEDIA}'" in text

    def test_cypher(self, quoted_values_path):
        _, text = run(quoted_values_path, OutputFormat.CYPHER)
        assert text.count(f"`Name`: '{self.NAME}'") == 1

    def test_rdfa(self, quoted_values_path):
        _, text = run(quoted_values_path, OutputFormat.RDFA, expand_urls=True)
        assert text.count(f"<span property='name'>{self.NAME}</span>") == 1
        assert (
            "<a property='sameAs' href='https://en.wikipedia.org/wiki/Alzheimer&#x27;s_disease'>"
            f"{self.WIKIPEDIA}</a>" in text
        )
        assert "href='http://example.org/some%20page'" in text

    def test_microdata(self, quoted_values_path):
        _, text = run(quoted_values_path, OutputFormat.MICRODATA, expand_urls=True)
        assert text.count(f"<span itemprop='name'>{self.NAME}</span>") == 1
        assert "href='http://example.org/some%20page'" in text

    @pytest.mark.parametrize(
        "output_format, rdf_format",
        [(OutputFormat.TURTLE, "turtle"), (OutputFormat.NTRIPLES, "nt")],
    )
    def test_graph_links_serialize(self, quoted_values_path, output_format, rdf_format):
        count, text = run(quoted_values_path, output_format, expand_urls=True)
        assert count == 1

        graph = Graph().parse(data=text, format=rdf_format)
        assert set(graph.objects(None, SCHEMA.sameAs)) == {
            URIRef("https://en.wikipedia.org/wiki/Alzheimer's_disease"),
            URIRef("http://example.org/some%20page"),
        }
        entity = graph.value(None, RDF.type, SCHEMA.MolecularEntity)
        assert graph.value(entity, SCHEMA.name) == Literal(self.NAME)


def test_convert_reads_stdin(three_atoms_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(three_atoms_path.read_text()))
    out = io.StringIO()
    assert convert(ConversionConfig("-", OutputFormat.CYPHER), out) == 1
    assert out.getvalue().startswith("CREATE (m:Molecule")


def test_convert_missing_input(tmp_path):
    with pytest.raises(OSError):
        convert(ConversionConfig(tmp_path / "missing.sdf", OutputFormat.CYPHER), io.StringIO())


if __name__ == "__main__":
    pytest.main([__file__])
