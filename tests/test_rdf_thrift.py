import io

import pytest
from rdflib import Graph
from rdflib.namespace import XSD

pytest.importorskip("thrift")

from thrift.protocol.TCompactProtocol import TCompactProtocol  # noqa: E402
from thrift.Thrift import TType  # noqa: E402
from thrift.transport.TTransport import TFileObjectTransport  # noqa: E402

from sdfconv.adapters import register_rdf_thrift  # noqa: E402
from sdfconv.models import Atom, Molecule  # noqa: E402
from sdfconv.renderers import GraphRenderer  # noqa: E402
from sdfconv.renderers.rdf import SCHEMA  # noqa: E402


@pytest.fixture
def graph():
    mol = Molecule()
    mol.add_atom(Atom("O", 0.5, -1.0, 0.0))
    mol.add_property("ChEBI Name", "water")
    mol.add_property("Wikipedia Database Links", "https://en.wikipedia.org/wiki/Water")
    g = Graph()
    GraphRenderer(g).render(mol, 1, io.StringIO())
    return g


def read_struct(protocol):
    """Decode a Thrift struct into a dict of field id to value."""
    fields = {}
    protocol.readStructBegin()
    while True:
        _, field_type, field_id = protocol.readFieldBegin()
        if field_type == TType.STOP:
            break
        if field_type == TType.STRUCT:
            fields[field_id] = read_struct(protocol)
        elif field_type == TType.STRING:
            fields[field_id] = protocol.readString()
        else:
            protocol.skip(field_type)
        protocol.readFieldEnd()
    protocol.readStructEnd()
    return fields


def serialize_rows(graph):
    register_rdf_thrift()
    buffer = io.BytesIO()
    graph.serialize(destination=buffer, format="rdfthrift")
    data = buffer.getvalue()

    source = io.BytesIO(data)
    protocol = TCompactProtocol(TFileObjectTransport(source))
    rows = []
    while source.tell() < len(data):
        rows.append(read_struct(protocol))
    return rows


def test_prefix_rows_then_triple_rows(graph):
    rows = serialize_rows(graph)
    prefixes = [row[1] for row in rows if 1 in row]
    triples = [row[2] for row in rows if 2 in row]

    assert {1: "schema", 2: "https://schema.org/"} in prefixes
    assert len(triples) == len(graph)

    first_triple = next(i for i, row in enumerate(rows) if 2 in row)
    assert all(1 in row for row in rows[:first_triple])
    assert all(2 in row for row in rows[first_triple:])


def test_term_encoding(graph):
    triples = [row[2] for row in serialize_rows(graph) if 2 in row]

    same_as = next(t for t in triples if t[2] == {1: {1: str(SCHEMA.sameAs)}})
    assert 2 in same_as[1]
    assert same_as[3] == {1: {1: "https://en.wikipedia.org/wiki/Water"}}

    typed = [t for t in triples if 3 in t[3] and 3 in t[3][3]]
    assert len(typed) == 3
    assert all(t[3][3][3] == str(XSD.double) for t in typed)

    assert any(t[3] == {3: {1: "water"}} for t in triples)


def test_empty_graph_has_no_triple_rows():
    register_rdf_thrift()
    rows = serialize_rows(Graph())
    assert [row for row in rows if 2 in row] == []


if __name__ == "__main__":
    pytest.main([__file__])
