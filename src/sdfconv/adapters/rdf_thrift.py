"""rdflib serializer plugin writing the RDF Thrift binary encoding.

The stream is a sequence of ``RDF_StreamRow`` unions in the Thrift compact
protocol: one ``prefixDecl`` row per bound namespace, then one ``triple``
row per statement. Field ids follow the RDF Thrift IDL.
"""

from typing import IO, Any, Callable, Iterable, Optional, Tuple

from rdflib import BNode, Literal, URIRef, plugin
from rdflib.namespace import XSD
from rdflib.serializer import Serializer
from rdflib.term import Node

try:
    from thrift.protocol.TCompactProtocol import TCompactProtocol
    from thrift.Thrift import TType
    from thrift.transport.TTransport import TFileObjectTransport

    THRIFT_AVAILABLE = True
except ImportError:
    THRIFT_AVAILABLE = False

FORMAT_NAME = "rdfthrift"

# RDF_StreamRow
ROW_PREFIX_DECL = 1
ROW_TRIPLE = 2

# RDF_Term
TERM_IRI = 1
TERM_BNODE = 2
TERM_LITERAL = 3

# RDF_Literal
LITERAL_LEX = 1
LITERAL_LANGTAG = 2
LITERAL_DATATYPE = 3

Field = Tuple[int, int, Callable[[], None]]


def _write_struct(protocol: "TCompactProtocol", name: str, fields: Iterable[Field]) -> None:
    protocol.writeStructBegin(name)
    for field_id, field_type, write_value in fields:
        protocol.writeFieldBegin(name, field_type, field_id)
        write_value()
        protocol.writeFieldEnd()
    protocol.writeFieldStop()
    protocol.writeStructEnd()


def _string_field(protocol: "TCompactProtocol", field_id: int, value: str) -> Field:
    return (field_id, TType.STRING, lambda: protocol.writeString(value))


def _struct_field(
    protocol: "TCompactProtocol", field_id: int, name: str, fields: Iterable[Field]
) -> Field:
    fields = list(fields)
    return (field_id, TType.STRUCT, lambda: _write_struct(protocol, name, fields))


def _literal_fields(protocol: "TCompactProtocol", literal: Literal) -> Iterable[Field]:
    fields = [_string_field(protocol, LITERAL_LEX, str(literal))]
    if literal.language:
        fields.append(_string_field(protocol, LITERAL_LANGTAG, literal.language))
    elif literal.datatype is not None and literal.datatype != XSD.string:
        fields.append(_string_field(protocol, LITERAL_DATATYPE, str(literal.datatype)))
    return fields


def _term_field(protocol: "TCompactProtocol", field_id: int, term: Node) -> Field:
    if isinstance(term, URIRef):
        inner = _struct_field(
            protocol, TERM_IRI, "RDF_IRI", [_string_field(protocol, 1, str(term))]
        )
    elif isinstance(term, BNode):
        inner = _struct_field(
            protocol, TERM_BNODE, "RDF_BNode", [_string_field(protocol, 1, str(term))]
        )
    elif isinstance(term, Literal):
        inner = _struct_field(
            protocol, TERM_LITERAL, "RDF_Literal", _literal_fields(protocol, term)
        )
    else:
        raise ValueError(f"Cannot encode RDF term of type {type(term).__name__}")
    return _struct_field(protocol, field_id, "RDF_Term", [inner])


def write_prefix_row(protocol: "TCompactProtocol", prefix: str, uri: str) -> None:
    decl = _struct_field(
        protocol,
        ROW_PREFIX_DECL,
        "RDF_PrefixDecl",
        [_string_field(protocol, 1, prefix), _string_field(protocol, 2, uri)],
    )
    _write_struct(protocol, "RDF_StreamRow", [decl])


def write_triple_row(protocol: "TCompactProtocol", triple: Tuple[Node, Node, Node]) -> None:
    subject, predicate, obj = triple
    row = _struct_field(
        protocol,
        ROW_TRIPLE,
        "RDF_Triple",
        [
            _term_field(protocol, 1, subject),
            _term_field(protocol, 2, predicate),
            _term_field(protocol, 3, obj),
        ],
    )
    _write_struct(protocol, "RDF_StreamRow", [row])


class RDFThriftSerializer(Serializer):
    """Serializes a graph as an RDF Thrift stream."""

    def serialize(
        self,
        stream: IO[bytes],
        base: Optional[str] = None,
        encoding: Optional[str] = None,
        **args: Any,
    ) -> None:
        transport = TFileObjectTransport(stream)
        protocol = TCompactProtocol(transport)
        for prefix, namespace in self.store.namespaces():
            write_prefix_row(protocol, prefix, str(namespace))
        for triple in self.store.triples((None, None, None)):
            write_triple_row(protocol, triple)
        transport.flush()


def register() -> None:
    """Make ``format="rdfthrift"`` available to ``Graph.serialize``.

    Raises:
        ImportError: If the thrift package is not installed
    """
    if not THRIFT_AVAILABLE:
        raise ImportError(
            "thrift is required for RDF Thrift output. "
            "Please install it with: pip install thrift"
        )
    plugin.register(FORMAT_NAME, Serializer, __name__, RDFThriftSerializer.__name__)
