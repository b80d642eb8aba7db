#!/usr/bin/env python3
# src/sdfconv/renderers/rdf.py

"""
Accumulation of records into an rdflib Graph using schema.org terms.

Nothing is written per record; the dispatcher serializes the graph once at
the end of the stream.
"""

from typing import TextIO

from rdflib import BNode, Graph, Literal, Namespace, URIRef
from rdflib.namespace import RDF, XSD

from ..models.atom import Atom
from ..models.molecule import Molecule
from .base import MoleculeRenderer
from .schema_org import SCHEMA_NS, is_url, schema_term, to_iri

SCHEMA = Namespace(SCHEMA_NS)

HTML_HEAD = """<!DOCTYPE html>
<html lang="en">
  <head>
    <title>Molecules</title>
    <script type="application/ld+json">
"""
HTML_TAIL = """    </script>
  </head>
</html>
"""


class GraphRenderer(MoleculeRenderer):
    """Adds one MolecularEntity per record to a shared graph."""

    def __init__(self, graph: Graph):
        """
        Args:
            graph: Graph that accumulates every record of the run
        """
        self.graph = graph
        self.graph.bind("schema", SCHEMA)
        self.graph.bind("rdf", RDF)

    def render(self, molecule: Molecule, index: int, out: TextIO) -> None:
        node = BNode()
        self.graph.add((node, RDF.type, SCHEMA.MolecularEntity))

        for name, value in molecule.properties:
            self._add_property(node, name, value)

        for number, atom in enumerate(molecule.atoms, start=1):
            self._add_atom(node, number, atom)

    def _add_property(self, node: BNode, name: str, value: str) -> None:
        term = schema_term(name)
        if term is not None:
            self.graph.add((node, SCHEMA[term], Literal(value)))
        elif is_url(value):
            self.graph.add((node, SCHEMA.sameAs, URIRef(to_iri(value))))
        else:
            self._add_property_value(node, name, Literal(value))

    def _add_property_value(self, node: BNode, name: str, value: Literal) -> None:
        prop = BNode()
        self.graph.add((node, SCHEMA.additionalProperty, prop))
        self.graph.add((prop, RDF.type, SCHEMA.PropertyValue))
        self.graph.add((prop, SCHEMA.name, Literal(name)))
        self.graph.add((prop, SCHEMA.value, value))

    def _add_atom(self, node: BNode, number: int, atom: Atom) -> None:
        atom_node = BNode()
        self.graph.add((node, SCHEMA.hasBioChemEntityPart, atom_node))
        self.graph.add((atom_node, RDF.type, SCHEMA.BioChemEntity))
        self.graph.add((atom_node, SCHEMA.identifier, Literal(f"a{number}")))
        self.graph.add((atom_node, SCHEMA.name, Literal(atom.symbol)))
        for axis, coordinate in zip("xyz", atom.coordinates):
            self._add_property_value(atom_node, axis, Literal(coordinate, datatype=XSD.double))


class JsonLdHtmlRenderer(GraphRenderer):
    """Graph renderer whose JSON-LD flush is embedded in an HTML ``<script>``."""

    def preamble(self, out: TextIO) -> None:
        out.write(HTML_HEAD)

    def postamble(self, out: TextIO) -> None:
        out.write(HTML_TAIL)
