#!/usr/bin/env python3
# src/sdfconv/renderers/markup.py

"""
HTML fragments with embedded schema.org markup (RDFa, Microdata).

Each record is written immediately as a ``<div>``; the document head and
body scaffolding is written once around the whole stream.
"""

from abc import abstractmethod
from html import escape
from typing import List, TextIO

from ..models.molecule import Molecule
from .base import MoleculeRenderer
from .schema_org import SCHEMA_NS, is_url, schema_term, to_iri

RECORD_INDENT = "    "
FIELD_INDENT = RECORD_INDENT + "  "


def text(value: str) -> str:
    return escape(value, quote=False)


def attribute(value: str) -> str:
    return escape(value, quote=True)


class MarkupRenderer(MoleculeRenderer):
    """Base class for inline markup renderers."""

    body_attributes = ""

    def preamble(self, out: TextIO) -> None:
        out.write(
            "<!DOCTYPE html>\n"
            "<html lang='en'>\n"
            "  <head>\n"
            "    <title>Molecules</title>\n"
            "  </head>\n"
            f"  <body{self.body_attributes}>\n"
        )

    def postamble(self, out: TextIO) -> None:
        out.write("  </body>\n</html>\n")

    def render(self, molecule: Molecule, index: int, out: TextIO) -> None:
        lines = [f"{RECORD_INDENT}<div {self.item('MolecularEntity')}>"]
        for name, value in molecule.properties:
            lines.extend(self.property_lines(name, value))
        lines.append(f"{RECORD_INDENT}</div>")
        out.write("\n".join(lines) + "\n")

    def property_lines(self, name: str, value: str) -> List[str]:
        term = schema_term(name)
        if term is not None:
            return [f"{FIELD_INDENT}<span {self.prop(term)}>{text(value)}</span>"]
        if is_url(value):
            return [
                f"{FIELD_INDENT}<a {self.prop('sameAs')} href='{attribute(to_iri(value))}'>"
                f"{text(value)}</a>"
            ]
        inner = FIELD_INDENT + "  "
        return [
            f"{FIELD_INDENT}<div {self.prop('additionalProperty')} {self.item('PropertyValue')}>",
            f"{inner}<span {self.prop('name')}>{text(name)}</span>",
            f"{inner}<span {self.prop('value')}>{text(value)}</span>",
            f"{FIELD_INDENT}</div>",
        ]

    @abstractmethod
    def item(self, type_name: str) -> str:
        """Attributes opening a typed item."""
        pass

    @abstractmethod
    def prop(self, term: str) -> str:
        """Attribute naming a property of the enclosing item."""
        pass


class RDFaRenderer(MarkupRenderer):
    """RDFa Lite attributes with schema.org as the default vocabulary."""

    body_attributes = f" vocab='{SCHEMA_NS}'"

    def item(self, type_name: str) -> str:
        return f"typeof='{type_name}'"

    def prop(self, term: str) -> str:
        return f"property='{term}'"


class MicrodataRenderer(MarkupRenderer):
    """HTML Microdata items typed with schema.org URLs."""

    def item(self, type_name: str) -> str:
        return f"itemscope itemtype='{SCHEMA_NS}{type_name}'"

    def prop(self, term: str) -> str:
        return f"itemprop='{term}'"
