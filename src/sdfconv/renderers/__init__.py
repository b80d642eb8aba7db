"""Per-record renderers for every output grammar."""

from .base import MoleculeRenderer
from .chemskos import ChemSKOSRenderer
from .cypher import CypherRenderer
from .identity import InchiRenderer, SmilesRenderer
from .markup import MicrodataRenderer, RDFaRenderer
from .rdf import GraphRenderer, JsonLdHtmlRenderer

__all__ = [
    "MoleculeRenderer",
    "ChemSKOSRenderer",
    "CypherRenderer",
    "InchiRenderer",
    "SmilesRenderer",
    "MicrodataRenderer",
    "RDFaRenderer",
    "GraphRenderer",
    "JsonLdHtmlRenderer",
]
