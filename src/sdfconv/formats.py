#!/usr/bin/env python3
# src/sdfconv/formats.py

"""
Output modes supported by the converter.
"""

from enum import Enum
from typing import List, Optional


class OutputFormat(Enum):
    """Closed set of output modes, each carrying only what the dispatcher needs.

    Value tuple: (name, rdflib graph encoding, binary output, forced URL
    expansion, periodic enrichment supported).
    """

    CYPHER = ("cypher", None, False, False, True)
    CVME = ("cvme", None, False, True, False)
    SMILES = ("smiles", None, False, False, False)
    INCHI = ("inchi", None, False, False, False)
    TURTLE = ("turtle", "turtle", False, False, False)
    NTRIPLES = ("ntriples", "nt", False, False, False)
    JSONLD = ("jsonld", "json-ld", False, False, False)
    JSONLD_HTML = ("jsonldhtml", "json-ld", False, False, False)
    RDFXML = ("rdfxml", "xml", False, False, False)
    RDFTHRIFT = ("rdfthrift", "rdfthrift", True, False, False)
    RDFA = ("rdfa", None, False, False, False)
    MICRODATA = ("microdata", None, False, False, False)

    def __init__(
        self,
        label: str,
        graph_encoding: Optional[str],
        binary: bool,
        expands_urls: bool,
        accepts_periodic: bool,
    ):
        self.label = label
        self.graph_encoding = graph_encoding
        self.binary = binary
        self.expands_urls = expands_urls
        self.accepts_periodic = accepts_periodic

    @property
    def accumulates_graph(self) -> bool:
        return self.graph_encoding is not None

    @classmethod
    def names(cls) -> List[str]:
        return [fmt.label for fmt in cls]

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """
        Look up an output mode by its case-insensitive name.

        Raises:
            ValueError: If the name is not a supported mode
        """
        wanted = name.strip().lower()
        for fmt in cls:
            if fmt.label == wanted:
                return fmt
        raise ValueError(
            f"Unknown output format '{name}' (choose from: {', '.join(cls.names())})"
        )

    def __str__(self) -> str:
        return self.label
