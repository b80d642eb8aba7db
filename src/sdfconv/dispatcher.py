#!/usr/bin/env python3
# src/sdfconv/dispatcher.py

"""
Drives one conversion run: framing, per-record rendering and the final
graph flush for RDF modes.
"""

import logging
import sys
from enum import Enum
from typing import Iterable, Optional, TextIO

from rdflib import Graph
from tqdm import tqdm

from .adapters import register_rdf_thrift
from .config import ConversionConfig
from .formats import OutputFormat
from .io.periodic_table import PeriodicTable
from .io.sdf_reader import SDFRecordParser
from .models.molecule import Molecule
from .renderers import (
    ChemSKOSRenderer,
    CypherRenderer,
    GraphRenderer,
    InchiRenderer,
    JsonLdHtmlRenderer,
    MicrodataRenderer,
    MoleculeRenderer,
    RDFaRenderer,
    SmilesRenderer,
)

logger = logging.getLogger(__name__)


class DispatcherState(Enum):
    PREAMBLE = "preamble"
    AWAITING_RECORD = "awaiting_record"
    RENDERING = "rendering"
    CLEARED = "cleared"
    POSTAMBLE = "postamble"


def build_renderer(
    output_format: OutputFormat,
    graph: Optional[Graph] = None,
    periodic_table: Optional[PeriodicTable] = None,
) -> MoleculeRenderer:
    """
    Select the renderer for an output mode.

    Args:
        output_format: Selected mode
        graph: Graph shared by every record, required for graph modes
        periodic_table: Element attributes for Cypher atom nodes

    Returns:
        Renderer instance for the mode
    """
    if output_format is OutputFormat.CYPHER:
        return CypherRenderer(periodic_table)
    if output_format is OutputFormat.CVME:
        return ChemSKOSRenderer()
    if output_format is OutputFormat.SMILES:
        return SmilesRenderer()
    if output_format is OutputFormat.INCHI:
        return InchiRenderer()
    if output_format is OutputFormat.RDFA:
        return RDFaRenderer()
    if output_format is OutputFormat.MICRODATA:
        return MicrodataRenderer()
    if graph is None:
        raise ValueError(f"Output format '{output_format}' needs a graph")
    if output_format is OutputFormat.JSONLD_HTML:
        return JsonLdHtmlRenderer(graph)
    return GraphRenderer(graph)


class FormatDispatcher:
    """Renders every record of a stream in one output mode."""

    def __init__(
        self,
        output_format: OutputFormat,
        out: TextIO,
        renderer: MoleculeRenderer,
        graph: Optional[Graph] = None,
        expand_urls: bool = False,
    ):
        """
        Initialize the dispatcher.

        Args:
            output_format: Selected mode
            out: Text output stream; binary modes write to ``out.buffer``
            renderer: Renderer for the mode
            graph: Graph to flush once at the end of the run (graph modes)
            expand_urls: Whether database cross-references become URLs
        """
        if output_format.accumulates_graph and graph is None:
            raise ValueError(f"Output format '{output_format}' needs a graph")

        self.output_format = output_format
        self.out = out
        self.renderer = renderer
        self.graph = graph
        self.expand_urls = expand_urls or output_format.expands_urls

        self.molecule = Molecule()
        self.state = DispatcherState.PREAMBLE
        self.records = 0

    @classmethod
    def from_config(
        cls,
        config: ConversionConfig,
        out: TextIO,
        periodic_table: Optional[PeriodicTable] = None,
    ) -> "FormatDispatcher":
        """
        Build a dispatcher and its renderer from a run configuration.

        The periodic table is loaded from the bundled resource when
        enrichment is requested and none is supplied.
        """
        config.validate()
        output_format = config.output_format

        if config.effective_periodic and periodic_table is None:
            periodic_table = PeriodicTable.load()
        elif not config.effective_periodic:
            periodic_table = None

        graph = None
        if output_format.accumulates_graph:
            if output_format.binary:
                register_rdf_thrift()
            graph = Graph()

        renderer = build_renderer(output_format, graph, periodic_table)
        return cls(
            output_format,
            out,
            renderer,
            graph=graph,
            expand_urls=config.effective_expand_urls,
        )

    def run(self, lines: Iterable[str]) -> int:
        """
        Convert a stream of SDF lines.

        Args:
            lines: Input lines

        Returns:
            Number of records rendered
        """
        self.state = DispatcherState.PREAMBLE
        self.renderer.preamble(self.out)

        self.state = DispatcherState.AWAITING_RECORD
        parser = SDFRecordParser(self.molecule, self._on_record, expand_urls=self.expand_urls)
        parser.parse(lines)

        self.state = DispatcherState.POSTAMBLE
        if self.graph is not None:
            self.flush_graph()
        self.renderer.postamble(self.out)
        self.out.flush()

        logger.info(f"Converted {self.records} record(s) to {self.output_format}")
        return self.records

    def flush_graph(self) -> None:
        """Serialize the accumulated graph once in the mode's encoding."""
        encoding = self.output_format.graph_encoding
        logger.debug(f"Serializing {len(self.graph)} triples as {encoding}")

        if self.output_format.binary:
            self.out.flush()
            self.graph.serialize(destination=self.out.buffer, format=encoding)
            self.out.buffer.flush()
            return

        text = self.graph.serialize(format=encoding)
        self.out.write(text if text.endswith("\n") else text + "\n")

    def _on_record(self, molecule: Molecule) -> None:
        self.state = DispatcherState.RENDERING
        self.records += 1
        try:
            self.renderer.render(molecule, self.records, self.out)
        finally:
            self.state = DispatcherState.CLEARED


def open_input(config: ConversionConfig) -> TextIO:
    """Open the configured input file, replacing undecodable bytes."""
    return open(config.input_path, "r", encoding="utf-8", errors="replace")


def convert(
    config: ConversionConfig,
    out: TextIO,
    periodic_table: Optional[PeriodicTable] = None,
    progress: bool = False,
) -> int:
    """
    Run a full conversion described by ``config``.

    Args:
        config: Run configuration
        out: Output stream
        periodic_table: Optional preloaded periodic table
        progress: Show a line counter on stderr

    Returns:
        Number of records rendered

    Raises:
        OSError: If the input cannot be opened or read
        ValueError: If the periodic table resource is invalid
    """
    dispatcher = FormatDispatcher.from_config(config, out, periodic_table=periodic_table)

    logger.info(f"Reading {config.input_path}")
    if config.reads_stdin:
        return dispatcher.run(track_lines(sys.stdin, progress))
    with open_input(config) as handle:
        return dispatcher.run(track_lines(handle, progress))


def track_lines(lines: Iterable[str], enabled: bool) -> Iterable[str]:
    return tqdm(lines, desc="Reading", unit=" lines", file=sys.stderr, disable=not enabled)
