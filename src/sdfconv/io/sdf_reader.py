#!/usr/bin/env python3
# src/sdfconv/io/sdf_reader.py

"""
Line scanner for SDF streams.

An SDF stream is a concatenation of records. Each record is a V2000
connection table closed by ``M  END``, followed by a data block of
``> <name>`` headers and value lines, closed by ``$$$$``. The parser fills
one reusable Molecule and hands it to a callback when a record closes.
"""

import logging
import re
from typing import Callable, Iterable, List, Optional

from ..models.atom import Atom
from ..models.bond import Bond
from ..models.molecule import Molecule, Property, escape_value
from ..resolvers.database_links import resolve

logger = logging.getLogger(__name__)

RECORD_TERMINATOR = "$$$$"
TABLE_TERMINATOR = "END"
ATOM_TOKEN_COUNT = 16

METADATA_LINE = re.compile(r"M\s+\w+.*")
PROPERTY_NAME = re.compile(r"<([^>]*)>?")

RecordCallback = Callable[[Molecule], None]
PropertyResolver = Callable[[str, str], Property]


def is_int(token: str) -> bool:
    try:
        int(token)
    except ValueError:
        return False
    return True


def is_bond_line(tokens: List[str]) -> bool:
    """Check the V2000 bond row shape, excluding counts lines ending in a version tag."""
    if len(tokens) == 7:
        return not tokens[6].startswith("V") and is_int(tokens[0])
    if len(tokens) == 6:
        return is_int(tokens[0])
    return False


class SDFRecordParser:
    """Stateful line classifier building one Molecule per record."""

    def __init__(
        self,
        molecule: Molecule,
        on_record: RecordCallback,
        expand_urls: bool = False,
        resolver: PropertyResolver = resolve,
    ):
        """
        Initialize the parser.

        Args:
            molecule: Reusable molecule that receives the record contents
            on_record: Called with the populated molecule at each ``$$$$``
            expand_urls: Whether database cross-references become URLs
            resolver: Property resolver used when expanding URLs
        """
        self.molecule = molecule
        self.on_record = on_record
        self.expand_urls = expand_urls
        self.resolver = resolver

        self.in_property_block = False
        self.current_property = ""
        self.line_number = 0
        self.records = 0

    def parse(self, lines: Iterable[str]) -> int:
        """Feed every line of a stream and return the number of completed records."""
        for line in lines:
            self.feed_line(line)
        self.finish()
        return self.records

    def feed_line(self, raw_line: str) -> bool:
        """
        Classify and consume one input line.

        Args:
            raw_line: Line as read from the stream

        Returns:
            True if the line closed a record
        """
        self.line_number += 1
        line = escape_value(raw_line.strip())

        if not self.in_property_block and line.startswith(TABLE_TERMINATOR, 3):
            self.in_property_block = True
            return False

        # M  CHG, M  ISO, M  V30 ... never carry atoms, bonds or properties
        if METADATA_LINE.fullmatch(line):
            return False

        if not self.in_property_block:
            self._read_connection_table_line(line)
            return False

        return self._read_data_line(line)

    def finish(self) -> None:
        """Discard a trailing record that was never terminated."""
        if self.in_property_block or not self.molecule.is_empty:
            logger.warning(
                f"Discarding unterminated record at end of input (line {self.line_number})"
            )
        self._reset()

    def _read_connection_table_line(self, line: str) -> None:
        tokens = line.split()

        if len(tokens) == ATOM_TOKEN_COUNT:
            try:
                atom = Atom(tokens[3], float(tokens[0]), float(tokens[1]), float(tokens[2]))
            except ValueError as e:
                logger.warning(f"Line {self.line_number}: skipping atom row: {e}")
            else:
                self.molecule.add_atom(atom)

        if tokens and tokens[-1] == "V3000":
            logger.debug(
                f"Line {self.line_number}: V3000 connection tables are not supported"
            )

        if is_bond_line(tokens):
            self._read_bond(tokens)

    def _read_bond(self, tokens: List[str]) -> None:
        try:
            bond = Bond(
                source=int(tokens[0]),
                order=int(tokens[2]),
                target=int(tokens[1]),
                stereo=int(tokens[3]),
            )
        except ValueError as e:
            logger.warning(f"Line {self.line_number}: skipping bond row: {e}")
            return

        if not (
            self.molecule.has_atom_index(bond.source)
            and self.molecule.has_atom_index(bond.target)
        ):
            logger.warning(
                f"Line {self.line_number}: bond {bond.source}-{bond.target} refers to "
                f"an atom outside 1..{len(self.molecule.atoms)}, skipping"
            )
            return

        self.molecule.add_bond(bond)

    def _read_data_line(self, line: str) -> bool:
        if "".join(line.split()).startswith("><"):
            match = PROPERTY_NAME.search(line)
            self.current_property = match.group(1) if match else ""
            return False

        if line.startswith(RECORD_TERMINATOR):
            self._complete_record()
            return True

        if line:
            name, value = self.current_property, line
            if self.expand_urls:
                name, value = self.resolver(name, value)
            self.molecule.add_property(name, value)
        return False

    def _complete_record(self) -> None:
        try:
            self.on_record(self.molecule)
            self.records += 1
        finally:
            self._reset()

    def _reset(self) -> None:
        self.molecule.clear()
        self.in_property_block = False
        self.current_property = ""


def read_records(
    lines: Iterable[str],
    on_record: RecordCallback,
    expand_urls: bool = False,
    molecule: Optional[Molecule] = None,
) -> int:
    """Parse a stream of SDF lines, calling ``on_record`` for each complete record."""
    parser = SDFRecordParser(molecule or Molecule(), on_record, expand_urls=expand_urls)
    return parser.parse(lines)
