#!/usr/bin/env python3
# src/sdfconv/renderers/cypher.py

"""
Cypher ``CREATE`` statements for graph-database import.

One statement per record, one clause per line::

    CREATE (m:Molecule {`Formula`: 'C6H6'})
    CREATE (a1:Atom {symbol: 'C', x: 0.0, y: 1.4, z: 0.0}), (m)-[:HAS_ATOM]->(a1)
    CREATE (a1)-[:BOND {order: 2, stereo: 0}]->(a2)
    ;
"""

from typing import Any, Dict, List, Optional, TextIO

from ..io.periodic_table import PeriodicTable
from ..models.atom import Atom
from ..models.bond import Bond
from ..models.molecule import Molecule, escape_value
from .base import MoleculeRenderer, format_number

STATEMENT_TERMINATOR = ";"


def cypher_key(name: str) -> str:
    return "`" + name.replace("`", "``") + "`"


def cypher_value(value: Any, escape: bool = True) -> str:
    """Format a value as a Cypher literal.

    Record values are escaped at parse time, so ``escape`` is only needed
    for values coming from elsewhere (the periodic table).
    """
    if value is None:
        return "null"
    if isinstance(value, (bool, int, float)):
        return format_number(value)
    text = escape_value(str(value)) if escape else str(value)
    return f"'{text}'"


def cypher_map(entries: Dict[str, str]) -> str:
    return "{" + ", ".join(f"{key}: {value}" for key, value in entries.items()) + "}"


class CypherRenderer(MoleculeRenderer):
    """Renders each record as one Cypher ``CREATE`` statement.

    Molecule properties become one map keyed by property name. A name that
    repeats becomes a list of its values, placed where the name first occurs,
    so interleaved repeats (``A, B, A``) render as ``A: [..], B: ..``.
    """

    def __init__(self, periodic_table: Optional[PeriodicTable] = None):
        """
        Args:
            periodic_table: When given, atom nodes also carry element attributes
        """
        self.periodic_table = periodic_table

    def render(self, molecule: Molecule, index: int, out: TextIO) -> None:
        out.write("\n".join(self.statement_lines(molecule)) + "\n")

    def statement_lines(self, molecule: Molecule) -> List[str]:
        lines = [self.molecule_clause(molecule)]
        lines.extend(self.atom_clause(i, atom) for i, atom in enumerate(molecule.atoms, start=1))
        lines.extend(self.bond_clause(bond) for bond in molecule.bonds)
        lines.append(STATEMENT_TERMINATOR)
        return lines

    def molecule_clause(self, molecule: Molecule) -> str:
        grouped = molecule.grouped_properties()
        if not grouped:
            return "CREATE (m:Molecule)"

        entries = {}
        for name, values in grouped.items():
            if len(values) == 1:
                entries[cypher_key(name)] = cypher_value(values[0], escape=False)
            else:
                items = ", ".join(cypher_value(v, escape=False) for v in values)
                entries[cypher_key(name)] = f"[{items}]"
        return f"CREATE (m:Molecule {cypher_map(entries)})"

    def atom_clause(self, number: int, atom: Atom) -> str:
        entries = {
            "symbol": cypher_value(atom.symbol, escape=False),
            "x": format_number(atom.x),
            "y": format_number(atom.y),
            "z": format_number(atom.z),
        }
        if self.periodic_table is not None:
            for key, value in self.periodic_table.attributes(atom.symbol).items():
                entries.setdefault(key, cypher_value(value))
        return f"CREATE (a{number}:Atom {cypher_map(entries)}), (m)-[:HAS_ATOM]->(a{number})"

    @staticmethod
    def bond_clause(bond: Bond) -> str:
        entries = {"order": format_number(bond.order), "stereo": format_number(bond.stereo)}
        return f"CREATE (a{bond.source})-[:BOND {cypher_map(entries)}]->(a{bond.target})"

