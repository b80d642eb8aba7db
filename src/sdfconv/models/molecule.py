#!/usr/bin/env python3
# src/sdfconv/models/molecule.py

"""
Domain model holding one SDF record: connection table plus data block.
"""

import re
from collections import OrderedDict
from typing import Dict, List, NamedTuple

import numpy as np

from .atom import Atom
from .bond import Bond

ESCAPED_CHAR = re.compile(r"\\(.)")


class Property(NamedTuple):
    """A named value from the record's data block."""

    name: str
    value: str


def escape_value(text: str) -> str:
    """Escape backslashes and single quotes for embedding in generated statements."""
    return text.replace("\\", "\\\\").replace("'", "\\'")


def unescape_value(text: str) -> str:
    """Reverse ``escape_value``."""
    return ESCAPED_CHAR.sub(r"\1", text)


class Molecule:
    """Mutable record container reused across the records of a stream.

    Atoms, bonds and properties keep their insertion order. Property
    names may repeat.
    """

    def __init__(self):
        self.atoms: List[Atom] = []
        self.bonds: List[Bond] = []
        self.properties: List[Property] = []

    def add_atom(self, atom: Atom) -> None:
        self.atoms.append(atom)

    def add_bond(self, bond: Bond) -> None:
        self.bonds.append(bond)

    def add_property(self, name: str, value: str) -> None:
        self.properties.append(Property(name, value))

    def has_atom_index(self, index: int) -> bool:
        """Check that a 1-based atom index refers to an atom already read."""
        return 1 <= index <= len(self.atoms)

    def grouped_properties(self) -> Dict[str, List[str]]:
        """Group property values by name, ordered by first occurrence of each name."""
        grouped: Dict[str, List[str]] = OrderedDict()
        for name, value in self.properties:
            grouped.setdefault(name, []).append(value)
        return grouped

    def get_property(self, name: str) -> List[str]:
        return [value for prop_name, value in self.properties if prop_name == name]

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        if not self.atoms:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([atom.coordinates for atom in self.atoms], dtype=np.float64)

    @property
    def is_empty(self) -> bool:
        return not (self.atoms or self.bonds or self.properties)

    def clear(self) -> None:
        """Reset the record in place for the next one."""
        self.atoms.clear()
        self.bonds.clear()
        self.properties.clear()

    def __repr__(self) -> str:
        return (
            f"Molecule(atoms={len(self.atoms)}, bonds={len(self.bonds)}, "
            f"properties={len(self.properties)})"
        )
