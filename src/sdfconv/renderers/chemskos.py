#!/usr/bin/env python3
# src/sdfconv/renderers/chemskos.py

"""
ChemSKOS thesaurus statements in the compact CVME text encoding.

Each record becomes a molecule block with its properties, then a single
structure block listing atoms and bonds::

    molecule m1 (
      'Formula' : 'C6H6'
    )
    structure m1 (
      atom a1 'C' 0.0 0.0 0.0
      bond a1 a2 1 0
    )
"""

from typing import List, TextIO

from ..models.molecule import Molecule
from .base import MoleculeRenderer, format_number

INDENT = "  "


class ChemSKOSRenderer(MoleculeRenderer):
    """Renders records as ChemSKOS molecule and structure blocks."""

    def render(self, molecule: Molecule, index: int, out: TextIO) -> None:
        subject = f"m{index}"
        out.write("\n".join(self.molecule_block(molecule, subject)) + "\n")
        out.write("\n".join(self.structure_block(molecule, subject)) + "\n")

    @staticmethod
    def molecule_block(molecule: Molecule, subject: str) -> List[str]:
        lines = [f"molecule {subject} ("]
        lines.extend(f"{INDENT}'{name}' : '{value}'" for name, value in molecule.properties)
        lines.append(")")
        return lines

    @staticmethod
    def structure_block(molecule: Molecule, subject: str) -> List[str]:
        lines = [f"structure {subject} ("]
        for i, atom in enumerate(molecule.atoms, start=1):
            coords = " ".join(format_number(c) for c in atom.coordinates)
            lines.append(f"{INDENT}atom a{i} '{atom.symbol}' {coords}")
        for bond in molecule.bonds:
            lines.append(
                f"{INDENT}bond a{bond.source} a{bond.target} {bond.order} {bond.stereo}"
            )
        lines.append(")")
        return lines
