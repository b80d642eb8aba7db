#!/usr/bin/env python3
# src/sdfconv/renderers/identity.py

"""
Chemical identity strings, one line per record.
"""

import logging
from abc import abstractmethod
from typing import Optional, TextIO

from ..adapters.rdkit_adapter import RDKitAdapter, ToolkitError
from ..models.molecule import Molecule
from .base import MoleculeRenderer

logger = logging.getLogger(__name__)


class IdentityRenderer(MoleculeRenderer):
    """Writes the toolkit's identity string for each record.

    Records the toolkit cannot handle are reported and produce no line.
    """

    label = "identity"

    def __init__(self, adapter: Optional[RDKitAdapter] = None):
        self.adapter = adapter or RDKitAdapter()

    @abstractmethod
    def identity(self, molecule: Molecule) -> str:
        """Return the identity string for one record."""
        pass

    def render(self, molecule: Molecule, index: int, out: TextIO) -> None:
        try:
            value = self.identity(molecule)
        except ToolkitError as e:
            logger.error(f"Record {index}: cannot generate {self.label}: {e}")
            return
        out.write(value + "\n")


class SmilesRenderer(IdentityRenderer):
    label = "SMILES"

    def identity(self, molecule: Molecule) -> str:
        return self.adapter.to_smiles(molecule)


class InchiRenderer(IdentityRenderer):
    label = "InChI"

    def identity(self, molecule: Molecule) -> str:
        return self.adapter.to_inchi(molecule)
