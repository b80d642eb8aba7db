"""Adapter for RDKit identity strings (SMILES, InChI)."""

import logging

import numpy as np

from ..models.bond import BondOrder, BondStereo
from ..models.molecule import Molecule

try:
    from rdkit import Chem
    from rdkit.Chem import inchi
    from rdkit.Geometry import Point3D

    RDKIT_AVAILABLE = True
except ImportError:
    RDKIT_AVAILABLE = False

# Names of Chem.BondType and Chem.BondDir members
BOND_TYPES = {
    BondOrder.SINGLE: "SINGLE",
    BondOrder.DOUBLE: "DOUBLE",
    BondOrder.TRIPLE: "TRIPLE",
    BondOrder.AROMATIC: "AROMATIC",
}

BOND_DIRECTIONS = {
    BondStereo.UP: "BEGINWEDGE",
    BondStereo.DOWN: "BEGINDASH",
    BondStereo.EITHER: "UNKNOWN",
}


class ToolkitError(ValueError):
    """Raised when RDKit cannot build or describe a record."""


class RDKitAdapter:
    """Adapter for RDKit molecule construction and identity strings."""

    def __init__(self):
        if not RDKIT_AVAILABLE:
            raise ImportError(
                "RDKit is required for SMILES and InChI output. "
                "Please install it with: pip install rdkit"
            )
        self.logger = logging.getLogger(__name__)

    def to_rdkit_mol(self, molecule: Molecule) -> "Chem.Mol":
        """
        Convert a parsed record to an RDKit Mol.

        Args:
            molecule: Record with atoms, bonds and coordinates

        Returns:
            Sanitized RDKit Mol with stereochemistry assigned

        Raises:
            ToolkitError: If RDKit rejects the structure
        """
        try:
            mol = Chem.RWMol()
            for atom in molecule.atoms:
                mol.AddAtom(Chem.Atom(atom.symbol))

            for bond in molecule.bonds:
                begin, end = bond.source - 1, bond.target - 1
                bond_type = getattr(Chem.BondType, BOND_TYPES.get(bond.order, "UNSPECIFIED"))
                mol.AddBond(begin, end, bond_type)
                rd_bond = mol.GetBondBetweenAtoms(begin, end)
                if bond_type == Chem.BondType.AROMATIC:
                    rd_bond.SetIsAromatic(True)
                    mol.GetAtomWithIdx(begin).SetIsAromatic(True)
                    mol.GetAtomWithIdx(end).SetIsAromatic(True)
                direction = BOND_DIRECTIONS.get(bond.stereo)
                if direction is not None:
                    rd_bond.SetBondDir(getattr(Chem.BondDir, direction))

            coords = molecule.get_coordinates()
            is_3d = bool(coords.size) and bool(np.any(coords[:, 2] != 0.0))
            conformer = Chem.Conformer(mol.GetNumAtoms())
            for idx, (x, y, z) in enumerate(coords):
                conformer.SetAtomPosition(idx, Point3D(float(x), float(y), float(z)))
            conformer.Set3D(is_3d)
            mol.AddConformer(conformer, assignId=True)

            mol = mol.GetMol()
            Chem.SanitizeMol(mol)
            if is_3d:
                Chem.AssignStereochemistryFrom3D(mol)
            else:
                Chem.AssignChiralTypesFromBondDirs(mol)
                Chem.AssignStereochemistry(mol, cleanIt=True, force=True)
            return Chem.RemoveHs(mol)
        except (RuntimeError, ValueError) as e:
            self.logger.debug(f"RDKit rejected {molecule!r}: {e}")
            raise ToolkitError(f"Failed to create valid RDKit molecule: {str(e)}") from e

    def to_smiles(self, molecule: Molecule) -> str:
        return Chem.MolToSmiles(self.to_rdkit_mol(molecule))

    def to_inchi(self, molecule: Molecule) -> str:
        value = inchi.MolToInchi(self.to_rdkit_mol(molecule))
        if not value:
            raise ToolkitError("InChI generation returned an empty string")
        return value
