"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondOrder, BondStereo
from .molecule import Molecule, Property, escape_value, unescape_value

__all__ = [
    "Atom",
    "Bond",
    "BondOrder",
    "BondStereo",
    "Molecule",
    "Property",
    "escape_value",
    "unescape_value",
]
