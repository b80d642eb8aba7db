#!/usr/bin/env python3
# src/sdfconv/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import IntEnum


class BondOrder(IntEnum):
    """Bond type codes used by the V2000 bond block."""

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    AROMATIC = 4


class BondStereo(IntEnum):
    """Single-bond stereo codes used by the V2000 bond block."""

    NONE = 0
    UP = 1
    EITHER = 4
    DOWN = 6


@dataclass(frozen=True)
class Bond:
    """Represents a bond row of a connection table.

    Atom indices are 1-based and follow the file numbering.
    """

    source: int
    order: int
    target: int
    stereo: int = BondStereo.NONE
