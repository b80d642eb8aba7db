#!/usr/bin/env python3
# src/sdfconv/models/atom.py

"""
Domain model representing an atom of a connection table.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Atom:
    """Represents an atom row of a molfile connection table."""

    symbol: str
    x: float
    y: float
    z: float

    @property
    def coordinates(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)
