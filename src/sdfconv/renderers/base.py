"""Interface for per-record output renderers."""

from abc import ABC, abstractmethod
from typing import TextIO, Union

from ..models.molecule import Molecule


class MoleculeRenderer(ABC):
    """Abstract base class for output renderers.

    A renderer is selected once per run. ``preamble`` and ``postamble`` write
    static document framing; ``render`` handles one completed record.
    """

    def preamble(self, out: TextIO) -> None:
        """Write anything required before the first record."""

    @abstractmethod
    def render(self, molecule: Molecule, index: int, out: TextIO) -> None:
        """
        Render one completed record.

        Args:
            molecule: Fully populated record
            index: 1-based record number in the stream
            out: Text output stream
        """
        pass

    def postamble(self, out: TextIO) -> None:
        """Write anything required after the last record."""


def format_number(value: Union[int, float]) -> str:
    """Format a number the same way in every text grammar."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return repr(float(value))
