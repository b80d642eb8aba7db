#!/usr/bin/env python3
# src/sdfconv/io/periodic_table.py

"""
Read-only periodic table used to enrich atom output.
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Union

logger = logging.getLogger(__name__)

RESOURCE_NAME = "periodic_table.json"


class PeriodicTable(Mapping[str, Dict[str, Any]]):
    """Element symbol to attribute mapping, loaded once and shared."""

    def __init__(self, elements: Mapping[str, Mapping[str, Any]]):
        self._elements: Dict[str, Dict[str, Any]] = {
            symbol: dict(attributes) for symbol, attributes in elements.items()
        }

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "PeriodicTable":
        """
        Load the periodic table from JSON.

        Args:
            path: Optional JSON file; the bundled resource is used by default

        Returns:
            PeriodicTable instance

        Raises:
            FileNotFoundError: If the resource does not exist
            ValueError: If the resource is not a JSON object of objects
        """
        if path is None:
            text = resources.files("sdfconv.data").joinpath(RESOURCE_NAME).read_text(
                encoding="utf-8"
            )
            source = RESOURCE_NAME
        else:
            text = Path(path).read_text(encoding="utf-8")
            source = str(path)

        data = json.loads(text)
        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            raise ValueError(f"Invalid periodic table resource: {source}")

        logger.info(f"Loaded {len(data)} elements from {source}")
        return cls(data)

    def attributes(self, symbol: str) -> Dict[str, Any]:
        """Return the attributes of an element, or an empty mapping if unknown."""
        return self._elements.get(symbol, {})

    def __getitem__(self, symbol: str) -> Dict[str, Any]:
        return self._elements[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)
