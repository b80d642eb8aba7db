#!/usr/bin/env python3
# src/sdfconv/config.py

"""
Run configuration consumed by the dispatcher.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .formats import OutputFormat

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


@dataclass(frozen=True)
class ConversionConfig:
    """Fixed settings for one conversion run."""

    input_path: Union[str, Path]
    output_format: OutputFormat
    expand_urls: bool = False
    periodic: bool = False

    def __post_init__(self):
        if isinstance(self.output_format, str):
            object.__setattr__(self, "output_format", OutputFormat.from_name(self.output_format))

    @property
    def effective_expand_urls(self) -> bool:
        return self.expand_urls or self.output_format.expands_urls

    @property
    def effective_periodic(self) -> bool:
        return self.periodic and self.output_format.accepts_periodic

    @property
    def reads_stdin(self) -> bool:
        return str(self.input_path) == STDIN_PATH

    def validate(self) -> None:
        """Warn about flags that have no effect for the selected mode."""
        if self.periodic and not self.output_format.accepts_periodic:
            logger.warning(
                f"--periodic has no effect for output format '{self.output_format}'"
            )
