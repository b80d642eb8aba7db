"""Convert SDF chemical table files to graph, RDF, markup and identity formats."""

__version__ = "0.1.0"

from .config import ConversionConfig
from .dispatcher import FormatDispatcher, convert
from .formats import OutputFormat

__all__ = ["ConversionConfig", "FormatDispatcher", "OutputFormat", "convert", "__version__"]
