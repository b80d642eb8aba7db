"""Adapters for external libraries."""

from .rdf_thrift import THRIFT_AVAILABLE, RDFThriftSerializer, register as register_rdf_thrift
from .rdkit_adapter import RDKIT_AVAILABLE, RDKitAdapter, ToolkitError

__all__ = [
    "RDFThriftSerializer",
    "RDKIT_AVAILABLE",
    "RDKitAdapter",
    "THRIFT_AVAILABLE",
    "ToolkitError",
    "register_rdf_thrift",
]
