"""Input readers and static lookup tables."""

from .periodic_table import PeriodicTable
from .sdf_reader import SDFRecordParser, read_records

__all__ = ["PeriodicTable", "SDFRecordParser", "read_records"]
