"""Record loading from exported files."""

from .loader import SUPPORTED_SUFFIXES, load_records, row_to_record

__all__ = ["SUPPORTED_SUFFIXES", "load_records", "row_to_record"]
