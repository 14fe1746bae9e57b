"""CSV ingestion helpers: row decoding and file-level entry points."""

from .rows import DecodedRow, iter_rows

__all__ = ["DecodedRow", "iter_rows"]
