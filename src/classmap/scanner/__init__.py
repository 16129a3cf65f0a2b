"""Directory walking, declaration scanning and scan aggregation."""

from .discovery import iter_source_files
from .engine import ScanEngine, scan_all
from .lexer import Token, extract_declarations, normalize_type_name, tokenize

__all__ = [
    "ScanEngine",
    "Token",
    "extract_declarations",
    "iter_source_files",
    "normalize_type_name",
    "scan_all",
    "tokenize",
]
