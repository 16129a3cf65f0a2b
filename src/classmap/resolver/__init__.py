"""Name resolution, scan policy and loader handles."""

from .facade import ClassMapResolver
from .handle import LoaderHandle
from .policy import ScanFlag, ScanPolicy, parse_scan_flags

__all__ = ["ClassMapResolver", "LoaderHandle", "ScanFlag", "ScanPolicy", "parse_scan_flags"]
