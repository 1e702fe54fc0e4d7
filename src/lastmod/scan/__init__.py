"""Scanning and aggregation of modification times."""

from .aggregator import RecentActivityAggregator, aggregate, sort_rows, validate_target
from .models import ActivityReport, Entry, ResultRow, ScanResult, sentinel_timestamp
from .scanner import DEFAULT_MAX_DEPTH, SubtreeScanner, scan_subtree

__all__ = [
    "ActivityReport",
    "DEFAULT_MAX_DEPTH",
    "Entry",
    "RecentActivityAggregator",
    "ResultRow",
    "ScanResult",
    "SubtreeScanner",
    "aggregate",
    "scan_subtree",
    "sentinel_timestamp",
    "sort_rows",
    "validate_target",
]
