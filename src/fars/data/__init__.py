"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS year files.

Modules:
- reader:  File naming, single-year loading, fault-tolerant batch reads
- summary: Month x year accident count orchestration
"""

from .reader import (
    DEFAULT_DATA_DIR,
    SkippedYear,
    fars_read,
    load,
    load_years,
    make_filename,
    read_years,
    resolve_data_dir,
)
from .summary import summarize_years

__all__ = [
    # Reader
    'DEFAULT_DATA_DIR',
    'SkippedYear',
    'fars_read',
    'load',
    'load_years',
    'make_filename',
    'read_years',
    'resolve_data_dir',
    # Summary
    'summarize_years',
]
