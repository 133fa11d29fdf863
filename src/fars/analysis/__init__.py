"""
FARS Analysis Package (Functional Core)

Pure DataFrame transformations only: no file I/O, no plotting.

Modules:
- summary:   Concatenate per-year frames and pivot month x year counts
- geography: State filtering and sentinel-coordinate cleaning
"""

from .summary import summarize_frames, summary_to_mapping
from .geography import (
    bounding_box,
    filter_state,
    sanitize_coordinates,
    state_codes,
    validate_columns,
)

__all__ = [
    'summarize_frames',
    'summary_to_mapping',
    'bounding_box',
    'filter_state',
    'sanitize_coordinates',
    'state_codes',
    'validate_columns',
]
