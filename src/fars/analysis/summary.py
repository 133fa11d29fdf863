"""
FARS Month/Year Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is a list of per-year DataFrames (``None`` for skipped years);
output is a wide month x year count table.

Package Location: src/fars/analysis/summary.py

Sparse cells:
    A year with no accidents in a month has no (year, MONTH) group, so the
    pivoted cell is ``<NA>`` rather than 0.  Counts use the nullable
    ``Int64`` dtype to keep integers alongside missing cells.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import pandas as pd


def summarize_frames(frames: Sequence[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per (year, MONTH) and pivot years into columns.

    Args:
        frames: Per-year DataFrames with columns ``[MONTH, year]``.
            ``None`` entries contribute no rows.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending, only months present)
        with one ``Int64`` column per year present (ascending).  Cells are
        ``<NA>`` where a year had no rows for that month.  When every
        frame is ``None`` the result has no rows and no columns.
    """
    present = [df for df in frames if df is not None]
    if not present:
        return _empty_summary()

    combined = pd.concat(present, ignore_index=True)
    if combined.empty:
        return _empty_summary()

    counts = combined.groupby(["year", "MONTH"]).size()

    wide = counts.unstack("year").sort_index().sort_index(axis=1)
    wide = wide.astype("Int64")
    wide.index.name = "MONTH"
    wide.columns.name = "year"
    return wide


def summary_to_mapping(summary: pd.DataFrame) -> Dict[int, Dict[int, int]]:
    """
    Materialise a summary table as ``{month: {year: count}}``.

    Missing cells are omitted, so a year with no accidents in a month is
    absent from that month's inner dict rather than mapped to 0.
    """
    result: Dict[int, Dict[int, int]] = {}
    for month, row in summary.iterrows():
        result[int(month)] = {
            int(year): int(count)
            for year, count in row.items()
            if not pd.isna(count)
        }
    return result


def _empty_summary() -> pd.DataFrame:
    empty = pd.DataFrame(index=pd.Index([], name="MONTH", dtype="int64"))
    empty.columns.name = "year"
    return empty


