"""
FARS Summary Engine (Imperative Shell)

Reads a batch of year files through ``reader.read_years`` and delegates
counting and pivoting to the Functional Core (analysis/summary.py).

Package Location: src/fars/data/summary.py

Invalid years:
    A requested year that cannot be loaded is logged by the reader and
    simply does not appear as a column.  It is never zero-filled.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from .reader import read_years
from ..analysis.summary import summarize_frames

logger = logging.getLogger(__name__)


def summarize_years(
    years: Iterable[Union[int, str]],
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Args:
        years: Years to summarise.  Years whose file is missing or
            unreadable are skipped with a warning.
        data_dir: Directory holding the year files.

    Returns:
        DataFrame indexed by ``MONTH`` with one nullable-integer column per
        valid year (ascending).  Empty when no requested year was valid.

    Example::

        from fars.data import summarize_years

        summarize_years([2013, 2014, 2015])
        # year   2013  2014  2015
        # MONTH
        # 1      2230  2168  2368
        # ...
    """
    years = list(years)
    frames, skipped = read_years(years, data_dir=data_dir)
    summary = summarize_frames(frames)

    if skipped:
        logger.info(
            f"Summarised {len(years) - len(skipped)}/{len(years)} years; "
            f"skipped {', '.join(str(s.year) for s in skipped)}",
            extra={"skipped_years": [s.year for s in skipped]},
        )
    return summary
