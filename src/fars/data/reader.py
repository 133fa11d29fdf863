"""
FARS Year File Reader (Imperative Shell)

Resolves years to accident file names, loads them into DataFrames, and
reads batches of years while isolating per-year failures.

Package Location: src/fars/data/reader.py

File naming:
    One file per year under the data directory, named
    ``accident_<YYYY>.csv.bz2``.  The data directory defaults to
    ``~/rfars`` and is resolved at call-time so the module can be imported
    before the directory exists.

Failure policy:
    ``load`` / ``fars_read`` raise ``FileNotFoundError`` for a missing file.
    ``read_years`` / ``load_years`` are the only functions that downgrade a
    per-year failure: the year is logged as invalid and its slot becomes
    ``None`` so one bad year never aborts the batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import pandas as pd

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_DATA_DIR: str = "~/rfars"

_FILENAME_TEMPLATE: str = "accident_{year:d}.csv.bz2"

# Columns kept for each year of a batch read
_YEAR_COLUMNS: List[str] = ["MONTH", "year"]

# Exceptions that mark a single year as unusable inside a batch read.
# ParserError / EmptyDataError are ValueError subclasses; a corrupt bz2
# stream surfaces as OSError or EOFError.
_YEAR_FAILURES = (OSError, EOFError, ValueError, KeyError)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class SkippedYear:
    """A requested year that could not be loaded."""

    year: object
    reason: str


# ---------------------------------------------------------------------------
# Public API - single year
# ---------------------------------------------------------------------------

def resolve_data_dir(data_dir: Optional[PathLike] = None) -> Path:
    """Return the absolute data directory, expanding ``~``.

    Args:
        data_dir: Explicit directory.  Falls back to ``DEFAULT_DATA_DIR``.
    """
    return Path(data_dir if data_dir is not None else DEFAULT_DATA_DIR).expanduser()


def make_filename(year: Union[int, str]) -> str:
    """
    Build the accident file name for a year.

    Args:
        year: Four-digit year; strings such as ``"2013"`` are accepted.

    Returns:
        File name, e.g. ``"accident_2013.csv.bz2"``.

    Raises:
        ValueError: If *year* cannot be converted to an integer.
    """
    return _FILENAME_TEMPLATE.format(year=int(year))


def fars_read(filename: str, data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """
    Read one accident file from the data directory.

    Column names come from the header row; dtypes are whatever pandas
    infers.  Compression is inferred from the file suffix.

    Args:
        filename: Bare file name, e.g. ``"accident_2013.csv.bz2"``.
        data_dir: Directory holding the year files.

    Returns:
        DataFrame with one row per data row in the file.

    Raises:
        FileNotFoundError: If the file does not exist.  The message names
            *filename*.
    """
    path = resolve_data_dir(data_dir) / filename
    if not path.is_file():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    logger.debug("Reading %s", path, extra={"path": str(path)})
    # Older FARS files carry Latin-1 bytes in free-text columns.
    try:
        return pd.read_csv(path, low_memory=False, encoding="utf-8")
    except UnicodeDecodeError:
        logger.debug("Re-reading %s as latin-1", path, extra={"path": str(path)})
        return pd.read_csv(path, low_memory=False, encoding="latin-1")


def load(year: Union[int, str], data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """Load the full accident table for *year*.

    Raises:
        FileNotFoundError: If the year file is absent.
        ValueError: If *year* is not an integer.
    """
    return fars_read(make_filename(year), data_dir=data_dir)


# ---------------------------------------------------------------------------
# Public API - batches of years
# ---------------------------------------------------------------------------

def read_years(
    years: Iterable[Union[int, str]],
    data_dir: Optional[PathLike] = None,
) -> Tuple[List[Optional[pd.DataFrame]], List[SkippedYear]]:
    """
    Load several years, keeping only ``MONTH`` and a constant ``year`` column.

    Each year is loaded independently.  A year whose file is missing,
    unparseable, or lacks a ``MONTH`` column is logged as invalid and
    represented by ``None`` in the returned list.

    Args:
        years: Years to load, in the order the slots should be returned.
        data_dir: Directory holding the year files.

    Returns:
        Tuple ``(slots, skipped)``:

        **slots** - one entry per input year, input order preserved.
        Either a DataFrame with columns ``[MONTH, year]`` or ``None``.

        **skipped** - a :class:`SkippedYear` for every ``None`` slot.
    """
    slots: List[Optional[pd.DataFrame]] = []
    skipped: List[SkippedYear] = []

    for year in years:
        try:
            slots.append(_load_year_months(year, data_dir))
        except _YEAR_FAILURES as exc:
            logger.warning(f"invalid year: {year}", extra={"year": year, "reason": str(exc)})
            skipped.append(SkippedYear(year=year, reason=str(exc)))
            slots.append(None)

    return slots, skipped


def load_years(
    years: Iterable[Union[int, str]],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """Same as :func:`read_years` without the skipped-year diagnostics."""
    slots, _ = read_years(years, data_dir=data_dir)
    return slots


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _load_year_months(year: Union[int, str], data_dir: Optional[PathLike]) -> pd.DataFrame:
    df = load(year, data_dir=data_dir)
    if "MONTH" not in df.columns:
        raise KeyError(f"column 'MONTH' missing from {make_filename(year)}")
    df = df.assign(year=int(year))
    return df.loc[:, _YEAR_COLUMNS]
