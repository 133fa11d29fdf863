"""
FARS State Filtering and Coordinate Cleaning (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/geography.py

Sentinel Rule:
    FARS encodes unknown / not-applicable coordinates as out-of-range
    values (e.g. LATITUDE 99.9999, LONGITUD 999.9999).  Any LATITUDE
    above 90 or LONGITUD above 900 is replaced by NaN before a location is
    used, so sentinel values never reach a bounding box or a plotted point.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LATITUDE_SENTINEL: float = 90.0
LONGITUDE_SENTINEL: float = 900.0

LOCATION_COLUMNS: List[str] = ["STATE", "LATITUDE", "LONGITUD"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_columns(df: pd.DataFrame, required: List[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"accident table is missing required columns: {missing}")


def state_codes(df: pd.DataFrame) -> List[int]:
    """Return the sorted distinct integral ``STATE`` codes present in *df*."""
    codes = pd.to_numeric(df["STATE"], errors="coerce").dropna()
    codes = codes[codes == codes.round()].unique()
    return sorted(int(c) for c in codes)


def filter_state(df: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """Return the rows of *df* whose numeric ``STATE`` equals *state_num*.

    ``STATE`` is coerced the same way as in :func:`state_codes`, so a code
    reported there always selects at least one row.
    """
    codes = pd.to_numeric(df["STATE"], errors="coerce")
    return df.loc[codes == state_num].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Args:
        df: DataFrame with ``LATITUDE`` and ``LONGITUD`` columns.

    Returns:
        Copy of *df* with float coordinate columns; values above the
        sentinel thresholds are NaN.
    """
    out = df.copy()
    lat = pd.to_numeric(out["LATITUDE"], errors="coerce").astype(float)
    lon = pd.to_numeric(out["LONGITUD"], errors="coerce").astype(float)
    out["LATITUDE"] = lat.where(lat <= LATITUDE_SENTINEL, np.nan)
    out["LONGITUD"] = lon.where(lon <= LONGITUDE_SENTINEL, np.nan)
    return out


def bounding_box(df: pd.DataFrame) -> Optional[Tuple[float, float, float, float]]:
    """
    Compute the extent of rows whose coordinates are both known.

    A row with a sentinel on either axis is excluded entirely, so it
    cannot widen the box along its other, valid axis.

    Returns:
        ``(lat_min, lat_max, lon_min, lon_max)``, or ``None`` when no row
        has both coordinates.
    """
    known = df.dropna(subset=["LATITUDE", "LONGITUD"])
    if known.empty:
        return None
    lat, lon = known["LATITUDE"], known["LONGITUD"]
    return float(lat.min()), float(lat.max()), float(lon.min()), float(lon.max())
