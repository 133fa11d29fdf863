"""Shared fixtures: small bz2-compressed FARS accident files in a temp dir."""

from pathlib import Path

import pandas as pd
import pytest


def write_year(data_dir: Path, year: int, rows: list) -> Path:
    """Write ``rows`` (list of dicts) as ``accident_<year>.csv.bz2``."""
    path = data_dir / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows).to_csv(path, index=False, compression="bz2")
    return path


def _row(state, month, lat, lon, case):
    return {
        "STATE": state,
        "ST_CASE": case,
        "MONTH": month,
        "DAY": 1,
        "LATITUDE": lat,
        "LONGITUD": lon,
        "FATALS": 1,
    }


@pytest.fixture
def data_dir(tmp_path):
    """Two valid years (2013, 2014) on disk; 2015 is intentionally missing.

    2013: Alabama (1) x3 in Jan/Jan/Feb, Alaska (2) x2 in Mar; one Alaska
          row has sentinel coordinates on both axes.
    2014: Alabama (1) x1 in Feb, Arizona (4) x1 in Dec.
    """
    write_year(tmp_path, 2013, [
        _row(1, 1, 32.5, -86.6, 10001),
        _row(1, 1, 33.1, -87.2, 10002),
        _row(1, 2, 31.0, -85.5, 10003),
        _row(2, 3, 61.2, -149.9, 20001),
        _row(2, 3, 99.9999, 999.9999, 20002),
    ])
    write_year(tmp_path, 2014, [
        _row(1, 2, 32.0, -86.0, 10001),
        _row(4, 12, 33.4, -112.0, 40001),
    ])
    return tmp_path
