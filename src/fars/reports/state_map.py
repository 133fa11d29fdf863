"""
FARS State Map Report (Imperative Shell)

Thin orchestration layer: loads one year file, validates the requested
state, filters and cleans the rows, calls the plotting function, and
optionally writes HTML.

Package Location: src/fars/reports/state_map.py

Usage::

    from fars.reports import plot_state

    fig = plot_state(6, 2013, output_path="state_6_2013.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import plotly.graph_objects as go

from ..analysis.geography import (
    LOCATION_COLUMNS,
    filter_state,
    sanitize_coordinates,
    state_codes,
    validate_columns,
)
from ..data.reader import load
from ..plotting.state_map import plot_state_points

logger = logging.getLogger(__name__)


class InvalidStateError(ValueError):
    """Raised when a state code does not occur in the loaded year."""


def plot_state(
    state_num: Union[int, str],
    year: Union[int, str],
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state for one year.

    Args:
        state_num: FARS ``STATE`` code, e.g. ``6`` for California.
        year: Year whose file is loaded.
        data_dir: Directory holding the year files.
        output_path: When given, the figure is also written there as HTML.

    Returns:
        The figure, or ``None`` when the state has no accidents to plot.

    Raises:
        FileNotFoundError: If the year file is absent.
        InvalidStateError: If *state_num* is not a ``STATE`` value in the
            year's data.
        ValueError: If the file lacks ``STATE``, ``LATITUDE`` or
            ``LONGITUD``.
    """
    data = load(year, data_dir=data_dir)
    validate_columns(data, required=LOCATION_COLUMNS)

    try:
        state_num = int(state_num)
    except (TypeError, ValueError):
        raise InvalidStateError(f"invalid STATE number: {state_num}") from None

    if state_num not in state_codes(data):
        raise InvalidStateError(f"invalid STATE number: {state_num}")

    df_state = filter_state(data, state_num)
    # Unreachable after the state_codes check; kept so an empty selection
    # still ends in a notice rather than an empty map.
    if df_state.empty:
        print("no accidents to plot")
        return None

    df_state = sanitize_coordinates(df_state)
    n_unknown = int(df_state[['LATITUDE', 'LONGITUD']].isna().any(axis=1).sum())
    if n_unknown:
        logger.debug(
            f"{n_unknown} of {len(df_state)} accidents have unknown coordinates",
            extra={"state": state_num, "year": year},
        )

    fig = plot_state_points(
        df_state,
        title=f"FARS accidents – state {state_num}, {int(year)}",
    )

    if output_path is not None:
        out_path = Path(output_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path))
        logger.info(f"State map saved → {out_path}", extra={"path": str(out_path)})

    return fig
