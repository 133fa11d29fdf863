"""
FARS State Accident Map (Functional Core)

Pure function - no file I/O, no side effects.
Input: accident rows for one state and year with sentinel coordinates
already replaced by NaN (see ``analysis.geography.sanitize_coordinates``).
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Map scope:
    The geo subplot draws country and US state borders and is zoomed to
    the bounding box of the known coordinates plus a fixed margin.  Rows
    missing either coordinate are left off the map.  If no coordinate is
    known the figure keeps the default North America extent and carries
    no points.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.geography import bounding_box

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Degrees added on each side of the bounding box; a single point still
# gets a visible extent.
_MAP_MARGIN_DEG: float = 0.5

_POINT_STYLE: Dict[str, Any] = {'color': 'black', 'size': 3, 'opacity': 0.8}

_GEO_STYLE: Dict[str, Any] = {
    'projection_type': 'mercator',
    'showland':        True,
    'landcolor':       'white',
    'showcountries':   True,
    'countrycolor':    'gray',
    'showsubunits':    True,   # US state borders
    'subunitcolor':    'gray',
    'showlakes':       False,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_points(
    df_state: pd.DataFrame,
    title: Optional[str] = None,
) -> go.Figure:
    """
    Build an accident location map.

    Args:
        df_state: Accident rows with float ``LATITUDE`` / ``LONGITUD``
            columns; NaN marks an unknown coordinate.
        title: Optional figure title.

    Returns:
        ``plotly.graph_objects.Figure`` with one ``Scattergeo`` trace,
        ready for ``fig.show()`` or ``fig.write_html()``.
    """
    known = df_state.dropna(subset=['LATITUDE', 'LONGITUD'])

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lat=known['LATITUDE'],
        lon=known['LONGITUD'],
        mode='markers',
        marker=dict(**_POINT_STYLE),
        name='Accident',
        showlegend=False,
        hovertemplate=(
            "Lat: %{lat:.4f}<br>"
            "Lon: %{lon:.4f}<extra></extra>"
        ),
    ))

    geo = dict(_GEO_STYLE)
    box = bounding_box(df_state)
    if box is None:
        geo['scope'] = 'north america'
    else:
        lat_min, lat_max, lon_min, lon_max = box
        geo['lataxis'] = dict(range=[lat_min - _MAP_MARGIN_DEG, lat_max + _MAP_MARGIN_DEG])
        geo['lonaxis'] = dict(range=[lon_min - _MAP_MARGIN_DEG, lon_max + _MAP_MARGIN_DEG])

    fig.update_layout(
        title=title,
        geo=geo,
        margin=dict(l=10, r=10, t=50 if title else 10, b=10),
        template='plotly_white',
    )
    return fig
