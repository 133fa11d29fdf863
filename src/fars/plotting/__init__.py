"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no side effects.
Every public function accepts DataFrames and returns a
``plotly.graph_objects.Figure``.

Modules:
    state_map: Accident locations for one state on a geo map scoped to
               the bounding box of the known coordinates.
"""

from .state_map import plot_state_points

__all__ = [
    'plot_state_points',
]
