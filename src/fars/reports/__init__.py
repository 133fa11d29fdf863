"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, validation, plot generation, and HTML output.
No analysis logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    state_map: plot_state() and InvalidStateError.
"""

from .state_map import InvalidStateError, plot_state

__all__ = [
    'InvalidStateError',
    'plot_state',
]
