"""
pyfars - Fatality Analysis Reporting System accident file utilities

Loads the NHTSA FARS yearly accident files, summarises accident counts
by month and year, and maps accident locations for a single state using
the Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file naming, CSV loading, batch reads)
- analysis/ : Functional Core (pure DataFrame transformations)
- plotting/ : (plotting functions)
- reports/  : (load + validate + plot orchestration)
"""

__version__ = "0.1.0"
