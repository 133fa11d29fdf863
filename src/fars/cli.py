"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years 2013 2014 [...]     Month x year accident counts
    fars map --state <n> --year <yyyy> [...]   Accident map for one state

The package must be installed (``pip install -e .``) for the ``fars``
entry point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .data.reader import DEFAULT_DATA_DIR, resolve_data_dir
from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


def _data_dir(args: argparse.Namespace) -> Path:
    """Resolve ``--data-dir`` and exit if the directory does not exist."""
    data_dir = resolve_data_dir(args.data_dir)
    if not data_dir.is_dir():
        _die(
            f"Data directory not found: {data_dir}\n"
            f"Tip: pass --data-dir pointing at the folder of "
            f"accident_<year>.csv.bz2 files."
        )
    return data_dir


# ===========================================================================
# Subcommand handlers
# ===========================================================================

# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (or save) accident counts per month for the requested years.

    Years that cannot be loaded are reported as warnings and left out of
    the table.  Exits with status 1 only when no year could be loaded.

    Args:
        args: Parsed CLI arguments.
    """
    from .data.summary import summarize_years

    data_dir = _data_dir(args)
    print(f"\n📊  Summarising {', '.join(args.years)}")
    print(f"    Data: {data_dir}")

    summary = summarize_years(args.years, data_dir=data_dir)

    if summary.empty:
        _die("none of the requested years could be loaded")

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(out_path)
        print(f"\n✅  Summary saved → {out_path}")
    else:
        print()
        print(summary.to_string(na_rep="-"))


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------

def handle_map(args: argparse.Namespace) -> None:
    """Write an HTML accident map for one state and year.

    Args:
        args: Parsed CLI arguments.
    """
    from .reports.state_map import InvalidStateError, plot_state

    data_dir = _data_dir(args)
    out_path = Path(args.output or f"state_{args.state}_{args.year}.html")

    print(f"\n🗺️   Mapping state {args.state} for {args.year}")
    try:
        fig = plot_state(
            args.state, args.year, data_dir=data_dir, output_path=out_path
        )
    except (FileNotFoundError, InvalidStateError) as exc:
        _die(str(exc))

    if fig is not None:
        print(f"\n✅  Map saved → {out_path}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System accident files\n"
            "Monthly summaries and per-state accident maps."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable DEBUG logging.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )

    # Shared by both subcommands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help=(
            "Folder containing accident_<year>.csv.bz2 files "
            f"(default: {DEFAULT_DATA_DIR})."
        ),
    )

    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        parents=[common],
        help="Count accidents per month for one or more years.",
        description=(
            "Count accidents per month for each year and print a table with\n"
            "one row per month and one column per year.\n\n"
            "Years whose file is missing are skipped with a warning."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="CSV",
        help="Write the table to this CSV file instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        parents=[common],
        help="Plot one state's accidents for a year on a map.",
        description=(
            "Plot the accident locations of a single state for one year.\n"
            "Unknown coordinates are left off the map."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        type=int,
        metavar="N",
        help="FARS STATE code, e.g. 6 for California.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=int,
        metavar="YYYY",
        help="Year of the accident file to load.",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="HTML",
        help="Output HTML path (default: state_<N>_<YYYY>.html).",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        json_format=args.log_json,
    )
    args.func(args)


if __name__ == "__main__":
    main()
