"""
CLI interface for the mana curve builder.

Implements the command:
manacurve [LAND [RAISE_CURVE [MAX_COST [RESERVED [DECK_SIZE [HAND_SIZE]]]]]] \
  --preset aggro --table --plot --verbose
"""

import argparse
import sys
import time
from typing import List, Optional

from deck_rules.defaults import DEFAULTS
from deck_rules.deck_config import DeckConfig
from deck_rules.presets import PRESETS, get_preset
from curve_engine.curve_builder import CurveBuilder
from curve_engine.report_rendering import format_report, curve_frame, summary_frame

POSITIONAL_FIELDS = ("land", "raise_curve", "max_cost", "reserved", "deck_size", "hand_size")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build a statistically optimal mana curve"
    )

    parser.add_argument(
        "values",
        nargs="*",
        metavar="N",
        help=(
            "Positional values in order: " + " ".join(f.upper() for f in POSITIONAL_FIELDS)
            + ". Anything that is not an integer falls back to its default."
        )
    )

    parser.add_argument(
        "--preset",
        type=str,
        help="Start from an archetype preset (aggro, midrange, control, limited, clear)"
    )

    parser.add_argument(
        "--table",
        action="store_true",
        help="Print pandas tables instead of the text report"
    )

    parser.add_argument(
        "--plot",
        action="store_true",
        help="Show a bar chart of the curve"
    )

    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the available presets and exit"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    return parser.parse_args(argv)


def parse_int_value(raw: str) -> Optional[int]:
    """Lenient integer parse; malformed input means "not supplied"."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def resolve_config(values: List[str], preset_name: Optional[str] = None) -> DeckConfig:
    """Merge positional values over a preset (or the defaults)."""
    if len(values) > len(POSITIONAL_FIELDS):
        raise ValueError(
            f"Too many values: got {len(values)}, expected at most {len(POSITIONAL_FIELDS)}"
        )

    overrides = {
        field: parse_int_value(raw) for field, raw in zip(POSITIONAL_FIELDS, values)
    }

    if preset_name:
        return get_preset(preset_name).to_config(**overrides)
    return DeckConfig.from_values(**overrides)


def progress_callback(processed: int, total: int) -> None:
    """Print progress updates."""
    if processed % max(1, total // 20) == 0 or processed == total:
        percent = 100.0 * processed / total
        print(f"Grid rows: {processed}/{total} ({percent:.1f}%)")


def print_presets() -> None:
    print("Available presets:")
    for preset in PRESETS.values():
        summary = preset.to_config()
        print(f"  {preset.name.value:<9} {summary}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_arguments(argv)

    if args.list_presets:
        print_presets()
        return 0

    config = resolve_config(args.values, args.preset)

    if args.verbose:
        print(f"Mana Curve Builder")
        print(f"Preset: {args.preset or 'none'}")
        print(f"Config: {config}")
        print(f"Mana ceiling without land: {DEFAULTS.hs_mana_max}")
        print()

    builder = CurveBuilder()

    start_time = time.time()
    report = builder.deck_stats(
        config,
        progress_callback=progress_callback if args.verbose else None
    )
    computation_time = time.time() - start_time

    if args.verbose:
        print(f"Curve built in {computation_time:.2f} seconds\n")

    if args.table:
        print(summary_frame(report).to_string())
        print()
        print(curve_frame(report).to_string(index=False))
    else:
        print(format_report(report))

    if args.plot:
        import matplotlib.pyplot as plt
        from curve_engine.plotting import plot_curve

        plot_curve(report, title=f"{args.preset.capitalize()} curve" if args.preset else None)
        plt.show()

    return 0


def cli_entry_point():
    """Entry point for setuptools console script."""
    try:
        exit_code = main()
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        if "--verbose" in sys.argv or "-v" in sys.argv:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    cli_entry_point()
