"""Command-line front door for dirsize.

Parses CLI options, measures each path argument, and prints one sorted
report per argument. Missing or unreadable arguments are reported and
skipped; every argument is attempted.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .errors import ListError, NotFoundError
from .logs import configure_logging
from .report import render_missing, render_report, render_unreadable
from .size_model import TraversalResult, compute_size, compute_size_parallel
from .sorting import SortConfig, sort_config_from_flags, sort_entries
from .ui_theme import UITheme, available_theme_names, color_enabled, resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``dirsize`` command."""
    parser = argparse.ArgumentParser(
        prog="dirsize",
        usage="%(prog)s [OPTION]... [DIR]...",
        description="Summarize size of directories and files in directories.",
    )
    parser.add_argument("paths", nargs="*", metavar="DIR", help="Directories or files to summarize.")
    parser.add_argument("-a", dest="by_alphabet", action="store_true", help="sort by Alphabet.")
    parser.add_argument("-s", dest="by_size", action="store_true", help="sort by Size (default).")
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument("-r", dest="reverse", action="store_true", help="reverse order while sorting.")
    direction.add_argument(
        "--no-reverse",
        action="store_true",
        help="Ignore a saved reverse default for this run.",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=_positive_int,
        default=None,
        help="Measure top-level directories with up to N worker threads (default: 1).",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links below each argument instead of sizing the links.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        choices=available_theme_names(),
        default=None,
        help="UI theme name.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the current sort, theme, and jobs settings as defaults.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0, help="Show more skipped-entry detail.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only report errors on stderr.")
    return parser


def measure_path(path: Path, jobs: int = 1, follow_symlinks: bool = False) -> TraversalResult:
    """Measure one argument, using the worker pool when ``jobs > 1``."""
    if jobs > 1:
        return compute_size_parallel(path, True, max_workers=jobs, follow_symlinks=follow_symlinks)
    return compute_size(path, True, follow_symlinks=follow_symlinks)


def summarize_path(
    path_label: str,
    sort_config: SortConfig,
    theme: UITheme,
    jobs: int = 1,
    follow_symlinks: bool = False,
) -> tuple[list[str], bool]:
    """Return ``(report_lines, ok)`` for one path argument."""
    try:
        result = measure_path(Path(path_label), jobs=jobs, follow_symlinks=follow_symlinks)
    except NotFoundError:
        return [render_missing(path_label, theme)], False
    except (PermissionError, ListError) as exc:
        logger.error("cannot read %s: %s", path_label, exc.strerror or exc)
        return [render_unreadable(path_label, exc.strerror or exc, theme)], False

    if result.issues:
        logger.info("%s: %d entries skipped", path_label, len(result.issues))
    entries = sort_entries(result.entries, sort_config)
    return render_report(path_label, result.total_size, entries, theme), True


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and print one report per path argument.

    Returns ``0`` when every argument was summarized and ``1`` when any
    argument was missing or unreadable.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(-1 if args.quiet else args.verbose)

    defaults = config.load_defaults()
    sort_config = sort_config_from_flags(
        args.by_alphabet,
        args.by_size,
        False if args.no_reverse else (args.reverse or defaults.reverse),
        default_by_alphabet=defaults.sort == config.SORT_BY_NAME,
    )
    jobs = args.jobs if args.jobs is not None else defaults.jobs
    theme_name = args.theme if args.theme is not None else defaults.theme

    if args.save_defaults:
        saved = config.save_defaults(
            config.Defaults(
                sort=config.SORT_BY_NAME if sort_config.by_alphabet else config.SORT_BY_SIZE,
                reverse=sort_config.reverse,
                theme=theme_name,
                jobs=jobs,
            )
        )
        if not saved:
            logger.warning("could not write config file %s", config.CONFIG_PATH)

    if not args.paths:
        if not args.save_defaults:
            parser.print_help()
        return 0

    theme = resolve_theme(theme_name, no_color=not color_enabled(sys.stdout, args.no_color))
    all_ok = True
    for path_label in args.paths:
        lines, ok = summarize_path(
            path_label,
            sort_config,
            theme,
            jobs=jobs,
            follow_symlinks=args.follow_symlinks,
        )
        all_ok = all_ok and ok
        sys.stdout.write("\n" + "\n".join(lines) + "\n")
        sys.stdout.flush()
    return 0 if all_ok else 1
