"""
heapkit Command-Line Interface (CLI)

Runs the heap algorithms over values given on the command line and prints
the resulting sequence. Each subcommand maps onto one algorithm (or, for
`heapsort`, a two-stage pipeline).

Usage examples:
    python -m heapkit.cli make 3 1 4 1 5 9 2 6
    python -m heapkit.cli heapsort --descending 3 1 4 1 5
    python -m heapkit.cli push 9 5 4 1 1 3 2 7
    python -m heapkit.cli check --type float 9 5.5 4
"""

import argparse
import logging
import sys

from . import config
from .algorithms import is_heap, make_heap, natural, pop_heap, push_heap, reverse, sort_heap

logger = logging.getLogger(__name__)

# Value parsers selectable with --type
VALUE_TYPES = {
    "int": int,
    "float": float,
    "str": str,
}


# -------------------------------------------------------------------
# Utility: parse and print values
# -------------------------------------------------------------------
def parse_values(raw, type_name):
    """Convert raw command-line strings to the selected element type."""
    convert = VALUE_TYPES[type_name]
    return [convert(v) for v in raw]


def print_values(values):
    """Print values on one line, separated by spaces."""
    print(" ".join(str(v) for v in values))


def ordering(args):
    """Pick the predicate implied by --descending."""
    return reverse(natural) if args.descending else natural


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_make(args, values):
    """Arrange values into a max-heap."""
    print_values(values | make_heap(ordering(args)))
    return 0


def cmd_push(args, values):
    """Push the last value into the heap formed by the others."""
    print_values(values | push_heap(ordering(args)))
    return 0


def cmd_pop(args, values):
    """Move the heap maximum to the end of the sequence."""
    print_values(values | pop_heap(ordering(args)))
    return 0


def cmd_sort(args, values):
    """Sort values that already form a heap."""
    print_values(values | sort_heap(ordering(args)))
    return 0


def cmd_heapsort(args, values):
    """Build a heap, then sort it."""
    less = ordering(args)
    print_values(values | make_heap(less) | sort_heap(less))
    return 0


def cmd_check(args, values):
    """Report whether values form a heap; exit status 1 if not."""
    ok = is_heap(values, ordering(args))
    print(ok)
    return 0 if ok else 1


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--type", choices=sorted(VALUE_TYPES), default="int", help="Element type (default: int)")
    common.add_argument("--descending", action="store_true", help="Use the reversed (min-heap) ordering")
    common.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default: $HEAPKIT_LOG_LEVEL or WARNING)")
    common.add_argument("values", nargs="*")

    p = argparse.ArgumentParser(prog="heapkit", description="In-place binary heap algorithms")
    sub = p.add_subparsers(dest="cmd", required=True)

    commands = [
        ("make", "Build a heap from the values", cmd_make),
        ("push", "Push the last value into the heap formed by the rest", cmd_push),
        ("pop", "Move the heap maximum to the last position", cmd_pop),
        ("sort", "Sort values that already form a heap", cmd_sort),
        ("heapsort", "Build a heap then sort it", cmd_heapsort),
        ("check", "Check whether the values form a heap", cmd_check),
    ]
    for name, help_text, func in commands:
        s = sub.add_parser(name, help=help_text, parents=[common])
        s.set_defaults(func=func)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point; returns the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config.configure_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    try:
        values = parse_values(args.values, args.type)
    except ValueError as e:
        parser.error(f"invalid {args.type} value: {e}")

    logger.debug(f"{args.cmd}: {len(values)} values, descending={args.descending}")
    return args.func(args, values)


if __name__ == "__main__":
    sys.exit(main())
