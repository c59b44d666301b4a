"""Console entry point for the tour."""

from __future__ import annotations

import argparse
import sys

from . import checklist
from .console import TITLE, banner, setup_logging, use_color


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typetour",
        description="Print a tour of primitive and reference type semantics.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log progress to stderr",
    )
    parser.add_argument(
        "--color",
        choices=("auto", "always", "never"),
        default="auto",
        help="colour the title line (default: auto)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the whole tour once, writing it to stdout."""

    args = build_parser().parse_args(argv)
    logger = setup_logging(verbose=args.verbose)

    print(banner(TITLE, color=use_color(args.color)))
    checklist.run_all()
    logger.debug("tour finished: %d topics", len(checklist.MODULES))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI passthrough only
    sys.exit(main())
