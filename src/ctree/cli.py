#!/usr/bin/env python3
"""Print the colored tree."""

import argparse
import logging
import random
import sys
import time
from typing import Optional, Sequence

from .options import DEFAULT_OPTIONS, DEFAULT_STAR
from .tree import render_tree

LOG = logging.getLogger("ctree")


def setup_logging(debug: bool, log_path: str | None = None) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    LOG.setLevel(logging.DEBUG if log_path else level)

    handlers: list[logging.Handler] = []

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handlers.append(sh)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        handlers.append(fh)

    LOG.handlers[:] = handlers
    LOG.propagate = False  # prevent double logging via root logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ctree", description="Print a decorated tree with colored lights"
    )

    star = parser.add_argument_group("star glyphs")
    star.add_argument("--top", default=DEFAULT_STAR["TOP"], help="Glyph above the star")
    star.add_argument(
        "--tree-star", default=DEFAULT_STAR["TREE_STAR"], help="Glyph for the star itself"
    )
    star.add_argument("--left", default=DEFAULT_STAR["LEFT"], help="Glyph left of the star")
    star.add_argument("--right", default=DEFAULT_STAR["RIGHT"], help="Glyph right of the star")
    star.add_argument("--bottom", default=DEFAULT_STAR["BOTTOM"], help="Glyph below the star")

    parser.add_argument(
        "--balls", default=DEFAULT_OPTIONS["balls"], help="Glyph for every light"
    )
    parser.add_argument(
        "--stars", default=DEFAULT_OPTIONS["stars"], help="Glyph for the stars in the tree"
    )
    parser.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed the light colors for repeatable output"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log", default=None, metavar="FILE", help="Also log to FILE")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    t0 = time.perf_counter()
    setup_logging(args.debug, args.log)
    LOG.debug("Args: output=%s seed=%s", args.output, args.seed)

    options = {
        "star": {
            "TOP": args.top,
            "TREE_STAR": args.tree_star,
            "LEFT": args.left,
            "RIGHT": args.right,
            "BOTTOM": args.bottom,
        },
        "balls": args.balls,
        "stars": args.stars,
    }
    rng = random.Random(args.seed) if args.seed is not None else None

    text = render_tree(options, rng=rng)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as out:
            out.write(text)
    else:
        sys.stdout.write(text)

    LOG.debug("Done in %.3fs", time.perf_counter() - t0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
