"""
Command line driver for the preset L-systems.

    lsystem list
    lsystem generate branching --seed 7
    lsystem render hexgosper --generations 3 --thick --out gosper.npy
"""

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from stochastic_l_systems.canvas import rasterize, to_array
from stochastic_l_systems.errors import LSystemError
from stochastic_l_systems.presets import (LSYSTEM_PRESETS, THICK_LINES, THIN_LINES,
                                          build_lsystem, get_preset, turtle_for)
from stochastic_l_systems.prng import XorShift128
from stochastic_l_systems.turtle_graphics import interpret

logger = logging.getLogger(__name__)


def _generate(args: argparse.Namespace):
    preset = get_preset(args.name)
    rng = XorShift128(args.seed)
    lsys = build_lsystem(args.name, rng=rng)
    generations = preset["generations"] if args.generations is None else args.generations

    lsys.generate(generations)
    logger.info("%s: %d symbols after %d generations (seed %d)",
                args.name, len(lsys.result), generations, rng.seed_value)
    return lsys


def cmd_list(args: argparse.Namespace) -> None:
    for name, preset in LSYSTEM_PRESETS.items():
        kind = "stochastic" if any(p < 1 for _, _, p in preset["rules"]) else "deterministic"
        print(f"{name:<12} {kind:<14} {preset['description']}")


def cmd_generate(args: argparse.Namespace) -> None:
    lsys = _generate(args)
    print(lsys.summary(), end="")
    if not args.quiet_string:
        print(lsys.result)


def cmd_render(args: argparse.Namespace) -> None:
    lsys = _generate(args)
    pen_width = THICK_LINES if args.thick else THIN_LINES
    desc = turtle_for(args.name, pen_width=pen_width)

    geometry = interpret(lsys.result, desc)
    b = geometry.bounds
    print(f"segments: {len(geometry)}")
    print(f"bounds: left={b.left} top={b.top} right={b.right} bottom={b.bottom} "
          f"({geometry.width}x{geometry.height})")

    if args.out:
        arr = to_array(rasterize(geometry))
        np.save(args.out, arr)
        print(f"Saved: {args.out}")


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lsystem",
        description="Generate stochastic L-systems and interpret them with turtle graphics.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    pl = sub.add_parser("list", help="list the preset L-systems")
    pl.set_defaults(func=cmd_list)

    for cmd, func, help_text in (
        ("generate", cmd_generate, "print the rules and the generated string"),
        ("render", cmd_render, "run the turtle over the generated string"),
    ):
        p = sub.add_parser(cmd, help=help_text)
        p.add_argument("name", help="preset name (see 'list')")
        p.add_argument("--generations", type=int, default=None,
                       help="number of generations (default: the preset's)")
        p.add_argument("--seed", type=int, default=None,
                       help="PRNG seed; omit or pass a negative value to seed from the timer")
        p.set_defaults(func=func)

    sub.choices["generate"].add_argument("--quiet-string", action="store_true",
                                         help="only print the rules, not the string")
    pr = sub.choices["render"]
    pr.add_argument("--thick", action="store_true", help="2 pixel lines instead of 1")
    pr.add_argument("--out", type=str, default=None, help="save the raster as a .npy array")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')
    # basicConfig leaves an already configured root logger alone
    logging.getLogger().setLevel(level)

    try:
        args.func(args)
    except LSystemError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
