# Minimal CLI using argparse that builds a chain from arguments and prints it.
from __future__ import annotations

import argparse
import logging
import sys

from ordered_chain.chain import OrderedChain
from ordered_chain.config import RenderStyle
from ordered_chain.errors import OutOfBoundsError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ordered-chain", description="Build a singly-linked chain and render it"
    )
    p.add_argument("values", nargs="*", help="Initial values, head first")
    p.add_argument(
        "--push", action="append", default=[], metavar="VALUE", help="Push a value onto the head"
    )
    p.add_argument(
        "--insert",
        action="append",
        nargs=2,
        default=[],
        metavar=("INDEX", "VALUE"),
        help="Insert VALUE so that INDEX values precede it",
    )
    p.add_argument("--pop", type=int, default=0, metavar="N", help="Pop N values from the head")
    p.add_argument("--separator", type=str, default=" -> ", help="Separator between values")
    p.add_argument("--sentinel", type=str, default="None", help="Terminal token")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    style = RenderStyle(separator=args.separator, sentinel=args.sentinel)
    chain: OrderedChain[str] = OrderedChain.from_sequence(args.values, style=style)

    for value in args.push:
        chain.push(value)

    for raw_index, value in args.insert:
        try:
            chain.insert(int(raw_index), value)
        except ValueError:
            print(f"Error: insert index must be an integer, got {raw_index!r}", file=sys.stderr)
            return 2
        except OutOfBoundsError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    for _ in range(args.pop):
        value = chain.pop()
        if value is None:
            break
        print(f"popped: {value}")

    print(chain.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
