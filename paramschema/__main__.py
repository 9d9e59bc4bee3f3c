"""Entry point: python -m paramschema module:Controller

Writes a JSON schema and an editor page per controller action.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .codegen import generate
from .loader import action_routes, load_controller


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="python -m paramschema")
    parser.add_argument("controller", help="controller class as 'module:ClassName'")
    parser.add_argument("--route", action="append", dest="routes",
                        help="route to render (repeatable, default: every action)")
    parser.add_argument("--output", type=Path, help="output directory")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        controller_cls = load_controller(args.controller)
    except (ImportError, AttributeError, TypeError, ValueError) as e:
        print(f"error: cannot load controller {args.controller!r}: {e}", file=sys.stderr)
        return 1

    routes = args.routes or action_routes(controller_cls)
    generate(controller_cls(), routes, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
