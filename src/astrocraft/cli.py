"""Command line interface for generating Astro components, layouts and APIs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import COMMAND_ALIASES, Command, ProjectLayout, ScaffoldRequest
from .core.documents import HTTP_METHODS
from .core.errors import CraftError
from .scaffold import ItemScaffolder

LOGGER = logging.getLogger(__name__)

EPILOG = """\
examples:
  astro-craft add-component Button Card -p home   create components and add them to a page
  astro-craft -c Button Card                      create components only
  astro-craft add-layout MainLayout -p about      create a layout and wrap a page with it
  astro-craft add-api UserAPI -m POST             create an API endpoint with a POST handler
  astro-craft -a UserAPI ProductAPI               create several API endpoints
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="astro-craft",
        description="Generate Astro components, layouts and API endpoints",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "command",
        choices=[command.value for command in Command],
        help="What to create. The aliases -c, -l and -a are accepted in this position.",
    )
    parser.add_argument("items", nargs="*", metavar="item", help="Names of the items to create")
    parser.add_argument("-p", "--page", help="Page to add the created components or layouts to")
    parser.add_argument(
        "-m",
        "--method",
        default="GET",
        help=f"HTTP method for API endpoints, one of {', '.join(HTTP_METHODS)} (default: GET)",
    )
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Project root containing the src directory (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log merge decisions")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    arguments = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not arguments:
        parser.print_help()
        return 0

    # Aliases look like options, so they are rewritten before argparse sees them.
    arguments[0] = COMMAND_ALIASES.get(arguments[0], arguments[0])
    args = parser.parse_intermixed_args(arguments)
    _configure_logging(args.verbose)

    try:
        request = ScaffoldRequest.from_args(args.command, args.items, page=args.page, method=args.method)
        layout = ProjectLayout(args.root) if args.root is not None else ProjectLayout()
        ItemScaffolder(layout).run(request)
    except (CraftError, OSError) as exc:
        LOGGER.debug("Aborting run", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
