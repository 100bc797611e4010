"""Entry point for autocolor CLI."""

import sys

from autocolor.cli import build_parser
from autocolor.cli._common import setup_logging


def main():
    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
