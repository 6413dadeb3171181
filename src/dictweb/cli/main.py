"""
dictweb CLI.
"""

import argparse
from dictweb.cli.commands import serve, lookup, cache


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dictweb", description="Dictionary lookup web front-end")
    subparsers = parser.add_subparsers(dest="command")

    serve.add_subparser(subparsers)
    lookup.add_subparser(subparsers)
    cache.add_subparser(subparsers)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
