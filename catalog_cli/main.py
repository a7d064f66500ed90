"""Main entry point for the catalog CLI."""
from __future__ import annotations

import sys

from catalog_cli import __version__
from catalog_cli.client import ApiClient
from catalog_cli.config import Config
from catalog_cli.repl import Repl


def print_help():
    """Print help message."""
    print(f"""
Catalog CLI v{__version__}

Usage:
  catalog [options]

Options:
  --api-url URL     Override API endpoint (default: http://localhost:8000)
  -h, --help        Show this help
  -v, --version     Show version

Environment:
  CATALOG_API_URL   Override API endpoint (--api-url wins)

Type /help inside the REPL for its commands.
""")


def parse_args(args: list[str]) -> dict:
    """
    Parse command line arguments.

    Returns dict with:
        api_url: str | None
        show_help: bool
        show_version: bool
    """
    result = {
        "api_url": None,
        "show_help": False,
        "show_version": False,
    }

    i = 0
    while i < len(args):
        arg = args[i]

        if arg == "--api-url":
            if i + 1 < len(args):
                result["api_url"] = args[i + 1]
                i += 1
            else:
                print("Error: --api-url requires a URL")
                sys.exit(1)
        elif arg in ("--help", "-h"):
            result["show_help"] = True
        elif arg in ("--version", "-v"):
            result["show_version"] = True
        else:
            print(f"Unknown option: {arg}")
            print("Run 'catalog --help' for usage.")
            sys.exit(1)

        i += 1

    return result


def main():
    """Main entry point."""
    args = parse_args(sys.argv[1:])

    if args["show_help"]:
        print_help()
        return

    if args["show_version"]:
        print(f"catalog-cli {__version__}")
        return

    config = Config(api_url_override=args["api_url"])
    Repl(ApiClient(config.api_url)).start()


if __name__ == "__main__":
    main()
