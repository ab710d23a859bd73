"""CLI for gotpasswd: generate passwords from named character classes."""

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .charset import describe_dictionary
from .config import Config, ConfigError, load_config
from .generator import GenerationError, generate_many

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_GENERATION_ERROR = 1
EXIT_CONFIG_ERROR = 128

err_console = Console(stderr=True)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def print_error(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)


def dump_dictionary() -> None:
    table = Table(show_header=True, header_style="bold cyan", title="Character pools")
    table.add_column("Kind")
    table.add_column("Count", justify="right")
    table.add_column("Characters")
    for kind, chars in describe_dictionary():
        # repr keeps the space pool visible
        table.add_row(kind.value, str(len(chars)), Text(repr(chars)))
    err_console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gotpasswd",
        description="Generate random passwords from named character classes",
    )
    parser.add_argument(
        "-k", "--kinds", type=str,
        help="Character kinds, comma separated (alphabet,number,symbol,underscore,space)",
    )
    parser.add_argument("-l", "--length", type=int, help="Length of password")
    parser.add_argument("-n", "--number", type=int, dest="count", help="Number of passwords")
    parser.add_argument("--debug", action="store_true", help="Dump the character pools to stderr")
    parser.add_argument("--config", type=str, help="Path to a JSON settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    settings = load_config(args.config)
    kinds = args.kinds if args.kinds is not None else settings["kinds"]
    length = args.length if args.length is not None else settings["length"]
    count = args.count if args.count is not None else settings["count"]

    if args.debug:
        dump_dictionary()

    try:
        config = Config.from_options(kinds, length, count)
    except ConfigError as e:
        print_error(str(e))
        return EXIT_CONFIG_ERROR
    logger.debug("Kinds=%s length=%d count=%d",
                 ",".join(k.value for k in config.kinds), config.length, config.count)

    try:
        for pw in generate_many(config):
            # verbatim, passwords may contain markup characters
            print(pw)
    except (GenerationError, OSError) as e:
        print_error(str(e))
        return EXIT_GENERATION_ERROR
    return EXIT_OK
