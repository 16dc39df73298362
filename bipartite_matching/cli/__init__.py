# ruff: noqa: T201
import argparse
import json
import logging
import pathlib
import sys

import tabulate

import bipartite_matching._config as config_module
import bipartite_matching._problem as problem_module
import bipartite_matching._util as util

try:
    from ..__about__ import __version__
except ModuleNotFoundError:
    __version__ = "dev"


logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find the most pairs between two sets of tagged items"
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        metavar="command",
        help="for more info use: %(prog)s <command> -h",
    )

    def add_subcommand(name, *args, **kwargs):
        subparser = subparsers.add_parser(name, *args, **kwargs)
        subparser.set_defaults(func=globals()[f"_{name}_command"])
        return subparser

    def add_common_args(subparser):
        subparser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logs"
        )
        subparser.add_argument(
            "--strict",
            action="store_true",
            default=None,
            help="require the same number of left and right items",
        )
        subparser.add_argument(
            "problem", type=pathlib.Path, help="path to a problem description"
        )

    subparser = add_subcommand("match", help="print the matched pairs")
    add_common_args(subparser)
    subparser.add_argument(
        "-n", "--no-header", action="store_true", help="Hide table header"
    )
    subparser.add_argument(
        "--json", action="store_true", help="print the pairs as JSON"
    )

    subparser = add_subcommand("size", help="print the number of matched pairs")
    add_common_args(subparser)

    args = parser.parse_args(argv)

    # Don't use escape sequences, if stdout is not a tty
    if not sys.stdout.isatty():
        for attr in dir(Format):
            if not attr.startswith("_"):
                setattr(Format, attr, "")

    try:
        config = config_module.load_config()
        level = logging.DEBUG if args.verbose else config_module.log_level(config)
        util.configure_logging(level)

        problem = problem_module.load_problem(args.problem, config)
        args.func(args, problem)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"{Format.RED}Error: {e}{Format.RESET}", file=sys.stderr)
        sys.exit(1)


def _match_command(args, problem):
    pairs = problem.solve(args.strict)

    if args.json:
        print(json.dumps([{"left": left, "right": right} for left, right in pairs]))
        return

    if pairs:
        if args.no_header:
            headers = []
        else:
            headers = ["Left", "Right"]
            headers[0] = f"{Format.BOLD}{headers[0]}"
            headers[-1] = f"{headers[-1]}{Format.RESET}"

        print(tabulate.tabulate(pairs, headers=headers, tablefmt="plain"))


def _size_command(args, problem):
    print(len(problem.solve(args.strict)))


class Format:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
