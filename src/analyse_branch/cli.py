import argparse
import logging
import os
from typing import Sequence, Union

from rich.console import Console

from analyse_branch.config import default_upstreams
from analyse_branch.domain.analyzer import CURRENT_BRANCH_MARKER, DivergenceAnalyzer
from analyse_branch.domain.exceptions import GitError, InvalidInputError
from analyse_branch.infra import LocalGit
from analyse_branch.render import render_result


def create_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="analyse-branch",
        description="Show where a branch forked from its upstream branches and guess its parent.")
    parser.add_argument(
        "feature", nargs="?", default=CURRENT_BRANCH_MARKER,
        help="branch to analyse (default: the checked out branch)")
    parser.add_argument(
        "upstreams", nargs="*",
        help="upstream branches to relate the feature branch to "
             "(default: configured upstreams, else master)")
    parser.add_argument("--git-dir", default=os.getcwd())
    parser.add_argument(
        "--no-color", action="store_true",
        help="disable colored output")
    debug_level = parser.add_mutually_exclusive_group()
    debug_level.add_argument(
        '-d', '--debug',
        help="activate DEBUG output",
        default=False,
        action='store_true'
    )
    debug_level.add_argument(
        '-q', '--quiet',
        help="suppress INFO output",
        default=False,
        action='store_true'
    )

    return parser


def main(argv: Union[Sequence[str], None] = None, console: Union[Console, None] = None) -> int:
    parser: argparse.ArgumentParser = create_cli()
    args: argparse.Namespace = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s - %(levelname)s - %(message)s')
    elif args.quiet:
        logging.basicConfig(format='%(asctime)s - %(levelname)s - %(message)s')
    else:
        logging.basicConfig(level=logging.INFO,
                            format='%(asctime)s - %(levelname)s - %(message)s')

    if console is None:
        console = Console(no_color=args.no_color, highlight=False, soft_wrap=True)

    repository = LocalGit(args.git_dir)
    analyzer = DivergenceAnalyzer(repository)

    try:
        upstreams = args.upstreams or default_upstreams(repository)
        result = analyzer.analyze(args.feature, upstreams)
    except InvalidInputError as e:
        logging.error(e)
        return 1
    except GitError as e:
        logging.error(e)
        return 2

    render_result(result, console)

    return 0
