"""
Defines command line tools for the rollup protocol utilities.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, Text, TextIO

from ethereum_rollup import __version__
from ethereum_rollup.exceptions import RollupException

from .alias import AliasTool, alias_arguments
from .deposit import DepositTool, SourceHashTool, deposit_arguments
from .fee import FeeTool, fee_arguments
from .utils import FatalException

DESCRIPTION = """
Command line access to the rollup protocol utilities.

You can use this to run the following tools:
    1. alias / unalias: Convert between an L1 contract address and its L2
       alias.
    2. source-hash: Derive the source hash of a deposit.
    3. deposit: Encode and hash a deposit transaction given as JSON.
    4. l1-fee: Estimate the L1 data fee of a serialized transaction.
"""

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

log = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create a command-line argument parser for the rollup tool.
    """
    new_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    new_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show the version of the tool.",
    )
    new_parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Verbosity of the diagnostics written to stderr.",
    )

    subparsers = new_parser.add_subparsers(dest="rollup_tool")

    alias_arguments(subparsers)
    deposit_arguments(subparsers)
    fee_arguments(subparsers)

    return new_parser


def main(
    args: Optional[Sequence[Text]] = None,
    out_file: Optional[TextIO] = None,
    in_file: Optional[TextIO] = None,
) -> int:
    """Run the tools based on the given options."""
    parser = create_parser()

    options = parser.parse_args(args)

    if out_file is None:
        out_file = sys.stdout

    if in_file is None:
        in_file = sys.stdin

    logging.basicConfig(level=options.log_level)

    try:
        if options.rollup_tool == "alias":
            return AliasTool(options, out_file, undo=False).run()
        elif options.rollup_tool == "unalias":
            return AliasTool(options, out_file, undo=True).run()
        elif options.rollup_tool == "deposit":
            return DepositTool(options, out_file, in_file).run()
        elif options.rollup_tool == "source-hash":
            return SourceHashTool(options, out_file).run()
        elif options.rollup_tool == "l1-fee":
            return FeeTool(options, out_file).run()
        else:
            parser.print_help(file=out_file)
            return 0
    except (FatalException, RollupException) as e:
        log.error("%s", e)
        return 1
