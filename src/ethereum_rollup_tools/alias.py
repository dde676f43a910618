"""
Apply or undo the L1 to L2 address alias.
"""

import argparse
import logging
from typing import TextIO

from eth_utils import to_checksum_address

from ethereum_rollup.alias import apply_l1_to_l2_alias, undo_l1_to_l2_alias
from ethereum_rollup.utils.hexadecimal import hex_to_address

from .utils import FatalException


def alias_arguments(subparsers: argparse._SubParsersAction) -> None:
    """
    Adds the `alias` and `unalias` subparsers.
    """
    alias_parser = subparsers.add_parser(
        "alias", help="Compute the L2 alias of an L1 contract address."
    )
    alias_parser.add_argument("address", type=str)

    unalias_parser = subparsers.add_parser(
        "unalias", help="Recover an L1 contract address from its L2 alias."
    )
    unalias_parser.add_argument("address", type=str)


class AliasTool:
    """
    Prints the aliased, or unaliased, form of an address.
    """

    def __init__(
        self, options: argparse.Namespace, out_file: TextIO, undo: bool
    ) -> None:
        self.options = options
        self.out_file = out_file
        self.undo = undo
        self.log = logging.getLogger(__name__)

    def run(self) -> int:
        """
        Runs the alias tool.
        """
        try:
            address = hex_to_address(self.options.address)
        except ValueError as e:
            raise FatalException(
                f"invalid address {self.options.address!r}"
            ) from e

        if self.undo:
            result = undo_l1_to_l2_alias(address)
        else:
            result = apply_l1_to_l2_alias(address)

        self.log.debug(
            "%s %s -> %s",
            "unalias" if self.undo else "alias",
            address.hex(),
            result.hex(),
        )
        self.out_file.write(to_checksum_address(result) + "\n")
        return 0
