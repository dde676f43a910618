"""
Encode and hash deposit transactions.
"""

import argparse
import json
import logging
from typing import TextIO

from ethereum_types.numeric import Uint

from ethereum_rollup.config import parse_hex_or_int
from ethereum_rollup.deposit_transaction import encode_deposit_transaction
from ethereum_rollup.hashing import (
    SourceHashDomain,
    compute_source_hash,
    deposit_transaction_hash,
)
from ethereum_rollup.utils.hexadecimal import hex_to_hash, to_hex

from .utils import FatalException, deposit_from_json, read_json

DOMAINS = {
    "user": SourceHashDomain.USER_DEPOSIT,
    "l1-info": SourceHashDomain.L1_INFO_DEPOSIT,
    "upgrade": SourceHashDomain.UPGRADE_DEPOSIT,
}


def deposit_arguments(subparsers: argparse._SubParsersAction) -> None:
    """
    Adds the `deposit` and `source-hash` subparsers.
    """
    deposit_parser = subparsers.add_parser(
        "deposit", help="Encode and hash a deposit transaction."
    )
    deposit_parser.add_argument(
        "--input",
        dest="input",
        type=str,
        default="stdin",
        help="JSON file describing the deposit.",
    )

    source_hash_parser = subparsers.add_parser(
        "source-hash", help="Derive the source hash of a deposit."
    )
    source_hash_parser.add_argument(
        "--l1-block-hash", dest="l1_block_hash", type=str, required=True
    )
    source_hash_parser.add_argument(
        "--log-index", dest="log_index", type=str, required=True
    )
    source_hash_parser.add_argument(
        "--domain", dest="domain", choices=sorted(DOMAINS), default="user"
    )


class DepositTool:
    """
    Reads a deposit as JSON and writes its encoding and hash.
    """

    def __init__(
        self, options: argparse.Namespace, out_file: TextIO, in_file: TextIO
    ) -> None:
        self.options = options
        self.out_file = out_file
        self.in_file = in_file
        self.log = logging.getLogger(__name__)

    def run(self) -> int:
        """
        Runs the deposit tool.
        """
        raw = read_json(self.options.input, self.in_file)
        if not isinstance(raw, dict):
            raise FatalException("deposit must be a JSON object")

        tx = deposit_from_json(raw)
        encoded = encode_deposit_transaction(tx)
        tx_hash = deposit_transaction_hash(tx)
        self.log.debug("encoded deposit is %d bytes", len(encoded))

        result = {
            "sourceHash": to_hex(tx.source_hash),
            "encoded": to_hex(encoded),
            "hash": to_hex(tx_hash),
        }
        json.dump(result, self.out_file, indent=4)
        self.out_file.write("\n")
        return 0


class SourceHashTool:
    """
    Writes the source hash for an L1 block hash and log index.
    """

    def __init__(self, options: argparse.Namespace, out_file: TextIO) -> None:
        self.options = options
        self.out_file = out_file

    def run(self) -> int:
        """
        Runs the source hash tool.
        """
        try:
            l1_block_hash = hex_to_hash(self.options.l1_block_hash)
        except ValueError as e:
            raise FatalException(
                f"invalid block hash {self.options.l1_block_hash!r}"
            ) from e
        log_index = parse_hex_or_int(self.options.log_index, Uint)

        source_hash = compute_source_hash(
            DOMAINS[self.options.domain], l1_block_hash, int(log_index)
        )
        self.out_file.write(to_hex(source_hash) + "\n")
        return 0
