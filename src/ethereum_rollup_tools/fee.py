"""
Quote the L1 data fee of a serialized transaction.
"""

import argparse
import dataclasses
import json
import logging
from typing import TextIO

from ethereum_types.numeric import Uint

from ethereum_rollup.config import (
    FeeParameters,
    load_fee_parameters,
    parse_hex_or_int,
)
from ethereum_rollup.fees import estimate_l1_data_fee, flz_compress_len
from ethereum_rollup.utils.hexadecimal import hex_to_bytes

from .utils import FatalException


def fee_arguments(subparsers: argparse._SubParsersAction) -> None:
    """
    Adds the `l1-fee` subparser.
    """
    fee_parser = subparsers.add_parser(
        "l1-fee", help="Estimate the L1 data fee of a transaction."
    )
    fee_parser.add_argument(
        "--tx", dest="tx", type=str, required=True, help="Raw transaction."
    )
    fee_parser.add_argument(
        "--l1-base-fee", dest="l1_base_fee", type=str, required=True
    )
    fee_parser.add_argument(
        "--config",
        dest="config",
        type=str,
        default=None,
        help="JSON file with fee parameters.",
    )
    fee_parser.add_argument("--overhead", dest="overhead", type=str)
    fee_parser.add_argument("--scalar", dest="scalar", type=str)


class FeeTool:
    """
    Writes the compressed size and L1 data fee of a transaction.
    """

    def __init__(self, options: argparse.Namespace, out_file: TextIO) -> None:
        self.options = options
        self.out_file = out_file
        self.log = logging.getLogger(__name__)

    def load_parameters(self) -> FeeParameters:
        """
        Combine the configuration file, if any, with command line overrides.
        """
        if self.options.config is None:
            parameters = FeeParameters()
        else:
            try:
                with open(self.options.config, "r") as f:
                    parameters = load_fee_parameters(f)
            except OSError as e:
                raise FatalException(
                    f"cannot read {self.options.config}: {e}"
                ) from e

        overrides = {}
        if self.options.overhead is not None:
            overrides["overhead"] = parse_hex_or_int(
                self.options.overhead, Uint
            )
        if self.options.scalar is not None:
            overrides["scalar"] = parse_hex_or_int(self.options.scalar, Uint)

        return dataclasses.replace(parameters, **overrides)

    def run(self) -> int:
        """
        Runs the fee tool.
        """
        parameters = self.load_parameters()
        try:
            raw_tx = hex_to_bytes(self.options.tx)
        except ValueError as e:
            raise FatalException(
                f"invalid transaction {self.options.tx!r}"
            ) from e
        l1_base_fee = parse_hex_or_int(self.options.l1_base_fee, Uint)

        compressed_size = flz_compress_len(raw_tx)
        fee = estimate_l1_data_fee(
            raw_tx, l1_base_fee, parameters.overhead, parameters.scalar
        )
        self.log.debug(
            "%d byte transaction compresses to %s bytes",
            len(raw_tx),
            compressed_size,
        )

        result = {
            "compressedSize": int(compressed_size),
            "fee": int(fee),
        }
        json.dump(result, self.out_file, indent=4)
        self.out_file.write("\n")
        return 0
