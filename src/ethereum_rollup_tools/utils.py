"""
Utilities for the rollup tools
"""

import json
from typing import Any, Dict, Optional, TextIO, Union

from ethereum_types.bytes import Bytes0
from ethereum_types.numeric import U64, U256, Uint

from ethereum_rollup.config import parse_hex_or_int
from ethereum_rollup.deposit_transaction import DepositTransaction
from ethereum_rollup.hashing import SourceHashDomain, compute_source_hash
from ethereum_rollup.rollup_types import Address
from ethereum_rollup.utils.hexadecimal import (
    hex_to_address,
    hex_to_bytes,
    hex_to_hash,
)


class FatalException(Exception):
    """Exception that causes the tool to stop"""

    pass


def read_json(path: Optional[str], in_file: TextIO) -> Any:
    """
    Load JSON from `path`, or from `in_file` when `path` is `None` or
    `"stdin"`.
    """
    try:
        if path is None or path == "stdin":
            return json.load(in_file)
        with open(path, "r") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FatalException(f"cannot read JSON input: {e}") from e


def _string_field(raw: Dict[str, Any], key: str, default: Any = None) -> str:
    value = raw[key] if default is None else raw.get(key, default)
    if not isinstance(value, str):
        raise FatalException(f"deposit field `{key}` must be a hex string")
    return value


def _bool_field(raw: Dict[str, Any], key: str) -> bool:
    value = raw.get(key, False)
    if not isinstance(value, bool):
        raise FatalException(f"deposit field `{key}` must be a JSON boolean")
    return value


def deposit_from_json(raw: Dict[str, Any]) -> DepositTransaction:
    """
    Build a deposit from its JSON-RPC style representation.

    The source hash is taken from `sourceHash` when present, otherwise it is
    derived from `l1BlockHash` and `logIndex` as a user deposit.
    """
    try:
        if "sourceHash" in raw:
            source_hash = hex_to_hash(_string_field(raw, "sourceHash"))
        elif "l1BlockHash" in raw and "logIndex" in raw:
            source_hash = compute_source_hash(
                SourceHashDomain.USER_DEPOSIT,
                hex_to_hash(_string_field(raw, "l1BlockHash")),
                int(parse_hex_or_int(raw["logIndex"], Uint)),
            )
        else:
            raise FatalException(
                "deposit needs `sourceHash` or `l1BlockHash` and `logIndex`"
            )

        if raw.get("to") is None:
            to: Union[Bytes0, Address] = Bytes0(b"")
        else:
            to = hex_to_address(_string_field(raw, "to"))

        return DepositTransaction(
            source_hash=source_hash,
            from_=hex_to_address(_string_field(raw, "from")),
            to=to,
            mint=parse_hex_or_int(raw.get("mint", 0), U256),
            value=parse_hex_or_int(raw.get("value", 0), U256),
            gas_limit=parse_hex_or_int(raw["gas"], U64),
            is_system_transaction=_bool_field(raw, "isSystemTx"),
            data=hex_to_bytes(_string_field(raw, "input", "0x")),
        )
    except KeyError as e:
        raise FatalException(f"deposit is missing `{e.args[0]}`") from e
    except ValueError as e:
        raise FatalException(f"invalid deposit: {e}") from e
