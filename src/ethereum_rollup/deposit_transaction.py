"""
Deposit Transactions
^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

A deposit transaction is the L2 transaction synthesized from an L1 event,
usually a call to the deposit contract on L1. It carries no signature: its
identity is the `source_hash`, derived from where the event was emitted.

On the wire a deposit is the type byte `0x7E` followed by the RLP encoding of
its fields in declaration order. Execution clients recompute the transaction
hash from these bytes, so the encoding is a protocol contract and must be
reproduced exactly.
"""

from dataclasses import dataclass
from typing import Sequence, Type, TypeVar, Union

from ethereum_rlp import rlp
from ethereum_rlp.exceptions import DecodingError
from ethereum_types.bytes import Bytes, Bytes0, FixedBytes
from ethereum_types.frozen import slotted_freezable
from ethereum_types.numeric import U64, U256, FixedUnsigned

from .constants import DEPOSIT_TX_TYPE
from .crypto.hash import Hash32
from .exceptions import (
    InvalidFieldWidth,
    MalformedEncoding,
    TransactionTypeError,
)
from .rollup_types import Address

DEPOSIT_FIELD_COUNT = 8

B = TypeVar("B", bound=FixedBytes)
N = TypeVar("N", bound=FixedUnsigned)


@slotted_freezable
@dataclass
class DepositTransaction:
    """
    L2 transaction created from an L1 deposit event.
    """

    source_hash: Hash32
    from_: Address
    to: Union[Bytes0, Address]
    mint: U256
    value: U256
    gas_limit: U64
    is_system_transaction: bool
    data: Bytes

    def is_creation(self) -> bool:
        """
        Whether the deposit deploys a contract rather than calling one.
        """
        return self.to == Bytes0(b"")


def encode_deposit_transaction(tx: DepositTransaction) -> Bytes:
    """
    Serialize `tx` into its canonical typed-transaction form.

    Parameters
    ----------
    tx :
        Deposit transaction to encode.

    Returns
    -------
    encoded : `bytes`
        `0x7E` followed by the RLP list of the transaction's fields.
    """
    _check_widths(tx)
    return bytes([DEPOSIT_TX_TYPE]) + rlp.encode(tx)


def decode_deposit_transaction(encoded: Bytes) -> DepositTransaction:
    """
    Parse the canonical encoding produced by
    :func:`encode_deposit_transaction`.

    Every byte of `encoded` must be consumed, every integer must be minimally
    encoded, and every fixed width field must have exactly its width. Anything
    else is rejected rather than normalized, so that decoding and re-encoding
    always reproduces the input.

    Parameters
    ----------
    encoded :
        Typed transaction bytes, including the leading type byte.

    Returns
    -------
    tx : `DepositTransaction`
        The decoded transaction.
    """
    if len(encoded) == 0:
        raise MalformedEncoding("empty deposit transaction")
    if encoded[0] != DEPOSIT_TX_TYPE:
        raise TransactionTypeError(encoded[0])

    payload = encoded[1:]
    try:
        item_length = rlp.decode_item_length(payload)
        if item_length > len(payload):
            raise MalformedEncoding("truncated deposit transaction")
        if item_length < len(payload):
            raise MalformedEncoding(
                f"{len(payload) - item_length} trailing byte(s) after "
                "deposit transaction"
            )
        decoded = rlp.decode(payload)
    except DecodingError as e:
        raise MalformedEncoding("invalid deposit transaction encoding") from e

    if isinstance(decoded, bytes):
        raise MalformedEncoding("deposit transaction must be an RLP list")
    if len(decoded) != DEPOSIT_FIELD_COUNT:
        raise MalformedEncoding(
            f"deposit transaction needs {DEPOSIT_FIELD_COUNT} fields, "
            f"got {len(decoded)}"
        )

    fields = _expect_byte_strings(decoded)

    return DepositTransaction(
        source_hash=_decode_fixed(Hash32, "source_hash", fields[0]),
        from_=_decode_fixed(Address, "from", fields[1]),
        to=_decode_to(fields[2]),
        mint=_decode_uint(U256, "mint", fields[3]),
        value=_decode_uint(U256, "value", fields[4]),
        gas_limit=_decode_uint(U64, "gas_limit", fields[5]),
        is_system_transaction=_decode_bool(fields[6]),
        data=fields[7],
    )


def _check_widths(tx: DepositTransaction) -> None:
    if len(tx.source_hash) != 32:
        raise InvalidFieldWidth("source_hash", 32, len(tx.source_hash))
    if len(tx.from_) != 20:
        raise InvalidFieldWidth("from", 20, len(tx.from_))
    if len(tx.to) not in (0, 20):
        raise InvalidFieldWidth("to", 20, len(tx.to))


def _expect_byte_strings(items: Sequence[rlp.Simple]) -> Sequence[Bytes]:
    result = []
    for index, item in enumerate(items):
        if not isinstance(item, bytes):
            raise MalformedEncoding(f"field {index} must be a byte string")
        result.append(item)
    return result


def _decode_fixed(cls: Type[B], name: str, raw: Bytes) -> B:
    width = cls.LENGTH
    if len(raw) != width:
        raise InvalidFieldWidth(name, width, len(raw))
    return cls(raw)


def _decode_to(raw: Bytes) -> Union[Bytes0, Address]:
    if len(raw) == 0:
        return Bytes0(b"")
    return _decode_fixed(Address, "to", raw)


def _decode_uint(cls: Type[N], name: str, raw: Bytes) -> N:
    width = (int(cls.MAX_VALUE).bit_length() + 7) // 8
    if len(raw) > width:
        raise InvalidFieldWidth(name, width, len(raw))
    if len(raw) > 0 and raw[0] == 0:
        raise MalformedEncoding(f"field `{name}` has leading zero bytes")
    return cls.from_be_bytes(raw)


def _decode_bool(raw: Bytes) -> bool:
    if raw == b"":
        return False
    elif raw == b"\x01":
        return True
    else:
        raise MalformedEncoding("invalid boolean")
