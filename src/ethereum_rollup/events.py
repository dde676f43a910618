"""
Deposits From L1 Events
^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

The deposit contract on L1 announces every deposit with a
`TransactionDeposited(address indexed from, address indexed to,
uint256 indexed version, bytes opaqueData)` event. Version 0 of
`opaqueData` is the packed concatenation

    mint (32 bytes) | value (32 bytes) | gas limit (8 bytes) |
    is creation (1 byte) | data

The contract has already aliased `from` when the depositor is a contract.
"""

from typing import Sequence

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError as AbiDecodingError
from ethereum_types.bytes import Bytes, Bytes0
from ethereum_types.numeric import U64, U256

from .constants import DEPOSIT_EVENT_VERSION, TRANSACTION_DEPOSITED_SIGNATURE
from .crypto.hash import Hash32, keccak256
from .deposit_transaction import DepositTransaction
from .exceptions import MalformedEncoding, UnsupportedDepositVersion
from .hashing import SourceHashDomain, compute_source_hash
from .rollup_types import Address

TRANSACTION_DEPOSITED_TOPIC = keccak256(
    TRANSACTION_DEPOSITED_SIGNATURE.encode()
)

OPAQUE_DATA_MIN_LENGTH = 32 + 32 + 8 + 1


def deposit_from_transaction_deposited(
    from_: Address,
    to: Address,
    version: U256,
    opaque_data: Bytes,
    l1_block_hash: Hash32,
    log_index: int,
) -> DepositTransaction:
    """
    Build the user deposit announced by a `TransactionDeposited` event.

    Parameters
    ----------
    from_ :
        Depositor, as emitted (already aliased for contracts).
    to :
        Recipient, as emitted. Ignored for contract creations.
    version :
        Version of `opaque_data`.
    opaque_data :
        Packed deposit parameters.
    l1_block_hash :
        Hash of the L1 block that contains the event.
    log_index :
        Index of the event's log within that block.

    Returns
    -------
    tx : `ethereum_rollup.deposit_transaction.DepositTransaction`
        The deposit to execute on L2.
    """
    if version != DEPOSIT_EVENT_VERSION:
        raise UnsupportedDepositVersion(f"unsupported version {version}")
    if len(opaque_data) < OPAQUE_DATA_MIN_LENGTH:
        raise MalformedEncoding(
            f"opaque data needs at least {OPAQUE_DATA_MIN_LENGTH} bytes, "
            f"got {len(opaque_data)}"
        )

    mint = U256.from_be_bytes(opaque_data[0:32])
    value = U256.from_be_bytes(opaque_data[32:64])
    gas_limit = U64.from_be_bytes(opaque_data[64:72])
    is_creation = opaque_data[72] == 1
    data = opaque_data[73:]

    return DepositTransaction(
        source_hash=compute_source_hash(
            SourceHashDomain.USER_DEPOSIT, l1_block_hash, log_index
        ),
        from_=Address(from_),
        to=Bytes0(b"") if is_creation else Address(to),
        mint=mint,
        value=value,
        gas_limit=gas_limit,
        is_system_transaction=False,
        data=Bytes(data),
    )


def deposit_from_log(
    topics: Sequence[Hash32],
    data: Bytes,
    l1_block_hash: Hash32,
    log_index: int,
) -> DepositTransaction:
    """
    Build the user deposit announced by a raw `TransactionDeposited` log.
    """
    if len(topics) != 4:
        raise MalformedEncoding(
            f"TransactionDeposited has 4 topics, got {len(topics)}"
        )
    if topics[0] != TRANSACTION_DEPOSITED_TOPIC:
        raise MalformedEncoding("log is not a TransactionDeposited event")

    try:
        (opaque_data,) = abi_decode(["bytes"], data)
    except AbiDecodingError as e:
        raise MalformedEncoding("invalid TransactionDeposited data") from e

    return deposit_from_transaction_deposited(
        from_=Address(topics[1][-20:]),
        to=Address(topics[2][-20:]),
        version=U256.from_be_bytes(topics[3]),
        opaque_data=opaque_data,
        l1_block_hash=l1_block_hash,
        log_index=log_index,
    )
