"""
Hashing
^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Identifiers derived by hashing protocol objects: deposit transaction hashes,
deposit source hashes, cross domain message hashes, withdrawal hashes and
output root proofs.
"""

from enum import IntEnum

from eth_abi import encode as abi_encode
from ethereum_types.bytes import Bytes, Bytes32
from ethereum_types.numeric import U256

from .crypto.hash import Hash32, keccak256
from .deposit_transaction import (
    DepositTransaction,
    encode_deposit_transaction,
)
from .encoding import encode_cross_domain_message
from .rollup_types import Address, Root


class SourceHashDomain(IntEnum):
    """
    Provenance of a deposit, mixed into its source hash so that deposits of
    different kinds can never share an identity.
    """

    USER_DEPOSIT = 0
    L1_INFO_DEPOSIT = 1
    UPGRADE_DEPOSIT = 2


def deposit_transaction_hash(tx: DepositTransaction) -> Hash32:
    """
    Compute the L2 transaction hash of a deposit.

    The hash covers the type byte as well as the RLP payload, which is what
    an execution client recomputes from the bytes it receives.

    Parameters
    ----------
    tx :
        Deposit transaction of interest.

    Returns
    -------
    hash : `ethereum_rollup.crypto.hash.Hash32`
        Hash of the encoded transaction.
    """
    return keccak256(encode_deposit_transaction(tx))


def compute_source_hash(
    domain: SourceHashDomain, l1_block_hash: Hash32, log_index: int
) -> Hash32:
    """
    Derive the `source_hash` of a deposit from its L1 provenance.

    The L1 block hash and log index (or, for L1 info deposits, the sequence
    number) are hashed together first, then the result is hashed again
    behind the domain.

    Parameters
    ----------
    domain :
        Kind of deposit being identified.
    l1_block_hash :
        Hash of the L1 block containing the originating event.
    log_index :
        Index of the originating log within the L1 block.

    Returns
    -------
    source_hash : `ethereum_rollup.crypto.hash.Hash32`
        Identity of the deposit.
    """
    deposit_id_hash = keccak256(
        Bytes32(l1_block_hash) + U256(log_index).to_be_bytes32()
    )
    return keccak256(U256(int(domain)).to_be_bytes32() + deposit_id_hash)


def hash_cross_domain_message(
    nonce: U256,
    sender: Address,
    target: Address,
    value: U256,
    gas_limit: U256,
    data: Bytes,
) -> Hash32:
    """
    Hash a cross domain message, using the encoding selected by the version
    packed into `nonce`.
    """
    return keccak256(
        encode_cross_domain_message(
            nonce, sender, target, value, gas_limit, data
        )
    )


def hash_withdrawal(
    nonce: U256,
    sender: Address,
    target: Address,
    value: U256,
    gas_limit: U256,
    data: Bytes,
) -> Hash32:
    """
    Hash a withdrawal the way the L2 message passer records it.
    """
    encoded = abi_encode(
        ["uint256", "address", "address", "uint256", "uint256", "bytes"],
        [
            int(nonce),
            bytes(sender),
            bytes(target),
            int(value),
            int(gas_limit),
            bytes(data),
        ],
    )
    return keccak256(encoded)


def hash_output_root_proof(
    version: Hash32,
    state_root: Root,
    message_passer_storage_root: Root,
    latest_blockhash: Hash32,
) -> Hash32:
    """
    Compute the L2 output root committed to on L1.
    """
    encoded = abi_encode(
        ["bytes32", "bytes32", "bytes32", "bytes32"],
        [
            bytes(version),
            bytes(state_root),
            bytes(message_passer_storage_root),
            bytes(latest_blockhash),
        ],
    )
    return keccak256(encoded)
