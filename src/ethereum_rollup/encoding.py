"""
Cross Domain Message Encoding
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Messages relayed between L1 and L2 are delivered as calls to
`relayMessage` on the receiving messenger. The layout of that call changed
once; the version in use is carried in the upper 16 bits of the message
nonce, leaving the lower 240 bits for the nonce itself.
"""

from typing import Tuple

from eth_abi import encode as abi_encode
from eth_utils import function_signature_to_4byte_selector
from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U256

from .constants import MESSAGE_NONCE_MASK, MESSAGE_VERSION_SHIFT
from .exceptions import UnknownMessageVersion
from .rollup_types import Address

RELAY_MESSAGE_V0_SIGNATURE = "relayMessage(address,address,bytes,uint256)"
RELAY_MESSAGE_V1_SIGNATURE = (
    "relayMessage(uint256,address,address,uint256,uint256,bytes)"
)


def encode_versioned_nonce(nonce: U256, version: U256) -> U256:
    """
    Pack a message encoding `version` into the upper bits of `nonce`.

    Parameters
    ----------
    nonce :
        Message nonce. Only its low 240 bits are kept; anything above is
        discarded.
    version :
        Encoding version. Must fit in 16 bits, otherwise
        `UnknownMessageVersion` is raised.

    Returns
    -------
    versioned_nonce : `U256`
        `version << 240 | nonce`.
    """
    if int(version) >> (256 - MESSAGE_VERSION_SHIFT):
        raise UnknownMessageVersion(f"version {version} exceeds 16 bits")
    return U256(
        (int(version) << MESSAGE_VERSION_SHIFT)
        | (int(nonce) & int(MESSAGE_NONCE_MASK))
    )


def decode_versioned_nonce(nonce: U256) -> Tuple[U256, U256]:
    """
    Split a versioned nonce into `(nonce, version)`.
    """
    return (
        nonce & MESSAGE_NONCE_MASK,
        U256(int(nonce) >> MESSAGE_VERSION_SHIFT),
    )


def encode_cross_domain_message_v0(
    target: Address, sender: Address, data: Bytes, nonce: U256
) -> Bytes:
    """
    Calldata of the original `relayMessage`, which carries no value or gas
    limit.
    """
    return function_signature_to_4byte_selector(
        RELAY_MESSAGE_V0_SIGNATURE
    ) + abi_encode(
        ["address", "address", "bytes", "uint256"],
        [bytes(target), bytes(sender), bytes(data), int(nonce)],
    )


def encode_cross_domain_message_v1(
    nonce: U256,
    sender: Address,
    target: Address,
    value: U256,
    gas_limit: U256,
    data: Bytes,
) -> Bytes:
    """
    Calldata of the value carrying `relayMessage`.
    """
    return function_signature_to_4byte_selector(
        RELAY_MESSAGE_V1_SIGNATURE
    ) + abi_encode(
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


def encode_cross_domain_message(
    nonce: U256,
    sender: Address,
    target: Address,
    value: U256,
    gas_limit: U256,
    data: Bytes,
) -> Bytes:
    """
    Encode a cross domain message with the layout its nonce's version
    selects.

    Parameters
    ----------
    nonce :
        Versioned message nonce.
    sender :
        Address that sent the message on the origin chain.
    target :
        Address the message is delivered to.
    value :
        Amount of native currency sent along (ignored by version 0).
    gas_limit :
        Minimum gas to relay the message with (ignored by version 0).
    data :
        Message payload.

    Returns
    -------
    calldata : `bytes`
        Call to `relayMessage` on the receiving messenger.
    """
    _, version = decode_versioned_nonce(nonce)
    if version == U256(0):
        return encode_cross_domain_message_v0(target, sender, data, nonce)
    elif version == U256(1):
        return encode_cross_domain_message_v1(
            nonce, sender, target, value, gas_limit, data
        )
    raise UnknownMessageVersion(f"unknown version {version}")
