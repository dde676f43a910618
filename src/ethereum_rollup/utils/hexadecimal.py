"""
Utility Functions For Hexadecimal Strings
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Hexadecimal strings as they appear in JSON-RPC payloads and on the command
line.
"""
from ethereum_types.bytes import Bytes

from ..crypto.hash import Hash32
from ..rollup_types import Address


def has_hex_prefix(hex_string: str) -> bool:
    """
    Check if a hex string starts with hex prefix (0x).

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be checked for presence of prefix.

    Returns
    -------
    has_prefix : `bool`
        Boolean indicating whether the hex string has 0x prefix.
    """
    return hex_string.startswith("0x")


def remove_hex_prefix(hex_string: str) -> str:
    """
    Remove 0x prefix from a hex string if present. This function returns the
    passed hex string if it isn't prefixed with 0x.
    """
    if has_hex_prefix(hex_string):
        return hex_string[len("0x") :]

    return hex_string


def hex_to_bytes(hex_string: str) -> Bytes:
    """
    Convert hex string to bytes.
    """
    return bytes.fromhex(remove_hex_prefix(hex_string))


def hex_to_address(hex_string: str) -> Address:
    """
    Convert hex string to an address, left padding short input with zeros.

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be converted to an address.

    Returns
    -------
    address : `Address`
        20-byte address corresponding to the given hexadecimal string.
    """
    return Address(bytes.fromhex(remove_hex_prefix(hex_string).rjust(40, "0")))


def hex_to_hash(hex_string: str) -> Hash32:
    """
    Convert hex string to hash32 (32 bytes), left padding short input with
    zeros.
    """
    return Hash32(bytes.fromhex(remove_hex_prefix(hex_string).rjust(64, "0")))


def to_hex(data: Bytes) -> str:
    """
    Render `data` as a `0x` prefixed lowercase hex string.
    """
    return "0x" + data.hex()
