"""
Address Aliasing
^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

A contract on L1 that relays a call into L2 must not look like an externally
owned account with the same address calling L2 directly, since L2 contracts
extend different trust to the two. Deposits sent by L1 contracts therefore
carry an *aliased* sender: the L1 address shifted by a fixed offset, modulo
`2**160`. The shift is undone when the L2 side needs to recover the L1
contract.
"""

from .constants import L1_TO_L2_ALIAS_OFFSET
from .rollup_types import Address, address_to_u256, u256_to_address


def apply_l1_to_l2_alias(address: Address) -> Address:
    """
    Compute the address an L1 contract appears as on L2.

    Parameters
    ----------
    address :
        Address of the L1 contract.

    Returns
    -------
    aliased : `ethereum_rollup.rollup_types.Address`
        `(address + L1_TO_L2_ALIAS_OFFSET) mod 2**160`.
    """
    value = address_to_u256(address).wrapping_add(L1_TO_L2_ALIAS_OFFSET)
    return u256_to_address(value)


def undo_l1_to_l2_alias(address: Address) -> Address:
    """
    Recover the L1 contract address from its L2 alias.

    Parameters
    ----------
    address :
        Aliased address seen on L2.

    Returns
    -------
    original : `ethereum_rollup.rollup_types.Address`
        `(address - L1_TO_L2_ALIAS_OFFSET) mod 2**160`.
    """
    value = address_to_u256(address).wrapping_sub(L1_TO_L2_ALIAS_OFFSET)
    return u256_to_address(value)
