"""
Types shared between the L1 and L2 sides of the rollup.
"""

from ethereum_types.bytes import Bytes20
from ethereum_types.numeric import U256

from .crypto.hash import Hash32

Address = Bytes20
Root = Hash32


def address_to_u256(address: Address) -> U256:
    """
    Interpret the 20 bytes of `address` as a big endian integer.
    """
    return U256.from_be_bytes(address)


def u256_to_address(value: U256) -> Address:
    """
    Keep the low 160 bits of `value` as an address.
    """
    return Address(value.to_be_bytes32()[-20:])
