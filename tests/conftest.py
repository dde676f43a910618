import pytest
from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U64, U256

from ethereum_rollup.deposit_transaction import DepositTransaction
from ethereum_rollup.utils.hexadecimal import hex_to_address, hex_to_hash

#
# Deposit with every field populated, and its canonical encoding pinned byte
# for byte.
#
PINNED_DEPOSIT_ENCODING = bytes.fromhex(
    "7e"  # deposit transaction type
    + "f856"  # list of 86 bytes
    + "a0" + "00" * 31 + "01"  # source hash
    + "94" + "aa" * 20  # from
    + "94" + "bb" * 20  # to
    + "8203e8"  # mint
    + "8201f4"  # value
    + "825208"  # gas limit
    + "80"  # is system transaction
    + "80"  # data
)

PINNED_DEPOSIT_HASH = (
    "0x7a9c1b540ae837c3e58cf74405bce54c89b948a134d5911fb88ebe9c21dc5ae2"
)


@pytest.fixture
def pinned_deposit() -> DepositTransaction:
    return DepositTransaction(
        source_hash=hex_to_hash("0x01"),
        from_=hex_to_address("0x" + "aa" * 20),
        to=hex_to_address("0x" + "bb" * 20),
        mint=U256(1000),
        value=U256(500),
        gas_limit=U64(21000),
        is_system_transaction=False,
        data=b"",
    )


@pytest.fixture
def pinned_deposit_encoding() -> Bytes:
    return PINNED_DEPOSIT_ENCODING


@pytest.fixture
def pinned_deposit_hash() -> str:
    return PINNED_DEPOSIT_HASH
