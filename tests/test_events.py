import pytest
from eth_abi import encode as abi_encode
from ethereum_types.bytes import Bytes, Bytes0
from ethereum_types.numeric import U64, U256

from ethereum_rollup.alias import apply_l1_to_l2_alias
from ethereum_rollup.crypto.hash import keccak256
from ethereum_rollup.events import (
    TRANSACTION_DEPOSITED_TOPIC,
    deposit_from_log,
    deposit_from_transaction_deposited,
)
from ethereum_rollup.exceptions import (
    MalformedEncoding,
    UnsupportedDepositVersion,
)
from ethereum_rollup.hashing import SourceHashDomain, compute_source_hash
from ethereum_rollup.utils.hexadecimal import hex_to_address, hex_to_hash

l1_block_hash = hex_to_hash(
    "0x1b2e8f0a2d6c4b3a5968778695a4b3c2d1e0f1e2d3c4b5a69788796a5b4c3d2e"
)
depositor = hex_to_address("0x5fbdb2315678afecb367f032d93f642f64180aa3")
recipient = hex_to_address("0x70997970c51812dc3a010c7d01b50e0d17dc79c8")


def opaque_data(
    mint: int, value: int, gas: int, is_creation: bool, data: Bytes
) -> Bytes:
    return (
        mint.to_bytes(32, "big")
        + value.to_bytes(32, "big")
        + gas.to_bytes(8, "big")
        + (b"\x01" if is_creation else b"\x00")
        + data
    )


def topic(address: Bytes) -> Bytes:
    return bytes(12) + address


def test_topic_is_event_signature_hash() -> None:
    assert TRANSACTION_DEPOSITED_TOPIC == keccak256(
        b"TransactionDeposited(address,address,uint256,bytes)"
    )


def test_call_deposit_from_event() -> None:
    tx = deposit_from_transaction_deposited(
        from_=depositor,
        to=recipient,
        version=U256(0),
        opaque_data=opaque_data(10**18, 10**17, 100000, False, b"\x12\x34"),
        l1_block_hash=l1_block_hash,
        log_index=4,
    )

    assert tx.source_hash == compute_source_hash(
        SourceHashDomain.USER_DEPOSIT, l1_block_hash, 4
    )
    assert tx.from_ == depositor
    assert tx.to == recipient
    assert tx.mint == U256(10**18)
    assert tx.value == U256(10**17)
    assert tx.gas_limit == U64(100000)
    assert tx.is_system_transaction is False
    assert tx.data == b"\x12\x34"


def test_creation_deposit_from_event() -> None:
    tx = deposit_from_transaction_deposited(
        from_=depositor,
        to=recipient,
        version=U256(0),
        opaque_data=opaque_data(0, 0, 500000, True, b"\x60\x80"),
        l1_block_hash=l1_block_hash,
        log_index=0,
    )
    assert isinstance(tx.to, Bytes0)
    assert tx.is_creation()
    assert tx.data == b"\x60\x80"


def test_aliased_depositor_is_kept() -> None:
    aliased = apply_l1_to_l2_alias(depositor)
    tx = deposit_from_transaction_deposited(
        from_=aliased,
        to=recipient,
        version=U256(0),
        opaque_data=opaque_data(0, 0, 21000, False, b""),
        l1_block_hash=l1_block_hash,
        log_index=0,
    )
    assert tx.from_ == aliased


def test_unsupported_event_version() -> None:
    with pytest.raises(UnsupportedDepositVersion):
        deposit_from_transaction_deposited(
            from_=depositor,
            to=recipient,
            version=U256(1),
            opaque_data=opaque_data(0, 0, 21000, False, b""),
            l1_block_hash=l1_block_hash,
            log_index=0,
        )


def test_short_opaque_data() -> None:
    with pytest.raises(MalformedEncoding):
        deposit_from_transaction_deposited(
            from_=depositor,
            to=recipient,
            version=U256(0),
            opaque_data=opaque_data(0, 0, 21000, False, b"")[:-1],
            l1_block_hash=l1_block_hash,
            log_index=0,
        )


def test_deposit_from_log_matches_event_fields() -> None:
    packed = opaque_data(1, 2, 30000, False, b"payload")
    from_log = deposit_from_log(
        topics=[
            TRANSACTION_DEPOSITED_TOPIC,
            topic(depositor),
            topic(recipient),
            bytes(32),
        ],
        data=abi_encode(["bytes"], [packed]),
        l1_block_hash=l1_block_hash,
        log_index=9,
    )
    from_event = deposit_from_transaction_deposited(
        from_=depositor,
        to=recipient,
        version=U256(0),
        opaque_data=packed,
        l1_block_hash=l1_block_hash,
        log_index=9,
    )
    assert from_log == from_event


def test_deposit_from_log_rejects_other_events() -> None:
    with pytest.raises(MalformedEncoding):
        deposit_from_log(
            topics=[
                keccak256(b"Transfer(address,address,uint256)"),
                topic(depositor),
                topic(recipient),
                bytes(32),
            ],
            data=abi_encode(["bytes"], [b""]),
            l1_block_hash=l1_block_hash,
            log_index=0,
        )


def test_deposit_from_log_rejects_missing_topics() -> None:
    with pytest.raises(MalformedEncoding):
        deposit_from_log(
            topics=[TRANSACTION_DEPOSITED_TOPIC, topic(depositor)],
            data=abi_encode(["bytes"], [b""]),
            l1_block_hash=l1_block_hash,
            log_index=0,
        )


def test_deposit_from_log_rejects_garbage_data() -> None:
    with pytest.raises(MalformedEncoding):
        deposit_from_log(
            topics=[
                TRANSACTION_DEPOSITED_TOPIC,
                topic(depositor),
                topic(recipient),
                bytes(32),
            ],
            data=b"\x01",
            l1_block_hash=l1_block_hash,
            log_index=0,
        )


def test_deposit_from_log_rejects_unknown_version() -> None:
    with pytest.raises(UnsupportedDepositVersion):
        deposit_from_log(
            topics=[
                TRANSACTION_DEPOSITED_TOPIC,
                topic(depositor),
                topic(recipient),
                (1).to_bytes(32, "big"),
            ],
            data=abi_encode(
                ["bytes"], [opaque_data(0, 0, 21000, False, b"")]
            ),
            l1_block_hash=l1_block_hash,
            log_index=0,
        )
