import random

import pytest
from ethereum_types.numeric import Uint

from ethereum_rollup.fees import (
    calculate_l1_fee,
    calculate_l1_gas_used,
    calldata_cost,
    estimate_l1_data_fee,
    flz_compress_len,
)

BASE_FEE = Uint(30 * 10**9)
OVERHEAD = Uint(2100)
SCALAR = Uint(684000)


def literal_cost(length: int) -> int:
    full, rest = divmod(length, 32)
    return 33 * full + (rest + 1 if rest else 0)


def test_empty_input_compresses_to_nothing() -> None:
    assert flz_compress_len(b"") == Uint(0)


@pytest.mark.parametrize("length", range(1, 13))
def test_short_input_is_one_literal_run(length: int) -> None:
    assert flz_compress_len(b"\x00" * length) == Uint(length + 1)


@pytest.mark.parametrize("length", [13, 31, 32, 33, 64, 100, 255, 256])
def test_input_without_repeats_is_all_literals(length: int) -> None:
    data = bytes(range(length))
    assert flz_compress_len(data) == Uint(literal_cost(length))


def test_repeated_zeros() -> None:
    assert flz_compress_len(bytes(100)) == Uint(12)
    assert flz_compress_len(bytes(1000)) == Uint(21)


def test_periodic_input_matches_block_format() -> None:
    # 8 literals (1 + 8), one 19 byte match at distance 8 in the long form
    # (3), then the 5 bytes kept back from the end (1 + 5).
    data = b"abcdefgh" * 4
    assert flz_compress_len(data) == Uint(18)


def test_repeats_compress_below_input_size() -> None:
    data = b"\xde\xad\xbe\xef" * 64
    assert flz_compress_len(data) < Uint(len(data))


def test_length_grows_with_distinct_input() -> None:
    sizes = [flz_compress_len(bytes(range(n))) for n in range(257)]
    assert sizes == sorted(sizes)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_input(seed: int) -> None:
    rng = random.Random(seed)
    for length in [0, 1, 12, 13, 14, 100, 1000, 9000]:
        data = rng.randbytes(length)
        size = flz_compress_len(data)
        assert size <= Uint(2 * length)
        if length:
            assert size > Uint(0)
        assert flz_compress_len(data) == size


def test_l1_data_fee() -> None:
    fee = estimate_l1_data_fee(bytes(100), BASE_FEE, OVERHEAD, SCALAR)
    assert fee == Uint(246_303_000_000)


def test_l1_data_fee_of_empty_transaction_is_overhead() -> None:
    fee = estimate_l1_data_fee(b"", BASE_FEE, OVERHEAD, SCALAR)
    assert fee == Uint(63_000_000)


def test_l1_data_fee_of_free_base_fee() -> None:
    assert estimate_l1_data_fee(bytes(100), Uint(0), OVERHEAD, SCALAR) == (
        Uint(0)
    )


def test_l1_data_fee_truncates() -> None:
    fee = estimate_l1_data_fee(b"", Uint(999_999), Uint(1), Uint(1))
    assert fee == Uint(0)


def test_l1_data_fee_grows_with_base_fee() -> None:
    data = bytes(range(200))
    fees = [
        estimate_l1_data_fee(data, Uint(base_fee), OVERHEAD, SCALAR)
        for base_fee in range(0, 10**10, 10**9)
    ]
    assert fees == sorted(fees)


def test_calldata_cost() -> None:
    assert calldata_cost(b"") == Uint(0)
    assert calldata_cost(b"\x00\x01\x00\xff") == Uint(40)


def test_l1_gas_used_includes_signature() -> None:
    assert calculate_l1_gas_used(b"", Uint(2100)) == Uint(3188)


def test_calldata_l1_fee() -> None:
    fee = calculate_l1_fee(
        b"\x01" * 10,
        overhead=Uint(2100),
        l1_gas_price=Uint(10**9),
        scalar=Uint(10**6),
        decimals=Uint(6),
    )
    assert fee == Uint(3_348_000_000_000)
