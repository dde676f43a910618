"""
L1 Data Fees
^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Every L2 transaction is eventually posted to L1 inside a compressed batch,
and its sender pays for the share of L1 data it occupies. The share is
estimated from the FastLZ compressed length of the transaction's bytes, which
is cheap to compute, deterministic, and identical wherever it is computed.
Both the fee quoted to a user and the fee charged on chain use the same
estimate, so it must be reproduced exactly.

The calldata based fee used before compression was taken into account is
kept alongside.
"""

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import Uint

from .constants import (
    FEE_SCALE,
    TX_DATA_COST_PER_NON_ZERO,
    TX_DATA_COST_PER_ZERO,
    TX_SIGNATURE_PADDING_COST,
)

FLZ_HASH_LOG = 13
FLZ_HASH_SIZE = 1 << FLZ_HASH_LOG
FLZ_HASH_MASK = FLZ_HASH_SIZE - 1
FLZ_HASH_MULTIPLIER = 2654435769
FLZ_MAX_DISTANCE = 0x1FFF
FLZ_MAX_LITERAL_RUN = 0x20
FLZ_MAX_MATCH_RUN = 262
FLZ_INPUT_MARGIN = 13


def flz_compress_len(data: Bytes) -> Uint:
    """
    Compute the length `data` would have after FastLZ (level 1)
    compression, without producing the compressed output.

    Repeats of at least three bytes within the last `FLZ_MAX_DISTANCE` bytes
    are found through a hash table of the most recent position of each
    24-bit word. Everything between matches is emitted as literal runs.

    Parameters
    ----------
    data :
        Bytes to measure.

    Returns
    -------
    length : `ethereum_types.numeric.Uint`
        Size of the compressed representation, in bytes.
    """
    length = len(data)
    size = 0
    table = [0] * FLZ_HASH_SIZE

    def u24(i: int) -> int:
        return data[i] | (data[i + 1] << 8) | (data[i + 2] << 16)

    def hash24(v: int) -> int:
        return (((FLZ_HASH_MULTIPLIER * v) & 0xFFFFFFFF) >> 19) & FLZ_HASH_MASK

    def literals(run: int) -> int:
        cost = (FLZ_MAX_LITERAL_RUN + 1) * (run // FLZ_MAX_LITERAL_RUN)
        run %= FLZ_MAX_LITERAL_RUN
        if run != 0:
            cost += run + 1
        return cost

    def match(match_length: int) -> int:
        match_length -= 1
        cost = 3 * (match_length // FLZ_MAX_MATCH_RUN)
        if match_length % FLZ_MAX_MATCH_RUN >= 6:
            return cost + 3
        return cost + 2

    def compare(p: int, q: int, end: int) -> int:
        # Counts one past the first mismatch, like the reference encoder.
        matched = 0
        end -= q
        while matched < end:
            if data[p + matched] != data[q + matched]:
                end = 0
            matched += 1
        return matched

    def set_next_hash(ip: int) -> int:
        table[hash24(u24(ip))] = ip
        return ip + 1

    anchor = 0
    ip_limit = length - FLZ_INPUT_MARGIN if length >= FLZ_INPUT_MARGIN else 0
    ip = anchor + 2

    while ip < ip_limit:
        while True:
            seq = u24(ip)
            h = hash24(seq)
            ref = table[h]
            table[h] = ip
            distance = ip - ref
            if ip >= ip_limit:
                break
            ip += 1
            if distance <= FLZ_MAX_DISTANCE and seq == u24(ref):
                break

        if ip >= ip_limit:
            break

        ip -= 1
        if ip > anchor:
            size += literals(ip - anchor)

        matched = compare(ref + 3, ip + 3, ip_limit + 9)
        size += match(matched)
        ip = set_next_hash(set_next_hash(ip + matched))
        anchor = ip

    size += literals(length - anchor)
    return Uint(size)


def estimate_l1_data_fee(
    raw_tx: Bytes, l1_base_fee: Uint, overhead: Uint, scalar: Uint
) -> Uint:
    """
    Estimate the fee for posting `raw_tx` to L1.

    The compressed size is scaled by `scalar` (fixed point, six decimals),
    `overhead` is added in the same units, and the result is priced at
    `l1_base_fee`. Division truncates.

    Parameters
    ----------
    raw_tx :
        Serialized transaction of any type.
    l1_base_fee :
        Current L1 base fee per gas.
    overhead :
        Fixed amount added to the scaled size.
    scalar :
        Multiplier applied to the compressed size, scaled by `10**6`.

    Returns
    -------
    fee : `ethereum_types.numeric.Uint`
        L1 data fee in wei.
    """
    compressed_size = flz_compress_len(raw_tx)
    scaled_size = compressed_size * Uint(scalar)
    return (scaled_size + Uint(overhead)) * Uint(l1_base_fee) // FEE_SCALE


def calldata_cost(data: Bytes) -> Uint:
    """
    Gas charged for `data` as L1 calldata.
    """
    zeros = data.count(0)
    ones = len(data) - zeros
    return (
        Uint(zeros) * TX_DATA_COST_PER_ZERO
        + Uint(ones) * TX_DATA_COST_PER_NON_ZERO
    )


def calculate_l1_gas_used(data: Bytes, overhead: Uint) -> Uint:
    """
    L1 gas attributed to an unsigned transaction `data`, including the
    signature it will carry once posted.
    """
    return calldata_cost(data) + Uint(overhead) + TX_SIGNATURE_PADDING_COST


def calculate_l1_fee(
    data: Bytes,
    overhead: Uint,
    l1_gas_price: Uint,
    scalar: Uint,
    decimals: Uint,
) -> Uint:
    """
    Calldata based L1 fee, `l1_gas_used * l1_gas_price * scalar` scaled
    down by `10**decimals`.
    """
    l1_gas_used = calculate_l1_gas_used(data, overhead)
    unscaled = l1_gas_used * Uint(l1_gas_price) * Uint(scalar)
    return unscaled // (Uint(10) ** Uint(decimals))
