"""
Rollup Protocol Utilities
^^^^^^^^^^^^^^^^^^^^^^^^^

An optimistic rollup settles on a base chain (L1) while executing
transactions on its own chain (L2). Moving value and messages between the two
requires both sides to agree, byte for byte, on a handful of derived values:
the alias a relaying L1 contract is given on L2, the encoding and hash of the
synthetic deposit transactions created from L1 events, and the fee charged for
making an L2 transaction's bytes available on L1.

This package contains those derivations, written as simply as possible, with
every operation a pure function of its arguments.
"""

__version__ = "0.1.0"
