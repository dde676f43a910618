"""
Cryptographic primitives used by the rollup protocol.
"""
