"""
Utility functions used by the rollup protocol utilities.
"""
