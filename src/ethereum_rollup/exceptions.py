"""
Error types raised by the rollup protocol utilities.
"""

from typing import Final


class RollupException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class MalformedEncoding(RollupException):
    """
    Thrown when a byte sequence is not the canonical encoding of the object
    being decoded.
    """


class InvalidFieldWidth(MalformedEncoding):
    """
    A decoded field does not fit the fixed width it is declared with.
    """

    field: Final[str]
    """
    Name of the offending field.
    """

    expected: Final[int]
    """
    Declared width of the field, in bytes.
    """

    actual: Final[int]
    """
    Width found in the encoding, in bytes.
    """

    def __init__(self, field: str, expected: int, actual: int):
        super().__init__(
            f"field `{field}` must be {expected} bytes wide, got {actual}"
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class TransactionTypeError(MalformedEncoding):
    """
    The leading type byte is not the one expected for the transaction.
    """

    transaction_type: Final[int]
    """
    The type byte of the transaction that caused the error.
    """

    def __init__(self, transaction_type: int):
        super().__init__(f"unknown transaction type `{transaction_type}`")
        self.transaction_type = transaction_type


class UnsupportedDepositVersion(MalformedEncoding):
    """
    A `TransactionDeposited` event carries an opaque data version this
    package cannot interpret.
    """


class UnknownMessageVersion(RollupException):
    """
    The version packed into a cross domain message nonce is not known.
    """


class ConfigurationError(RollupException):
    """
    Thrown when configuration input cannot be interpreted.
    """
