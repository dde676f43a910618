"""
Protocol constants shared by L1 and L2.
"""

from ethereum_types.numeric import U256, Uint

L1_TO_L2_ALIAS_OFFSET = U256(0x1111000000000000000000000000000000001111)

DEPOSIT_TX_TYPE = 0x7E
DEPOSIT_EVENT_VERSION = U256(0)
TRANSACTION_DEPOSITED_SIGNATURE = (
    "TransactionDeposited(address,address,uint256,bytes)"
)

FEE_SCALE = Uint(10**6)

TX_DATA_COST_PER_ZERO = Uint(4)
TX_DATA_COST_PER_NON_ZERO = Uint(16)
TX_SIGNATURE_PADDING_COST = Uint(68) * TX_DATA_COST_PER_NON_ZERO

MESSAGE_VERSION_SHIFT = 240
MESSAGE_NONCE_MASK = U256(2**MESSAGE_VERSION_SHIFT - 1)
