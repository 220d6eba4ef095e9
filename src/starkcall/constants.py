"""Constants for the starkcall SDK.

This module defines the constant values used across the SDK,
including field parameters, entry-point names, fee defaults and
network settings.
"""

# Field Constants
FIELD_PRIME = 2**251 + 17 * 2**192 + 1
HEX_PREFIX = "0x"

# Entry Points
EXECUTE_ENTRY_POINT = "__execute__"
NONCE_ENTRY_POINT = "get_nonce"

# Transaction Hash Domain
INVOKE_TRANSACTION_PREFIX = "invoke"
INVOKE_TRANSACTION_TYPE = "INVOKE"

# Fee Constants
DEFAULT_MAX_FEE = 0x200000000  # used for estimation when no max fee is given
DEFAULT_TRANSACTION_VERSION = 0
ESTIMATED_FEE_MULTIPLIER = 2  # execute() pays up to 2x the estimate

# RPC Constants
BLOCK_TAG_LATEST = "latest"
RPC_TIMEOUT_SECONDS = 30
JSONRPC_VERSION = "2.0"

METHOD_CALL = "starknet_call"
METHOD_CHAIN_ID = "starknet_chainId"
METHOD_ESTIMATE_FEE = "starknet_estimateFee"
METHOD_ADD_INVOKE_TRANSACTION = "starknet_addInvokeTransaction"

__all__ = [
    "FIELD_PRIME",
    "HEX_PREFIX",
    "EXECUTE_ENTRY_POINT",
    "NONCE_ENTRY_POINT",
    "INVOKE_TRANSACTION_PREFIX",
    "INVOKE_TRANSACTION_TYPE",
    "DEFAULT_MAX_FEE",
    "DEFAULT_TRANSACTION_VERSION",
    "ESTIMATED_FEE_MULTIPLIER",
    "BLOCK_TAG_LATEST",
    "RPC_TIMEOUT_SECONDS",
    "JSONRPC_VERSION",
    # RPC methods
    "METHOD_CALL",
    "METHOD_CHAIN_ID",
    "METHOD_ESTIMATE_FEE",
    "METHOD_ADD_INVOKE_TRANSACTION",
]
