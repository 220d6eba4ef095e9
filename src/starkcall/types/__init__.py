"""Type definitions for the starkcall SDK."""

from starkcall.types.transaction import (
    Call,
    DecodedCall,
    ExecutionDetails,
    FeeEstimate,
    InvokeResult,
    InvokeTransaction,
    Signature,
)

__all__ = [
    "Call",
    "DecodedCall",
    "ExecutionDetails",
    "FeeEstimate",
    "InvokeResult",
    "InvokeTransaction",
    "Signature",
]
