"""
Transaction Types

Models for multicall invocations: the calls a caller authorizes, the
per-transaction details, and the payloads exchanged with the node.
"""

from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from starkcall.constants import INVOKE_TRANSACTION_TYPE
from starkcall.errors import EncodingError, FeeParseError
from starkcall.utils.felt import parse_felt, to_hex


# ============================================================================
# Calls
# ============================================================================

class Call(BaseModel):
    """
    A single contract invocation inside a multicall.

    Call data items are kept as strings in hex (``0x``) or decimal form;
    integers are accepted and converted.

    Example:
        ```python
        transfer = Call(
            contract_address="0x049d36570d4e46f48e99674bd3fcc84644ddd6b96f7c741b1562b82f9e004dc7",
            entry_point="transfer",
            calldata=["0x1234", 100, 0],
        )
        ```
    """

    model_config = ConfigDict(frozen=True)

    contract_address: str = Field(..., description="Target contract address")
    entry_point: str = Field(..., description="Entry-point name, resolved to a selector")
    calldata: Tuple[str, ...] = Field(default=(), description="Call arguments")

    @field_validator("contract_address", mode="before")
    @classmethod
    def _address_to_str(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return to_hex(v)
        return v

    @field_validator("calldata", mode="before")
    @classmethod
    def _calldata_to_str(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(str(item) if isinstance(item, int) and not isinstance(item, bool) else item for item in v)
        return v


class DecodedCall(NamedTuple):
    """One call recovered from encoded ``__execute__`` calldata."""

    contract_address: int
    selector: int
    calldata: Tuple[int, ...]


# ============================================================================
# Execution Details
# ============================================================================

class ExecutionDetails(BaseModel):
    """
    Optional per-transaction parameters.

    Any field left as ``None`` is resolved by the account: the nonce is read
    from the chain, the max fee is defaulted or estimated, the version is 0.
    """

    model_config = ConfigDict(frozen=True)

    max_fee: Optional[int] = Field(default=None, ge=0)
    nonce: Optional[int] = Field(default=None, ge=0)
    version: Optional[int] = Field(default=None, ge=0)

    @property
    def is_resolved(self) -> bool:
        return self.max_fee is not None and self.nonce is not None and self.version is not None

    def with_values(self, **values: Optional[int]) -> "ExecutionDetails":
        """Return a copy with the given fields replaced."""
        return self.model_copy(update=values)


# ============================================================================
# Signatures
# ============================================================================

class Signature(NamedTuple):
    """Stark-curve ECDSA signature."""

    r: int
    s: int

    def to_wire(self) -> List[str]:
        """Both components as base-10 strings."""
        return [str(self.r), str(self.s)]


# ============================================================================
# Wire Payloads
# ============================================================================

class InvokeTransaction(BaseModel):
    """
    Signed invoke transaction as sent to the node.

    Numeric fields are ``0x``-prefixed hex; signature components are
    base-10 strings.
    """

    model_config = ConfigDict(frozen=True)

    contract_address: str
    entry_point_selector: str
    calldata: List[str]
    signature: List[str]
    max_fee: str
    version: str
    nonce: str
    type: str = INVOKE_TRANSACTION_TYPE

    def to_rpc(self) -> Dict[str, Any]:
        return self.model_dump()


class FeeEstimate(BaseModel):
    """Fee estimate returned by ``starknet_estimateFee``."""

    model_config = ConfigDict(frozen=True, extra="allow")

    gas_consumed: Optional[Union[str, int]] = None
    gas_price: Optional[Union[str, int]] = None
    overall_fee: Optional[Union[str, int]] = None

    def overall_fee_int(self) -> int:
        """
        Parse the overall fee.

        Raises:
            FeeParseError: If the fee is missing, not a hex or decimal
                integer, or outside ``[0, FIELD_PRIME)``
        """
        try:
            return parse_felt(self.overall_fee, "overall_fee")
        except EncodingError as e:
            raise FeeParseError(self.overall_fee, details={"reason": e.reason}) from None


class InvokeResult(BaseModel):
    """Response from ``starknet_addInvokeTransaction``."""

    model_config = ConfigDict(frozen=True, extra="allow")

    transaction_hash: str
    status: Optional[str] = None
