"""
Transaction pipeline exceptions.

Raised while encoding, hashing, signing or assembling an invoke
transaction, before anything reaches the network.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from starkcall.errors.base import StarkCallError


class EncodingError(StarkCallError):
    """
    Raised when a value cannot be encoded as a field element.

    Covers unparseable call data, addresses and nonces, values outside
    the field, and entry-point names that cannot be turned into a selector.

    Example:
        >>> raise EncodingError("not-a-number", field="calldata[0]")
    """

    def __init__(
        self,
        value: Any,
        *,
        field: Optional[str] = None,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        details["value"] = repr(value)
        if field:
            details["field"] = field
        if reason:
            details["reason"] = reason

        message = f"Cannot encode {value!r}"
        if field:
            message += f" for {field}"
        if reason:
            message += f" ({reason})"

        super().__init__(message, code="ENCODING_ERROR", details=details)
        self.value = value
        self.field = field
        self.reason = reason


class ChainLookupError(StarkCallError):
    """Raised when the chain identifier cannot be fetched."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        details = details or {}
        details.setdefault("step", "chain_id")
        super().__init__(message, code="CHAIN_LOOKUP_ERROR", details=details)


class NonceUnavailableError(StarkCallError):
    """
    Raised when the account nonce cannot be read.

    The nonce read returned no data, or its first element is not an integer.

    Example:
        >>> raise NonceUnavailableError("0x12ab", reason="empty result")
    """

    def __init__(
        self,
        address: str,
        *,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        details.setdefault("step", "nonce")
        details["address"] = address
        details["reason"] = reason
        super().__init__(
            f"Nonce unavailable for {address}: {reason}",
            code="NONCE_UNAVAILABLE",
            details=details,
        )
        self.address = address
        self.reason = reason


class FeeParseError(StarkCallError):
    """Raised when a fee estimate's overall fee is not an integer."""

    def __init__(self, overall_fee: Any, *, details: Optional[Dict[str, Any]] = None) -> None:
        details = details or {}
        details.setdefault("step", "fee")
        details["overall_fee"] = repr(overall_fee)
        super().__init__(
            f"Could not parse overall fee {overall_fee!r} as an integer",
            code="FEE_PARSE_ERROR",
            details=details,
        )
        self.overall_fee = overall_fee


class SigningError(StarkCallError):
    """Raised when the signing primitive rejects a message hash."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        details = details or {}
        details.setdefault("step", "sign")
        super().__init__(message, code="SIGNING_ERROR", details=details)


class ConfigurationError(StarkCallError):
    """Raised for invalid keys, addresses or network settings."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
