"""
JSON-RPC round-trip exceptions.

Every failure talking to the node (transport errors, JSON-RPC error
objects, empty results and expired deadlines) surfaces as a
RemoteCallError subclass.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from starkcall.errors.base import StarkCallError


class RemoteCallError(StarkCallError):
    """
    Raised when a JSON-RPC round trip fails.

    Attributes:
        method: JSON-RPC method name
        rpc_code: Error code from the JSON-RPC error object, if any

    Example:
        >>> raise RemoteCallError("Contract not found", method="starknet_call", rpc_code=20)
    """

    def __init__(
        self,
        message: str,
        *,
        method: Optional[str] = None,
        rpc_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if method:
            details["method"] = method
        if rpc_code is not None:
            details["rpc_code"] = rpc_code
        super().__init__(message, code="REMOTE_CALL_ERROR", details=details)
        self.method = method
        self.rpc_code = rpc_code


class NotFoundError(RemoteCallError):
    """Raised when a method succeeds but returns no payload."""

    def __init__(self, method: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"{method}: not found", method=method, details=details)
        self.code = "NOT_FOUND"


class DeadlineExceededError(RemoteCallError):
    """
    Raised when an operation runs past its caller-supplied timeout.

    Example:
        >>> raise DeadlineExceededError(5.0, operation="execute")
    """

    def __init__(
        self,
        timeout: float,
        *,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        details["timeout_seconds"] = timeout
        if operation:
            details["operation"] = operation
        label = operation or "operation"
        super().__init__(f"{label} timed out after {timeout}s", details=details)
        self.code = "DEADLINE_EXCEEDED"
        self.timeout = timeout
        self.operation = operation
