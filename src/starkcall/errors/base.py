"""
Root of the starkcall exception hierarchy.

Every failure on the invoke pipeline (encoding, nonce lookup, fee
estimation, chain id lookup, signing, submission) raises a StarkCallError
subclass. ``details["step"]`` names the pipeline step that failed so a
caller can catch the base class and still tell a nonce problem from a
rejected submission.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class StarkCallError(Exception):
    """
    Base exception for all starkcall errors.

    Attributes:
        message: Human-readable description.
        code: Stable machine-readable code, e.g. ``"NONCE_UNAVAILABLE"``.
        tx_hash: Invoke transaction hash, once one has been computed.
        details: Context such as ``step``, ``method`` or the offending value.
            Never holds key material.

    Example:
        >>> try:
        ...     await account.execute(calls)
        ... except StarkCallError as e:
        ...     log.error("invoke failed", extra={"code": e.code, "step": e.step})
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "STARKCALL_ERROR",
        tx_hash: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.tx_hash = tx_hash
        self.details = details or {}

    @property
    def step(self) -> Optional[str]:
        """Pipeline step that failed (``nonce``, ``fee``, ``chain_id``, ``hash``, ``sign``), when known."""
        return self.details.get("step")

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.tx_hash:
            parts.append(f"(tx: {self.tx_hash[:10]}...)")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"tx_hash={self.tx_hash!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a JSON-safe dict for structured logs and API responses."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "tx_hash": self.tx_hash,
            "details": self.details,
        }
