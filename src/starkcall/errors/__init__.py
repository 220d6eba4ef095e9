"""
starkcall exception hierarchy.

    StarkCallError
    ├── EncodingError
    ├── ChainLookupError
    ├── NonceUnavailableError
    ├── FeeParseError
    ├── SigningError
    ├── ConfigurationError
    └── RemoteCallError
        ├── NotFoundError
        └── DeadlineExceededError
"""

from starkcall.errors.base import StarkCallError
from starkcall.errors.rpc import DeadlineExceededError, NotFoundError, RemoteCallError
from starkcall.errors.transaction import (
    ChainLookupError,
    ConfigurationError,
    EncodingError,
    FeeParseError,
    NonceUnavailableError,
    SigningError,
)

__all__ = [
    "StarkCallError",
    "EncodingError",
    "ChainLookupError",
    "NonceUnavailableError",
    "FeeParseError",
    "SigningError",
    "ConfigurationError",
    "RemoteCallError",
    "NotFoundError",
    "DeadlineExceededError",
]
