"""Stark-curve signing for account transactions.

Wraps the ``starknet_py`` ECDSA primitives around a private key held in
memory. The key is never exposed through attributes, ``repr`` or error
messages.
"""

from typing import Sequence, Union

from starknet_py.hash.utils import message_signature, private_to_stark_key, verify_message_signature

from .errors import ConfigurationError, EncodingError, SigningError
from .types import Signature
from .utils.felt import parse_felt, to_hex

# Order of the Stark curve generator.
EC_ORDER = 0x800000000000010FFFFFFFFFFFFFFFFB781126DCAE7B2321E66A241ADC64D2F


class StarkSigner:
    """Signs transaction hashes with a Stark private key.

    Example:
        >>> signer = StarkSigner("0x1234")
        >>> sig = signer.sign(tx_hash)
        >>> signer.verify(tx_hash, sig)
        True
    """

    def __init__(self, private_key: Union[str, int]):
        """Initialize signer.

        Args:
            private_key: Private scalar (hex string, decimal string or int)

        Raises:
            ConfigurationError: If the key is not a valid scalar
        """
        # Sanitize key errors to prevent key leakage in stack traces
        try:
            key = parse_felt(private_key, "private_key")
        except EncodingError:
            raise ConfigurationError("Invalid private key format (key not shown for security)") from None
        if not 0 < key < EC_ORDER:
            raise ConfigurationError("Private key out of range (key not shown for security)")
        self.__private_key = key
        self._public_key = private_to_stark_key(key)

    @property
    def public_key(self) -> int:
        return self._public_key

    def sign(self, msg_hash: int) -> Signature:
        """Sign a message hash.

        Raises:
            SigningError: If the hash is outside the signable range
        """
        try:
            r, s = message_signature(msg_hash, self.__private_key)
        except (AssertionError, ValueError) as e:
            raise SigningError(
                f"Cannot sign message hash {to_hex(msg_hash)}",
                details={"reason": str(e)},
            ) from None
        return Signature(r, s)

    def verify(self, msg_hash: int, signature: Sequence[int]) -> bool:
        return verify_message_signature(msg_hash, list(signature), self._public_key)

    def __repr__(self) -> str:
        return f"StarkSigner(public_key={to_hex(self._public_key)})"
