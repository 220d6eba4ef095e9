"""
Field element helpers.

Conversions between the string / int forms used at the API and wire
boundary and the integers fed to the hash and signing primitives.
"""

from __future__ import annotations

from typing import Union

from starknet_py.cairo.felt import encode_shortstring
from starknet_py.hash.selector import get_selector_from_name

from starkcall.constants import FIELD_PRIME, HEX_PREFIX
from starkcall.errors import EncodingError

FeltLike = Union[int, str]


def parse_felt(value: FeltLike, field: str = "value") -> int:
    """Parse a hex (``0x``-prefixed) or decimal value into a field element.

    Args:
        value: Integer or numeric string
        field: Field name for error message

    Returns:
        Integer in ``[0, FIELD_PRIME)``

    Raises:
        EncodingError: If the value is not numeric or is outside the field
    """
    if isinstance(value, bool):
        raise EncodingError(value, field=field, reason="booleans are not field elements")

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            if text[:2].lower() == HEX_PREFIX:
                parsed = int(text[2:], 16)
            else:
                parsed = int(text, 10)
        except ValueError:
            raise EncodingError(value, field=field, reason="not a hex or decimal integer") from None
    else:
        raise EncodingError(value, field=field, reason=f"unsupported type {type(value).__name__}")

    if not 0 <= parsed < FIELD_PRIME:
        raise EncodingError(value, field=field, reason="outside the field range")
    return parsed


def to_hex(value: int) -> str:
    """Render an integer as ``0x``-prefixed lowercase hex without padding."""
    return f"{HEX_PREFIX}{value:x}"


def selector_from_name(name: str) -> int:
    """Resolve an entry-point name to its selector.

    Raises:
        EncodingError: If the name is empty or not ASCII
    """
    if not isinstance(name, str) or not name:
        raise EncodingError(name, field="entry_point", reason="entry-point name must be a non-empty string")
    if not name.isascii():
        raise EncodingError(name, field="entry_point", reason="entry-point name must be ASCII")
    return get_selector_from_name(name)


def string_to_felt(text: str, field: str = "value") -> int:
    """Encode a short UTF-8 string (at most 31 bytes) as a field element.

    Raises:
        EncodingError: If the string does not fit in a single field element
    """
    try:
        return encode_shortstring(text)
    except ValueError as e:
        raise EncodingError(text, field=field, reason=str(e)) from e


def chain_id_to_felt(chain_id: str) -> int:
    """Convert a chain identifier to a field element.

    Names such as ``"SN_GOERLI"`` are encoded as short strings; values already
    returned as hex by the node (``"0x534e5f474f45524c49"``) are parsed as-is.
    """
    if chain_id[:2].lower() == HEX_PREFIX:
        return parse_felt(chain_id, "chain_id")
    return string_to_felt(chain_id, "chain_id")


__all__ = [
    "FeltLike",
    "chain_id_to_felt",
    "parse_felt",
    "selector_from_name",
    "string_to_felt",
    "to_hex",
]
