"""Multicall calldata encoding for account ``__execute__``.

Layout of the encoded sequence::

    [call_count,
     address_0, selector_0, offset_0, length_0,
     ...
     address_n, selector_n, offset_n, length_n,
     total_args_len, *args_0, ..., *args_n,
     nonce]

``offset_i`` is the length of the shared argument buffer *before* call
``i``'s arguments were appended. A call with no arguments is recorded as
``offset = length = 0`` and leaves the buffer untouched. Account contracts
decode the calls with exactly this table.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from starkcall.errors import EncodingError
from starkcall.types import Call, DecodedCall
from starkcall.utils.felt import FeltLike, parse_felt, selector_from_name, to_hex

__all__ = [
    "encode_execute_calldata",
    "encode_execute_calldata_hex",
    "decode_execute_calldata",
]

_CALL_ENTRY_SIZE = 4


def encode_execute_calldata(calls: Sequence[Call], nonce: FeltLike) -> List[int]:
    """Encode calls and nonce as the flat ``__execute__`` calldata.

    Args:
        calls: Calls in execution order
        nonce: Account nonce appended as the final element

    Returns:
        List of field elements

    Raises:
        EncodingError: If an address, argument or the nonce is not a field
            element, or an entry-point name has no selector
    """
    call_array: List[int] = [len(calls)]
    args: List[int] = []

    for index, call in enumerate(calls):
        call_array.append(parse_felt(call.contract_address, f"calls[{index}].contract_address"))
        call_array.append(selector_from_name(call.entry_point))

        if not call.calldata:
            call_array.extend((0, 0))
            continue

        call_array.extend((len(args), len(call.calldata)))
        args.extend(
            parse_felt(item, f"calls[{index}].calldata[{pos}]")
            for pos, item in enumerate(call.calldata)
        )

    call_array.append(len(args))
    call_array.extend(args)
    call_array.append(parse_felt(nonce, "nonce"))
    return call_array


def encode_execute_calldata_hex(calls: Sequence[Call], nonce: FeltLike) -> List[str]:
    """Same as :func:`encode_execute_calldata`, rendered as ``0x`` hex strings."""
    return [to_hex(value) for value in encode_execute_calldata(calls, nonce)]


def decode_execute_calldata(calldata: Sequence[FeltLike]) -> Tuple[List[DecodedCall], int]:
    """Split encoded ``__execute__`` calldata back into calls.

    Args:
        calldata: Sequence produced by :func:`encode_execute_calldata`
            (ints or hex/decimal strings)

    Returns:
        ``(calls, nonce)``

    Raises:
        EncodingError: If the sequence is truncated or its offset table
            points outside the argument buffer
    """
    values = [parse_felt(item, f"calldata[{pos}]") for pos, item in enumerate(calldata)]
    if not values:
        raise EncodingError(calldata, field="calldata", reason="empty calldata")

    count = values[0]
    table_end = 1 + count * _CALL_ENTRY_SIZE
    # table, args length, nonce
    if len(values) < table_end + 2:
        raise EncodingError(calldata, field="calldata", reason="truncated call table")

    args_len = values[table_end]
    args_start = table_end + 1
    args_end = args_start + args_len
    if len(values) != args_end + 1:
        raise EncodingError(
            calldata,
            field="calldata",
            reason=f"expected {args_end + 1} elements, got {len(values)}",
        )
    args = values[args_start:args_end]

    calls: List[DecodedCall] = []
    for index in range(count):
        base = 1 + index * _CALL_ENTRY_SIZE
        address, selector, offset, length = values[base:base + _CALL_ENTRY_SIZE]
        if offset + length > args_len:
            raise EncodingError(
                calldata,
                field=f"calls[{index}]",
                reason=f"slice {offset}:{offset + length} outside {args_len} arguments",
            )
        calls.append(DecodedCall(address, selector, tuple(args[offset:offset + length])))

    return calls, values[args_end]
