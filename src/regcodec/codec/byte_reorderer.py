"""
Byte/word reordering between canonical big-endian and a device's wire order.

All transforms keep the buffer length. An unpaired trailing byte (byte swap)
or word (word swap) is left where it is.
"""

from regcodec.exception import UnsupportedOrderingModeError
from regcodec.model.enum.ordering_mode_enum import OrderingMode


def byte_swap(buffer: bytes) -> bytes:
    """ABCD -> BADC"""
    out = bytearray(buffer)
    for i in range(0, len(buffer) - 1, 2):
        out[i], out[i + 1] = buffer[i + 1], buffer[i]
    return bytes(out)


def word_swap(buffer: bytes) -> bytes:
    """ABCDEFGH -> CDABGHEF"""
    out = bytearray(buffer)
    for i in range(0, len(buffer) - 3, 4):
        out[i : i + 2], out[i + 2 : i + 4] = buffer[i + 2 : i + 4], buffer[i : i + 2]
    return bytes(out)


def reverse(buffer: bytes) -> bytes:
    """ABCD -> DCBA"""
    return bytes(reversed(buffer))


def reorder(buffer: bytes, mode: OrderingMode, *, inverse: bool = False) -> bytes:
    """
    Apply the transform selected by `mode` to `buffer`.

    Decoding (wire -> canonical) calls this with inverse=False. Encoding
    (canonical -> wire) calls it with inverse=True, which runs the swap step
    before the reversal. Both orders give the same result for register-aligned
    widths, except little_endian_word_swap on an odd number of registers.
    """
    buffer = bytes(buffer)
    if len(buffer) < 2:
        return buffer

    match mode:
        case OrderingMode.BIG_ENDIAN:
            return buffer
        case OrderingMode.BIG_ENDIAN_BYTE_SWAP:
            return byte_swap(buffer)
        case OrderingMode.BIG_ENDIAN_WORD_SWAP:
            return word_swap(buffer)
        case OrderingMode.LITTLE_ENDIAN:
            return reverse(buffer)
        case OrderingMode.LITTLE_ENDIAN_BYTE_SWAP:
            if inverse:
                return reverse(byte_swap(buffer))
            return byte_swap(reverse(buffer))
        case OrderingMode.LITTLE_ENDIAN_WORD_SWAP:
            if inverse:
                return reverse(word_swap(buffer))
            return word_swap(reverse(buffer))
        case _:
            raise UnsupportedOrderingModeError(f"Unsupported ordering mode: {mode!r}", mode=mode)


def resolve_ordering_mode(mode: OrderingMode | str | int) -> OrderingMode:
    resolved = OrderingMode.from_code(mode) if isinstance(mode, int) else OrderingMode.from_string(mode)
    if resolved is None:
        raise UnsupportedOrderingModeError(f"Unsupported ordering mode: {mode!r}", mode=mode)
    return resolved
