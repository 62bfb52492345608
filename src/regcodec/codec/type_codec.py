"""
Conversion between a canonical big-endian register payload and a typed value.

Widths (bytes = quantity * 2):
    bool, uint, int  -> 2, 4, 8
    float            -> 4 (binary32), 8 (binary64)
    string           -> any, NUL padded on the right

Numeric payloads go through pymodbus register conversion with big word order;
text stays on Latin-1 bytes. A boolean is true when the whole payload, read as
an unsigned integer, is non-zero.
"""

import logging

from pymodbus.client.mixin import ModbusClientMixin

from regcodec.codec.range_validator import payload_width, resolve_value_type, validate_value
from regcodec.exception import LengthMismatchError
from regcodec.model.enum.value_type_enum import ValueType
from regcodec.model.register_value import TypedValue, bytes_to_registers, registers_to_bytes

logger = logging.getLogger(__name__)

TEXT_ENCODING = "latin-1"
TEXT_PADDING = "\x00 "

_UNSIGNED_TYPES = {
    2: ModbusClientMixin.DATATYPE.UINT16,
    4: ModbusClientMixin.DATATYPE.UINT32,
    8: ModbusClientMixin.DATATYPE.UINT64,
}

_DATA_TYPES: dict[ValueType, dict[int, ModbusClientMixin.DATATYPE]] = {
    ValueType.BOOLEAN: _UNSIGNED_TYPES,
    ValueType.UNSIGNED_INTEGER: _UNSIGNED_TYPES,
    ValueType.SIGNED_INTEGER: {
        2: ModbusClientMixin.DATATYPE.INT16,
        4: ModbusClientMixin.DATATYPE.INT32,
        8: ModbusClientMixin.DATATYPE.INT64,
    },
    ValueType.FLOAT: {
        4: ModbusClientMixin.DATATYPE.FLOAT32,
        8: ModbusClientMixin.DATATYPE.FLOAT64,
    },
}


def decode_value(buffer: bytes, value_type: ValueType | str, quantity: int) -> TypedValue:
    """Interpret a canonical big-endian payload of `quantity` registers as `value_type`."""
    value_type = resolve_value_type(value_type)
    width = payload_width(value_type, quantity)
    if len(buffer) != width:
        raise LengthMismatchError(
            f"Length of returned data ({len(buffer)}) does not match length of requested data ({width})",
            expected=width,
            actual=len(buffer),
        )

    if not value_type.is_numeric:
        return bytes(buffer).decode(TEXT_ENCODING).rstrip(TEXT_PADDING)

    value = ModbusClientMixin.convert_from_registers(
        bytes_to_registers(buffer), data_type=_DATA_TYPES[value_type][width], word_order="big"
    )
    match value_type:
        case ValueType.BOOLEAN:
            return value != 0
        case ValueType.FLOAT:
            return float(value)
        case _:
            return int(value)


def encode_value(value: TypedValue, value_type: ValueType | str, quantity: int) -> bytes:
    """
    Encode `value` as a canonical big-endian payload of exactly `quantity` registers.

    The value is range checked first; nothing is truncated. Integral types accept
    floats that are whole up to division noise (e.g. `0.3 / 0.1`) and snap them to
    the nearest integer.
    """
    value_type = resolve_value_type(value_type)
    width = payload_width(value_type, quantity)
    validate_value(value, value_type, quantity)

    if not value_type.is_numeric:
        return value.encode(TEXT_ENCODING).ljust(width, b"\x00")

    native = _to_integral(value) if value_type.is_integral else float(value)
    registers = ModbusClientMixin.convert_to_registers(
        native, data_type=_DATA_TYPES[value_type][width], word_order="big"
    )
    return registers_to_bytes(registers)


def _to_integral(value: int | float) -> int:
    if isinstance(value, float) and not value.is_integer():
        logger.debug(f"[Codec] snapping {value!r} to {round(value)}")
    return int(round(value))
