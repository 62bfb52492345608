"""Value ranges per (value type, register quantity) and the pre-encode range check."""

import logging
import math
import sys

from regcodec.exception import InvalidQuantityForTypeError, UnknownValueTypeError, ValueOutOfRangeError
from regcodec.model.enum.value_type_enum import ValueType
from regcodec.model.register_value import REGISTER_BYTES, TypedValue

logger = logging.getLogger(__name__)

# largest finite binary32 (7F7FFFFF)
FLOAT32_MAX: float = 3.4028234663852886e38
FLOAT64_MAX: float = sys.float_info.max

LEGAL_WIDTHS: dict[ValueType, tuple[int, ...]] = {
    ValueType.BOOLEAN: (1, 2, 4, 8),
    ValueType.UNSIGNED_INTEGER: (1, 2, 4, 8),
    ValueType.SIGNED_INTEGER: (1, 2, 4, 8),
    ValueType.FLOAT: (4, 8),
}


def resolve_value_type(value_type: ValueType | str) -> ValueType:
    resolved = ValueType.from_string(value_type)
    if resolved is None:
        logger.error(f"[Codec] Unknown value type: {value_type!r}")
        raise UnknownValueTypeError(f"Unknown value type: {value_type!r}", value_type=value_type)
    return resolved


def payload_width(value_type: ValueType | str, quantity: int) -> int:
    """Return the byte width for `quantity` registers, or raise if the type cannot have that width."""
    value_type = resolve_value_type(value_type)
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantityForTypeError(
            f"Invalid quantity ({quantity!r}) for value type '{value_type}'", value_type=value_type, quantity=quantity
        )

    width = quantity * REGISTER_BYTES
    if not value_type.is_numeric:
        return width
    if width not in LEGAL_WIDTHS[value_type]:
        logger.error(f"[Codec] Invalid quantity ({quantity}) for value type '{value_type}'")
        raise InvalidQuantityForTypeError(
            f"Invalid quantity ({quantity}) for value type '{value_type}': "
            f"{width} bytes, allowed {LEGAL_WIDTHS[value_type]}",
            value_type=value_type,
            quantity=quantity,
        )
    return width


def value_range(value_type: ValueType | str, quantity: int) -> tuple[int | float, int | float]:
    """
    Inclusive (min, max) for a value type at the width of `quantity` registers.

    For text the bounds are on the encoded length in bytes.
    """
    value_type = resolve_value_type(value_type)
    width = payload_width(value_type, quantity)
    bits = width * 8

    match value_type:
        case ValueType.BOOLEAN:
            return 0, 1
        case ValueType.UNSIGNED_INTEGER:
            return 0, 2**bits - 1
        case ValueType.SIGNED_INTEGER:
            return -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
        case ValueType.FLOAT:
            limit = FLOAT32_MAX if width == 4 else FLOAT64_MAX
            return -limit, limit
        case ValueType.TEXT:
            return 0, width


def validate_value(value: TypedValue, value_type: ValueType | str, quantity: int) -> None:
    """Raise ValueOutOfRangeError unless `value` fits the value type and width."""
    value_type = resolve_value_type(value_type)
    minimum, maximum = value_range(value_type, quantity)

    def _out_of_range(reason: str) -> ValueOutOfRangeError:
        return ValueOutOfRangeError(
            f"Value {value!r} {reason} (min: {minimum} max: {maximum}) "
            f"for value type '{value_type}' with quantity {quantity}",
            value=value,
            minimum=minimum,
            maximum=maximum,
            value_type=value_type,
            quantity=quantity,
        )

    if not value_type.is_numeric:
        if not isinstance(value, str):
            raise _out_of_range("is not text")
        try:
            length = len(value.encode("latin-1"))
        except UnicodeEncodeError:
            raise _out_of_range("is not latin-1 encodable") from None
        if length > maximum:
            raise _out_of_range(f"is too long ({length} bytes)")
        return

    if isinstance(value, str) or not isinstance(value, (int, float)):
        raise _out_of_range("is not numeric")
    if isinstance(value, float) and math.isnan(value):
        raise _out_of_range("is not a number")
    if value < minimum or value > maximum:
        raise _out_of_range("is out of range")
    if value_type is ValueType.BOOLEAN and value not in (0, 1):
        raise _out_of_range("is not a boolean")
    if value_type.is_integral and isinstance(value, float) and not math.isclose(value, round(value), rel_tol=1e-9):
        raise _out_of_range("is not an integer")
