from regcodec.codec.range_validator import resolve_value_type
from regcodec.model.enum.value_type_enum import ValueType
from regcodec.model.register_value import TypedValue


def is_scaling_enabled(factor: int | float | None) -> bool:
    """A factor of 0 (or None) means 'no scaling', not 'divide by zero'."""
    return factor is not None and factor != 0


def apply_factor(value: TypedValue, factor: int | float | None, divide: bool = False) -> TypedValue:
    """
    Multiply (decode direction) or divide (encode direction) by a scale factor.

    Text and boolean values pass through unchanged, as does everything when the
    factor is disabled.

    Integers divided by a whole factor stay exact integers when the division has
    no remainder, so 64-bit values keep full precision.
    """
    if isinstance(value, (str, bool)) or not is_scaling_enabled(factor):
        return value
    if divide:
        if isinstance(value, int) and _is_whole(factor):
            quotient, remainder = divmod(value, int(factor))
            if remainder == 0:
                return quotient
        return value / factor
    return value * factor


def _is_whole(factor: int | float) -> bool:
    return isinstance(factor, int) or (isinstance(factor, float) and factor.is_integer())


def scaled_value_type(value_type: ValueType | str, factor: int | float | None) -> type:
    """
    Python type a decoded-and-scaled value ends up as.

    Unsigned and signed integers both map to int; either becomes float once a
    float factor is involved.
    """
    value_type = resolve_value_type(value_type)
    match value_type:
        case ValueType.BOOLEAN:
            return bool
        case ValueType.TEXT:
            return str
        case ValueType.FLOAT:
            return float
        case ValueType.UNSIGNED_INTEGER | ValueType.SIGNED_INTEGER:
            if is_scaling_enabled(factor) and isinstance(factor, float):
                return float
            return int
