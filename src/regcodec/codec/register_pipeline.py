"""
Register value pipeline.

Decode:  raw wire bytes -> reorder -> decode_value -> apply_factor (multiply) -> scaled_value_type cast -> value
Encode:  value -> apply_factor (divide) -> encode_value (range checked) -> reorder -> raw wire bytes

Any stage error aborts the whole flow; nothing partial is returned.
"""

import logging

from regcodec.codec.byte_reorderer import reorder, resolve_ordering_mode
from regcodec.codec.range_validator import resolve_value_type
from regcodec.codec.scaling import apply_factor, scaled_value_type
from regcodec.codec.type_codec import decode_value, encode_value
from regcodec.model.enum.ordering_mode_enum import OrderingMode
from regcodec.model.enum.value_type_enum import ValueType
from regcodec.model.register_value import TypedValue, WriteRequest
from regcodec.schema.register_schema import RegisterDefinition

logger = logging.getLogger(__name__)


def decode_register_value(
    raw: bytes,
    value_type: ValueType | str,
    quantity: int,
    ordering: OrderingMode | str | int = OrderingMode.BIG_ENDIAN,
    factor: int | float | None = 0,
) -> TypedValue:
    """Turn a response payload (framing already stripped) into an application value."""
    value_type = resolve_value_type(value_type)
    ordering = resolve_ordering_mode(ordering)

    canonical = reorder(raw, ordering)
    logger.debug(f"[Pipeline] reorder {ordering}: {bytes(raw).hex()} -> {canonical.hex()}")

    value = decode_value(canonical, value_type, quantity)
    logger.debug(f"[Pipeline] decode {value_type} x{quantity}: {value!r}")

    scaled = scaled_value_type(value_type, factor)(apply_factor(value, factor))
    logger.debug(f"[Pipeline] factor (*) {factor}: {scaled!r}")
    return scaled


def encode_register_value(
    value: TypedValue,
    value_type: ValueType | str,
    quantity: int,
    ordering: OrderingMode | str | int = OrderingMode.BIG_ENDIAN,
    factor: int | float | None = 0,
) -> bytes:
    """Turn an application value into a wire-order payload of exactly quantity * 2 bytes."""
    value_type = resolve_value_type(value_type)
    ordering = resolve_ordering_mode(ordering)

    raw_value = apply_factor(value, factor, divide=True)
    logger.debug(f"[Pipeline] factor (/) {factor}: {value!r} -> {raw_value!r}")

    canonical = encode_value(raw_value, value_type, quantity)
    logger.debug(f"[Pipeline] encode {value_type} x{quantity}: {canonical.hex()}")

    wire = reorder(canonical, ordering, inverse=True)
    logger.debug(f"[Pipeline] reorder {ordering}: {wire.hex()}")
    return wire


class RegisterValuePipeline:
    """Applies the decode/encode flows using the layout held in a RegisterDefinition."""

    @staticmethod
    def decode(raw: bytes, definition: RegisterDefinition) -> TypedValue:
        return decode_register_value(
            raw,
            definition.value_type,
            definition.quantity,
            ordering=definition.ordering,
            factor=definition.factor,
        )

    @staticmethod
    def encode(value: TypedValue, definition: RegisterDefinition) -> bytes:
        return encode_register_value(
            value,
            definition.value_type,
            definition.quantity,
            ordering=definition.ordering,
            factor=definition.factor,
        )

    @staticmethod
    def build_write_request(value: TypedValue, definition: RegisterDefinition) -> WriteRequest:
        """Encode `value` and attach the addressing the transport needs to frame it."""
        return WriteRequest(
            function=definition.effective_write_function,
            address=definition.address,
            quantity=definition.quantity,
            data=RegisterValuePipeline.encode(value, definition),
        )
