"""
Register map schema
Describes how a named device value is laid out in registers and how to convert it
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from regcodec.codec.range_validator import payload_width
from regcodec.exception import RegisterConfigError
from regcodec.model.enum.function_code_enum import FunctionCode
from regcodec.model.enum.ordering_mode_enum import OrderingMode
from regcodec.model.enum.value_type_enum import ValueType
from regcodec.model.register_value import MAX_READ_QUANTITY

logger = logging.getLogger(__name__)


class RegisterDefinition(BaseModel):
    """One named value: where it lives, how many registers it spans and how to interpret it."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, frozen=True)

    address: int = Field(..., ge=0, le=0xFFFF, description="Start register (or coil) address")
    quantity: int = Field(default=1, ge=1, le=MAX_READ_QUANTITY, description="Number of 16-bit registers")
    value_type: ValueType = Field(..., description="bool, uint, int, float or string")
    ordering: OrderingMode = Field(default=OrderingMode.BIG_ENDIAN, description="Device byte/word ordering")
    factor: int | float = Field(default=0, description="Scale factor; 0 disables scaling")
    function: FunctionCode = Field(default=FunctionCode.READ_HOLDING_REGISTERS, description="Read function code")
    write_function: FunctionCode | None = Field(default=None, description="Write function code")
    writable: bool = Field(default=False, description="Whether the value may be written")
    description: str | None = Field(default=None, description="Free-text description")

    @field_validator("value_type", mode="before")
    @classmethod
    def _parse_value_type(cls, v: Any) -> ValueType:
        parsed = ValueType.from_string(v)
        if parsed is None:
            raise ValueError(f"unknown value type {v!r}")
        return parsed

    @field_validator("ordering", mode="before")
    @classmethod
    def _parse_ordering(cls, v: Any) -> OrderingMode:
        if v is None:
            return OrderingMode.BIG_ENDIAN
        parsed = OrderingMode.from_code(v) if isinstance(v, int) else OrderingMode.from_string(v)
        if parsed is None:
            raise ValueError(f"unknown ordering mode {v!r}")
        return parsed

    @field_validator("function", "write_function", mode="before")
    @classmethod
    def _parse_function(cls, v: Any) -> Any:
        if isinstance(v, str):
            if v.strip().isdigit():
                return int(v)
            try:
                return FunctionCode[v.strip().upper()]
            except KeyError:
                raise ValueError(f"unknown function code {v!r}") from None
        return v

    @model_validator(mode="after")
    def _check_layout(self) -> RegisterDefinition:
        try:
            payload_width(self.value_type, self.quantity)
        except RegisterConfigError as e:
            raise ValueError(str(e)) from e

        if not self.function.is_read:
            raise ValueError(f"function {self.function.name} is not a read function")
        if self.write_function is not None and not self.write_function.is_write:
            raise ValueError(f"write_function {self.write_function.name} is not a write function")
        if self.writable and self.write_function is None and self.function in (
            FunctionCode.READ_INPUT_REGISTERS,
            FunctionCode.READ_DISCRETE_INPUTS,
        ):
            raise ValueError(f"{self.function.name} addresses a read-only table; set write_function explicitly")
        return self

    @property
    def effective_write_function(self) -> FunctionCode:
        """Configured write function, or the one matching the read function's table."""
        if self.write_function is not None:
            return self.write_function
        if self.function.is_bit_access:
            return FunctionCode.WRITE_SINGLE_COIL if self.quantity == 1 else FunctionCode.WRITE_MULTIPLE_COILS
        return FunctionCode.WRITE_MULTIPLE_REGISTERS

    @property
    def byte_width(self) -> int:
        return payload_width(self.value_type, self.quantity)


class RegisterMapConfig(BaseModel):
    """Complete register map for one device model"""

    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    model: str | None = Field(default=None, description="Device model")
    description: str | None = Field(default=None, description="Register map description")
    registers: dict[str, RegisterDefinition] = Field(default_factory=dict, description="Named register definitions")

    @model_validator(mode="after")
    def _warn_on_overlap(self) -> RegisterMapConfig:
        seen: dict[tuple[int, int], str] = {}
        for name, definition in self.registers.items():
            for address in range(definition.address, definition.address + definition.quantity):
                key = (int(definition.function), address)
                if key in seen:
                    logger.warning(
                        f"[register_map] '{name}' overlaps '{seen[key]}' at address {address} "
                        f"(function {definition.function.name})"
                    )
                    break
                seen[key] = name
        return self
