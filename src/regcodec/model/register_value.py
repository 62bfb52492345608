from dataclasses import dataclass

from regcodec.model.enum.function_code_enum import FunctionCode

REGISTER_BYTES = 2
MAX_READ_QUANTITY = 125
MAX_WRITE_QUANTITY = 123

TypedValue = bool | int | float | str


def bytes_to_registers(data: bytes) -> list[int]:
    """Split a payload into 16-bit register words, high byte first."""
    return [int.from_bytes(data[i : i + REGISTER_BYTES], "big") for i in range(0, len(data), REGISTER_BYTES)]


def registers_to_bytes(registers: list[int]) -> bytes:
    return b"".join((int(reg) & 0xFFFF).to_bytes(REGISTER_BYTES, "big") for reg in registers)


@dataclass(frozen=True)
class WriteRequest:
    """Encoded write handed to the transport; data is already in wire order."""

    function: FunctionCode
    address: int
    quantity: int
    data: bytes

    @property
    def registers(self) -> list[int]:
        return bytes_to_registers(self.data)
