from enum import IntEnum


class FunctionCode(IntEnum):
    READ_COILS = 1
    READ_DISCRETE_INPUTS = 2
    READ_HOLDING_REGISTERS = 3
    READ_INPUT_REGISTERS = 4
    WRITE_SINGLE_COIL = 5
    WRITE_SINGLE_REGISTER = 6
    WRITE_MULTIPLE_COILS = 15
    WRITE_MULTIPLE_REGISTERS = 16

    @property
    def is_read(self) -> bool:
        return self in _READ_FUNCTIONS

    @property
    def is_write(self) -> bool:
        return self in _WRITE_FUNCTIONS

    @property
    def is_bit_access(self) -> bool:
        """Coil and discrete-input functions address single bits, not 16-bit registers."""
        return self in (
            FunctionCode.READ_COILS,
            FunctionCode.READ_DISCRETE_INPUTS,
            FunctionCode.WRITE_SINGLE_COIL,
            FunctionCode.WRITE_MULTIPLE_COILS,
        )


_READ_FUNCTIONS = frozenset(
    {
        FunctionCode.READ_COILS,
        FunctionCode.READ_DISCRETE_INPUTS,
        FunctionCode.READ_HOLDING_REGISTERS,
        FunctionCode.READ_INPUT_REGISTERS,
    }
)
_WRITE_FUNCTIONS = frozenset(
    {
        FunctionCode.WRITE_SINGLE_COIL,
        FunctionCode.WRITE_SINGLE_REGISTER,
        FunctionCode.WRITE_MULTIPLE_COILS,
        FunctionCode.WRITE_MULTIPLE_REGISTERS,
    }
)


class ModbusExceptionCode(IntEnum):
    """Exception codes a server returns in place of a normal response."""

    ILLEGAL_FUNCTION = 1
    ILLEGAL_DATA_ADDRESS = 2
    ILLEGAL_DATA_VALUE = 3
    SERVER_DEVICE_FAILURE = 4
    ACKNOWLEDGE = 5
    SERVER_DEVICE_BUSY = 6
    MEMORY_PARITY_ERROR = 8
    GATEWAY_PATH_UNAVAILABLE = 10
    GATEWAY_TARGET_DEVICE_FAILED_TO_RESPOND = 11

    @classmethod
    def describe(cls, code: int) -> str:
        """Render an exception code as '<n> - <NAME>'."""
        try:
            name = cls(code).name.replace("_", " ")
        except ValueError:
            name = "UNKNOWN ERROR"
        return f"{code} - {name}"
