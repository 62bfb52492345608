from typing import Protocol

from regcodec.model.enum.function_code_enum import FunctionCode
from regcodec.model.register_value import WriteRequest


class RegisterGateway(Protocol):
    """
    Transport seam. Implementations exchange frames with the device.

    read() returns the response payload with function code and byte count
    already stripped, in wire order. Coil/discrete-input reads return one
    16-bit register (0x0000 / 0x0001) per bit. Exception responses are
    raised as DeviceExceptionResponseError.
    """

    async def read(self, function: FunctionCode, address: int, quantity: int) -> bytes: ...

    async def write(self, request: WriteRequest) -> None: ...
