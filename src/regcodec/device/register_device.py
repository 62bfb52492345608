import logging

from regcodec.codec.register_pipeline import RegisterValuePipeline
from regcodec.device.register_gateway import RegisterGateway
from regcodec.exception import (
    DeviceExceptionResponseError,
    InvalidFunctionCodeError,
    RegisterCodecError,
    RegisterConfigError,
    WriteDisabledError,
)
from regcodec.model.enum.function_code_enum import FunctionCode
from regcodec.model.register_value import MAX_WRITE_QUANTITY, TypedValue
from regcodec.schema.register_schema import RegisterDefinition, RegisterMapConfig

logger = logging.getLogger(__name__)


class RegisterDevice:
    """Reads and writes named values of one device through a RegisterGateway."""

    def __init__(self, gateway: RegisterGateway, register_map: RegisterMapConfig, write_enabled: bool = False):
        """
        Args:
            gateway: transport used for the actual request/response exchange
            register_map: named register definitions for this device
            write_enabled: writes are refused unless explicitly enabled
        """
        self.gateway = gateway
        self.register_map = register_map
        self.write_enabled = write_enabled

    def get_definition(self, name: str) -> RegisterDefinition:
        definition = self.register_map.registers.get(name)
        if definition is None:
            raise KeyError(f"Unknown register '{name}'")
        return definition

    async def read_value(self, name: str) -> TypedValue:
        definition = self.get_definition(name)
        self._check_function(definition.function, read=True)

        try:
            raw: bytes = await self.gateway.read(definition.function, definition.address, definition.quantity)
        except DeviceExceptionResponseError as e:
            logger.warning(
                f"[Device] Error while reading '{name}': {e} "
                f"(function: {definition.function.name}, address: {definition.address}, quantity: {definition.quantity})"
            )
            raise

        logger.debug(f"[Device] read '{name}' fc={int(definition.function)} addr={definition.address} raw={raw.hex()}")
        try:
            return RegisterValuePipeline.decode(raw, definition)
        except RegisterConfigError:
            logger.error(f"[Device] Register '{name}' is misconfigured")
            raise

    async def read_all(self) -> dict[str, TypedValue | None]:
        """Read every register; a failing one is logged and reported as None."""
        values: dict[str, TypedValue | None] = {}
        for name in self.register_map.registers:
            try:
                values[name] = await self.read_value(name)
            except RegisterConfigError:
                raise
            except RegisterCodecError as e:
                logger.warning(f"[Device] skip '{name}': {e}")
                values[name] = None
        return values

    async def write_value(self, name: str, value: TypedValue) -> None:
        definition = self.get_definition(name)
        if not self.write_enabled:
            raise WriteDisabledError("Writing is disabled for this device", address=definition.address)
        if not definition.writable:
            raise WriteDisabledError(f"Register '{name}' is not writable", address=definition.address)

        function = definition.effective_write_function
        self._check_function(function, read=False)
        if definition.quantity > MAX_WRITE_QUANTITY:
            raise InvalidFunctionCodeError(
                f"Quantity {definition.quantity} exceeds the write limit of {MAX_WRITE_QUANTITY} registers",
                function=function,
            )
        if function in (FunctionCode.WRITE_SINGLE_COIL, FunctionCode.WRITE_SINGLE_REGISTER) and definition.quantity != 1:
            raise InvalidFunctionCodeError(
                f"{function.name} writes exactly one register, '{name}' spans {definition.quantity}",
                function=function,
            )

        request = RegisterValuePipeline.build_write_request(value, definition)
        logger.debug(f"[Device] write '{name}' fc={int(request.function)} addr={request.address} raw={request.data.hex()}")

        try:
            await self.gateway.write(request)
        except DeviceExceptionResponseError as e:
            logger.warning(
                f"[Device] Error while writing '{name}': {e} "
                f"(function: {function.name}, address: {definition.address}, "
                f"quantity: {definition.quantity}, data: {request.data.hex()})"
            )
            raise

    @staticmethod
    def _check_function(function: FunctionCode, read: bool) -> None:
        if read and not function.is_read:
            logger.error(f"[Device] Wrong function ({int(function)}) for read")
            raise InvalidFunctionCodeError(f"Wrong function ({int(function)}) for read", function=function)
        if not read and not function.is_write:
            logger.error(f"[Device] Wrong function ({int(function)}) for write")
            raise InvalidFunctionCodeError(f"Wrong function ({int(function)}) for write", function=function)
