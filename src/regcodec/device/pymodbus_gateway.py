import asyncio
import contextlib
import logging

from pymodbus.client.mixin import ModbusClientMixin
from pymodbus.exceptions import ModbusException
from pymodbus.pdu.pdu import ModbusPDU

from regcodec.exception import DeviceExceptionResponseError, InvalidFunctionCodeError, RegisterDeviceError
from regcodec.model.enum.function_code_enum import FunctionCode, ModbusExceptionCode
from regcodec.model.register_value import WriteRequest, registers_to_bytes

logger = logging.getLogger(__name__)


class PymodbusGateway:
    """RegisterGateway backed by a pymodbus async client (serial or TCP)."""

    def __init__(self, client: ModbusClientMixin, slave_id: int, lock: asyncio.Lock | None = None):
        """
        Args:
            client: pymodbus AsyncModbusSerialClient / AsyncModbusTcpClient
            slave_id: Modbus slave address
            lock: optional per-port lock, to serialize all I/O on a shared serial line
        """
        self.client = client
        self.slave_id = int(slave_id)
        self.lock = lock

    async def read(self, function: FunctionCode, address: int, quantity: int) -> bytes:
        function = FunctionCode(function)
        async with self._lock_context():
            await self._ensure_connected()
            try:
                match function:
                    case FunctionCode.READ_HOLDING_REGISTERS:
                        resp = await self.client.read_holding_registers(
                            address=address, count=quantity, slave=self.slave_id
                        )
                    case FunctionCode.READ_INPUT_REGISTERS:
                        resp = await self.client.read_input_registers(
                            address=address, count=quantity, slave=self.slave_id
                        )
                    case FunctionCode.READ_COILS:
                        resp = await self.client.read_coils(
                            address=address, count=quantity, slave=self.slave_id
                        )
                    case FunctionCode.READ_DISCRETE_INPUTS:
                        resp = await self.client.read_discrete_inputs(
                            address=address, count=quantity, slave=self.slave_id
                        )
                    case _:
                        raise InvalidFunctionCodeError(f"Wrong function ({int(function)}) for read", function=function)
            except ModbusException as e:
                raise RegisterDeviceError(f"Modbus read failed: {e}", address=address) from e

            self._raise_for_error(resp, address)

        if function.is_bit_access:
            return registers_to_bytes([1 if bit else 0 for bit in resp.bits[:quantity]])
        return registers_to_bytes(resp.registers)

    async def write(self, request: WriteRequest) -> None:
        async with self._lock_context():
            await self._ensure_connected()
            try:
                match request.function:
                    case FunctionCode.WRITE_SINGLE_REGISTER:
                        resp = await self.client.write_register(
                            address=request.address, value=request.registers[0], slave=self.slave_id
                        )
                    case FunctionCode.WRITE_MULTIPLE_REGISTERS:
                        resp = await self.client.write_registers(
                            address=request.address, values=request.registers, slave=self.slave_id
                        )
                    case FunctionCode.WRITE_SINGLE_COIL:
                        resp = await self.client.write_coil(
                            address=request.address, value=any(request.data), slave=self.slave_id
                        )
                    case FunctionCode.WRITE_MULTIPLE_COILS:
                        resp = await self.client.write_coils(
                            address=request.address, values=[reg != 0 for reg in request.registers], slave=self.slave_id
                        )
                    case _:
                        raise InvalidFunctionCodeError(
                            f"Wrong function ({int(request.function)}) for write", function=request.function
                        )
            except ModbusException as e:
                raise RegisterDeviceError(f"Modbus write failed: {e}", address=request.address) from e

            self._raise_for_error(resp, request.address)
            logger.debug(f"[Gateway] write ok: fc={int(request.function)} address={request.address} data={request.data.hex()}")

    async def _ensure_connected(self) -> None:
        if self.client.connected:
            return
        if not await self.client.connect():
            logger.error(f"[Gateway] connect failed (slave={self.slave_id})")
            raise RegisterDeviceError(f"No connection to Modbus device (slave={self.slave_id})")

    def _raise_for_error(self, resp: ModbusPDU, address: int) -> None:
        if not resp.isError():
            return
        code = int(getattr(resp, "exception_code", 0) or 0)
        raise DeviceExceptionResponseError(ModbusExceptionCode.describe(code), exception_code=code, address=address)

    def _lock_context(self):
        return self.lock if self.lock is not None else contextlib.nullcontext()
