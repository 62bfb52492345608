"""Register codec exception definitions"""


class RegisterCodecError(Exception):
    """Base exception for the register codec"""

    pass


class RegisterConfigError(RegisterCodecError):
    """Configuration-class error: the register definition itself is wrong"""

    def __init__(self, message: str, value_type=None, quantity: int | None = None):
        super().__init__(message)
        self.value_type = value_type
        self.quantity = quantity


class UnknownValueTypeError(RegisterConfigError):
    """Value type tag is not supported"""

    pass


class InvalidQuantityForTypeError(RegisterConfigError):
    """Register quantity gives a byte width the value type cannot have"""

    pass


class UnsupportedOrderingModeError(RegisterConfigError):
    """Ordering mode is not one of the known variants"""

    def __init__(self, message: str, mode=None):
        super().__init__(message)
        self.mode = mode


class InvalidFunctionCodeError(RegisterConfigError):
    """Function code does not fit the requested direction (read/write)"""

    def __init__(self, message: str, function=None):
        super().__init__(message)
        self.function = function


class RegisterDataError(RegisterCodecError):
    """Data-class error: the value or buffer is wrong, the definition is fine"""

    pass


class LengthMismatchError(RegisterDataError):
    """Buffer length disagrees with quantity x 2"""

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ValueOutOfRangeError(RegisterDataError):
    """Value is outside what the value type and width can represent"""

    def __init__(self, message: str, value=None, minimum=None, maximum=None, value_type=None, quantity=None):
        super().__init__(message)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.value_type = value_type
        self.quantity = quantity


class RegisterDeviceError(RegisterCodecError):
    """Base class for device/transport-side errors"""

    def __init__(self, message: str, address: int | None = None):
        super().__init__(message)
        self.address = address


class WriteDisabledError(RegisterDeviceError):
    """Writing was not enabled for the device, or the register is read-only"""

    pass


class DeviceExceptionResponseError(RegisterDeviceError):
    """Device answered with a Modbus exception response"""

    def __init__(self, message: str, exception_code: int, address: int | None = None):
        super().__init__(message, address=address)
        self.exception_code = exception_code
