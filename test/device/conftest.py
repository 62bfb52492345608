from unittest.mock import AsyncMock, Mock

import pytest

from regcodec.schema.register_schema import RegisterMapConfig


@pytest.fixture
def register_map() -> RegisterMapConfig:
    return RegisterMapConfig(
        model="TEST_VFD",
        registers={
            "frequency": {"address": 0, "quantity": 1, "value_type": "uint", "factor": 0.1, "writable": True},
            "power": {"address": 2, "quantity": 2, "value_type": "float", "ordering": "big_endian_word_swap"},
            "name": {"address": 10, "quantity": 3, "value_type": "string"},
            "running": {"address": 0, "value_type": "bool", "function": "read_coils", "writable": True},
            "mode": {"address": 20, "value_type": "int", "writable": True, "write_function": 6},
        },
    )


@pytest.fixture
def mock_gateway():
    gateway = Mock()
    gateway.read = AsyncMock()
    gateway.write = AsyncMock()
    return gateway
