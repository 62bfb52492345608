from enum import StrEnum


class ValueType(StrEnum):
    """Application value types a register block can be interpreted as."""

    BOOLEAN = "bool"
    UNSIGNED_INTEGER = "uint"
    SIGNED_INTEGER = "int"
    FLOAT = "float"
    TEXT = "string"

    @property
    def is_numeric(self) -> bool:
        return self is not ValueType.TEXT

    @property
    def is_integral(self) -> bool:
        return self in (ValueType.BOOLEAN, ValueType.UNSIGNED_INTEGER, ValueType.SIGNED_INTEGER)

    @classmethod
    def from_string(cls, s: str) -> "ValueType | None":
        if isinstance(s, cls):
            return s
        if not isinstance(s, str):
            return None
        key: str = s.lower().replace("-", "_").strip()
        alias_dict = {
            "boolean": "bool",
            "unsigned": "uint",
            "unsigned_integer": "uint",
            "u16": "uint",
            "u32": "uint",
            "u64": "uint",
            "uint8": "uint",
            "uint16": "uint",
            "uint32": "uint",
            "uint64": "uint",
            "signed": "int",
            "signed_integer": "int",
            "integer": "int",
            "i16": "int",
            "i32": "int",
            "i64": "int",
            "int8": "int",
            "int16": "int",
            "int32": "int",
            "int64": "int",
            "real": "float",
            "double": "float",
            "f32": "float",
            "f64": "float",
            "float32": "float",
            "float64": "float",
            "str": "string",
            "text": "string",
        }
        key = alias_dict.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None
