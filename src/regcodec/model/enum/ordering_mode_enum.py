from enum import StrEnum


class OrderingMode(StrEnum):
    """
    Byte/word arrangement a device uses on the wire, relative to canonical big-endian.

    Shown for an 8-byte value ABCDEFGH:
        big_endian               ABCDEFGH
        big_endian_byte_swap     BADCFEHG
        big_endian_word_swap     CDABGHEF
        little_endian            HGFEDCBA
        little_endian_byte_swap  GHEFCDAB
        little_endian_word_swap  FEHGBADC
    """

    BIG_ENDIAN = "big_endian"
    BIG_ENDIAN_BYTE_SWAP = "big_endian_byte_swap"
    BIG_ENDIAN_WORD_SWAP = "big_endian_word_swap"
    LITTLE_ENDIAN = "little_endian"
    LITTLE_ENDIAN_BYTE_SWAP = "little_endian_byte_swap"
    LITTLE_ENDIAN_WORD_SWAP = "little_endian_word_swap"

    @property
    def code(self) -> int:
        return _MODE_CODES.index(self)

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]

    @classmethod
    def from_code(cls, code: int) -> "OrderingMode | None":
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        if 0 <= code < len(_MODE_CODES):
            return _MODE_CODES[code]
        return None

    @classmethod
    def from_string(cls, s: str) -> "OrderingMode | None":
        if isinstance(s, cls):
            return s
        if not isinstance(s, str):
            return None
        key: str = s.lower().replace("-", "_").replace(" ", "_").strip()
        alias_dict = {
            "be": "big_endian",
            "big": "big_endian",
            "abcd": "big_endian",
            "be_bs": "big_endian_byte_swap",
            "be_byteswap": "big_endian_byte_swap",
            "badc": "big_endian_byte_swap",
            "be_ws": "big_endian_word_swap",
            "be_wordswap": "big_endian_word_swap",
            "cdab": "big_endian_word_swap",
            "le": "little_endian",
            "little": "little_endian",
            "dcba": "little_endian",
            "le_bs": "little_endian_byte_swap",
            "le_byteswap": "little_endian_byte_swap",
            "le_ws": "little_endian_word_swap",
            "le_wordswap": "little_endian_word_swap",
        }
        key = alias_dict.get(key, key)
        if key.isdigit():
            return cls.from_code(int(key))
        try:
            return cls(key)
        except ValueError:
            return None


_MODE_CODES: tuple[OrderingMode, ...] = (
    OrderingMode.BIG_ENDIAN,
    OrderingMode.BIG_ENDIAN_BYTE_SWAP,
    OrderingMode.BIG_ENDIAN_WORD_SWAP,
    OrderingMode.LITTLE_ENDIAN,
    OrderingMode.LITTLE_ENDIAN_BYTE_SWAP,
    OrderingMode.LITTLE_ENDIAN_WORD_SWAP,
)

_MODE_LABELS: dict[OrderingMode, str] = {
    OrderingMode.BIG_ENDIAN: "BigEndian (ABCDEFGH)",
    OrderingMode.BIG_ENDIAN_BYTE_SWAP: "BigEndian BS (BADCFEHG)",
    OrderingMode.BIG_ENDIAN_WORD_SWAP: "BigEndian WS (CDABGHEF)",
    OrderingMode.LITTLE_ENDIAN: "LittleEndian (HGFEDCBA)",
    OrderingMode.LITTLE_ENDIAN_BYTE_SWAP: "LittleEndian BS (GHEFCDAB)",
    OrderingMode.LITTLE_ENDIAN_WORD_SWAP: "LittleEndian WS (FEHGBADC)",
}
