"""Tests for byte/word reordering."""

import pytest

from regcodec.codec.byte_reorderer import byte_swap, reorder, resolve_ordering_mode, reverse, word_swap
from regcodec.exception import UnsupportedOrderingModeError
from regcodec.model.enum.ordering_mode_enum import OrderingMode

ABCDEFGH = bytes.fromhex("4142434445464748")


class TestPrimitives:
    def test_when_byte_swap_then_adjacent_bytes_exchanged(self):
        assert byte_swap(b"ABCD") == b"BADC"

    def test_when_byte_swap_odd_length_then_last_byte_untouched(self):
        assert byte_swap(b"ABC") == b"BAC"

    def test_when_word_swap_then_adjacent_words_exchanged(self):
        assert word_swap(b"ABCDEFGH") == b"CDABGHEF"

    def test_when_word_swap_odd_word_count_then_last_word_untouched(self):
        assert word_swap(b"ABCDEF") == b"CDABEF"

    def test_when_reverse_then_full_byte_order_reversed(self):
        assert reverse(b"ABCD") == b"DCBA"


class TestReorder:
    @pytest.mark.parametrize(
        "mode, expected",
        [
            (OrderingMode.BIG_ENDIAN, b"ABCDEFGH"),
            (OrderingMode.BIG_ENDIAN_BYTE_SWAP, b"BADCFEHG"),
            (OrderingMode.BIG_ENDIAN_WORD_SWAP, b"CDABGHEF"),
            (OrderingMode.LITTLE_ENDIAN, b"HGFEDCBA"),
            (OrderingMode.LITTLE_ENDIAN_BYTE_SWAP, b"GHEFCDAB"),
            (OrderingMode.LITTLE_ENDIAN_WORD_SWAP, b"FEHGBADC"),
        ],
    )
    def test_when_eight_byte_buffer_then_matches_documented_layout(self, mode, expected):
        assert reorder(ABCDEFGH, mode) == expected

    @pytest.mark.parametrize(
        "mode, expected",
        [
            (OrderingMode.BIG_ENDIAN, b"ABCD"),
            (OrderingMode.BIG_ENDIAN_BYTE_SWAP, b"BADC"),
            (OrderingMode.BIG_ENDIAN_WORD_SWAP, b"CDAB"),
            (OrderingMode.LITTLE_ENDIAN, b"DCBA"),
            (OrderingMode.LITTLE_ENDIAN_BYTE_SWAP, b"CDAB"),
            (OrderingMode.LITTLE_ENDIAN_WORD_SWAP, b"BADC"),
        ],
    )
    def test_when_four_byte_buffer_then_matches_documented_layout(self, mode, expected):
        assert reorder(b"ABCD", mode) == expected

    def test_when_single_register_byte_swapped_then_bytes_exchanged(self):
        assert reorder(bytes([0xAB, 0xCD]), OrderingMode.BIG_ENDIAN_BYTE_SWAP) == bytes([0xCD, 0xAB])

    @pytest.mark.parametrize("mode", list(OrderingMode))
    def test_when_buffer_shorter_than_two_bytes_then_unchanged(self, mode):
        assert reorder(b"", mode) == b""
        assert reorder(b"\x01", mode) == b"\x01"

    @pytest.mark.parametrize("mode", list(OrderingMode))
    @pytest.mark.parametrize("width", [2, 4, 8, 16])
    def test_when_applied_twice_on_register_aligned_width_then_original_restored(self, mode, width):
        buffer = bytes(range(1, width + 1))
        assert reorder(reorder(buffer, mode), mode) == buffer

    @pytest.mark.parametrize("mode", list(OrderingMode))
    @pytest.mark.parametrize("width", [2, 4, 6, 8, 10, 12])
    def test_when_inverse_applied_after_forward_then_original_restored(self, mode, width):
        buffer = bytes(range(0x10, 0x10 + width))
        assert reorder(reorder(buffer, mode), mode, inverse=True) == buffer

    def test_when_little_endian_word_swap_on_three_registers_then_inverse_differs_from_forward(self):
        buffer = b"ABCDEF"
        forward = reorder(buffer, OrderingMode.LITTLE_ENDIAN_WORD_SWAP)
        assert forward == b"DCFEBA"
        assert reorder(forward, OrderingMode.LITTLE_ENDIAN_WORD_SWAP, inverse=True) == buffer

    def test_when_mode_unknown_then_raises(self):
        with pytest.raises(UnsupportedOrderingModeError):
            reorder(b"ABCD", "middle_endian")


class TestResolveOrderingMode:
    def test_when_numeric_code_then_maps_to_mode(self):
        assert resolve_ordering_mode(0) is OrderingMode.BIG_ENDIAN
        assert resolve_ordering_mode(5) is OrderingMode.LITTLE_ENDIAN_WORD_SWAP

    def test_when_alias_then_maps_to_mode(self):
        assert resolve_ordering_mode("CDAB") is OrderingMode.BIG_ENDIAN_WORD_SWAP
        assert resolve_ordering_mode("little-endian") is OrderingMode.LITTLE_ENDIAN

    def test_when_code_out_of_range_then_raises(self):
        with pytest.raises(UnsupportedOrderingModeError):
            resolve_ordering_mode(6)
