"""Unit tests for devprint.specifier.

Run with: pytest test/test_specifier.py -v
"""

import pytest

from devprint.errors import PrintContractError, UnsupportedTypeError
from devprint.specifier import hex_digits, resolve
from devprint.types import (
    BF16,
    F16,
    F32,
    F64,
    I1,
    I8,
    I16,
    I32,
    I64,
    PTR,
    SI8,
    SI16,
    SI32,
    SI64,
    U8,
    U16,
    U32,
    U64,
    PrintType,
    TypeKind,
)

DECIMAL_CASES = [
    (F16, "%f"),
    (BF16, "%f"),
    (F32, "%f"),
    (F64, "%f"),
    (SI8, "%i"),
    (SI16, "%i"),
    (SI32, "%i"),
    (SI64, "%lli"),
    (U8, "%u"),
    (U16, "%u"),
    (U32, "%u"),
    (U64, "%llu"),
    (I1, "%u"),
    (I8, "%u"),
    (I16, "%u"),
    (I32, "%u"),
    (I64, "%llu"),
]

HEX_CASES = [
    (F16, "0x%04x"),
    (F32, "0x%08x"),
    (F64, "0x%016llx"),
    (SI8, "0x%02x"),
    (SI16, "0x%04x"),
    (SI32, "0x%08x"),
    (SI64, "0x%016llx"),
    (U32, "0x%08x"),
    (U64, "0x%016llx"),
    (I32, "0x%08x"),
    (I64, "0x%016llx"),
]

WIDTH_CASES = [
    (I32, 0, "%0u"),
    (I32, 1, "%1u"),
    (I32, 3, "%3u"),
    (SI64, 2, "%2lli"),
    (U64, 4, "%4llu"),
    (F32, 5, "%5f"),
]


class TestDecimal:
    """Tests for decimal specifiers."""

    @pytest.mark.parametrize("dtype,expected", DECIMAL_CASES, ids=[repr(c[0]) for c in DECIMAL_CASES])
    def test_specifier(self, dtype: PrintType, expected: str) -> None:
        """Each printable type maps to its printf conversion."""
        assert resolve(dtype) == expected

    @pytest.mark.parametrize("dtype,width,expected", WIDTH_CASES)
    def test_width_prefix(self, dtype: PrintType, width: int, expected: str) -> None:
        """A supplied width is written between ``%`` and the conversion."""
        assert resolve(dtype, hex=False, width=width) == expected

    def test_signed_non_64_never_uses_ll(self) -> None:
        """Narrow signed types end in ``i`` without a length modifier."""
        for dtype in (SI8, SI16, SI32):
            assert "ll" not in resolve(dtype)


class TestHex:
    """Tests for hex specifiers."""

    @pytest.mark.parametrize("dtype,expected", HEX_CASES, ids=[repr(c[0]) for c in HEX_CASES])
    def test_specifier(self, dtype: PrintType, expected: str) -> None:
        """Hex pads to bitwidth / 4 digits and adds ``ll`` above 32 bits."""
        assert resolve(dtype, hex=True) == expected

    @pytest.mark.parametrize("width", [None, 0, 3, 12])
    def test_width_ignored(self, width: int | None) -> None:
        """Hex fields never take the caller's width."""
        assert resolve(I32, hex=True, width=width) == "0x%08x"
        assert resolve(SI64, hex=True, width=width) == "0x%016llx"

    def test_hex_digits(self) -> None:
        """hex_digits covers the full bit width."""
        assert hex_digits(F16) == 4
        assert hex_digits(I32) == 8
        assert hex_digits(I64) == 16


class TestPointer:
    """Tests for pointer specifiers."""

    @pytest.mark.parametrize("hex", [False, True])
    @pytest.mark.parametrize("width", [None, 0, 7])
    def test_always_p(self, hex: bool, width: int | None) -> None:
        """Pointers print as ``%p`` whatever the mode and width."""
        assert resolve(PTR, hex=hex, width=width) == "%p"


class TestUnsupported:
    """Tests for types outside the printable domain."""

    def test_non_print_type(self) -> None:
        """Arbitrary objects are rejected."""
        with pytest.raises(UnsupportedTypeError, match="not a printable type"):
            resolve("i32")

    def test_odd_float_width(self) -> None:
        """Floats must be 16, 32 or 64 bits wide."""
        with pytest.raises(UnsupportedTypeError, match="float width 8"):
            resolve(PrintType(TypeKind.FLOAT, 8, "f8"))

    def test_oversized_integer(self) -> None:
        """Integers wider than 64 bits cannot be passed to printf."""
        with pytest.raises(UnsupportedTypeError, match="bit width 128"):
            resolve(PrintType(TypeKind.SIGNED, 128, "si128"), hex=True)

    def test_is_contract_violation(self) -> None:
        """Unsupported types surface as assertion-style contract errors."""
        with pytest.raises(PrintContractError):
            resolve(None)
        with pytest.raises(AssertionError):
            resolve(None)

    def test_deterministic(self) -> None:
        """Repeated resolution returns identical text."""
        assert {resolve(SI32, width=2) for _ in range(5)} == {"%2i"}
