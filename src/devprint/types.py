"""Printable value types: a closed tagged variant over device scalar types."""

from enum import Enum
from typing import NamedTuple

import numpy as np

from devprint.errors import UnsupportedTypeError

__all__ = [
    "TypeKind",
    "PrintType",
    "I1",
    "I8",
    "I16",
    "I32",
    "I64",
    "U8",
    "U16",
    "U32",
    "U64",
    "SI8",
    "SI16",
    "SI32",
    "SI64",
    "F16",
    "BF16",
    "F32",
    "F64",
    "PTR",
]

FLOAT_WIDTHS = (16, 32, 64)


class TypeKind(Enum):
    """Semantic category of a printable value.

    ``SIGNLESS`` integers carry no signedness of their own (the default for
    device integer registers) and print as unsigned.
    """

    SIGNED = "signed"
    UNSIGNED = "unsigned"
    SIGNLESS = "signless"
    FLOAT = "float"
    POINTER = "pointer"


class PrintType(NamedTuple):
    """A printable scalar type.

    Attributes:
        kind: Semantic category.
        bitwidth: Storage width in bits. Pointers use 64.
        name: Display name (e.g., ``"i32"``, ``"bf16"``).
    """

    kind: TypeKind
    bitwidth: int
    name: str

    def __repr__(self) -> str:
        """Return the display name."""
        return self.name

    @property
    def is_integer(self) -> bool:
        """Whether this is a signed, unsigned or signless integer type."""
        return self.kind in (TypeKind.SIGNED, TypeKind.UNSIGNED, TypeKind.SIGNLESS)

    @property
    def is_float(self) -> bool:
        """Whether this is a floating-point type."""
        return self.kind is TypeKind.FLOAT

    @property
    def is_pointer(self) -> bool:
        """Whether this is a pointer type."""
        return self.kind is TypeKind.POINTER

    @classmethod
    def from_dtype(cls, dtype: "np.dtype | type") -> "PrintType":
        """Map a numpy dtype to its printable type.

        Booleans map to the 1-bit signless integer, numpy integers keep
        their signedness, and floats map by itemsize. ``bfloat16`` (as
        registered by ``ml_dtypes``) is recognized by name.

        Args:
            dtype: A numpy dtype or scalar type.

        Returns:
            The corresponding PrintType.

        Raises:
            UnsupportedTypeError: If the dtype has no printable counterpart.
        """
        dt = np.dtype(dtype)
        bits = dt.itemsize * 8
        result = None
        if dt.name == "bfloat16":
            result = BF16
        elif dt.kind == "b":
            result = I1
        elif dt.kind == "i":
            result = _BY_KIND_WIDTH.get((TypeKind.SIGNED, bits))
        elif dt.kind == "u":
            result = _BY_KIND_WIDTH.get((TypeKind.UNSIGNED, bits))
        elif dt.kind == "f":
            result = _BY_KIND_WIDTH.get((TypeKind.FLOAT, bits))
        if result is None:
            raise UnsupportedTypeError(f"dtype {dt.name!r} is not printable")
        return result

    @classmethod
    def of(cls, value: object) -> "PrintType":
        """Infer the printable type of a Python or numpy scalar.

        Args:
            value: Scalar value.

        Returns:
            ``I1`` for bools, ``SI64`` for Python ints, ``F64`` for Python
            floats, and the dtype mapping for numpy scalars.

        Raises:
            UnsupportedTypeError: If the value is not a supported scalar.
        """
        if isinstance(value, np.generic):
            return cls.from_dtype(value.dtype)
        if isinstance(value, bool):
            return I1
        if isinstance(value, int):
            return SI64
        if isinstance(value, float):
            return F64
        raise UnsupportedTypeError(f"cannot print value of type {type(value).__name__}")


I1 = PrintType(TypeKind.SIGNLESS, 1, "i1")
I8 = PrintType(TypeKind.SIGNLESS, 8, "i8")
I16 = PrintType(TypeKind.SIGNLESS, 16, "i16")
I32 = PrintType(TypeKind.SIGNLESS, 32, "i32")
I64 = PrintType(TypeKind.SIGNLESS, 64, "i64")
SI8 = PrintType(TypeKind.SIGNED, 8, "si8")
SI16 = PrintType(TypeKind.SIGNED, 16, "si16")
SI32 = PrintType(TypeKind.SIGNED, 32, "si32")
SI64 = PrintType(TypeKind.SIGNED, 64, "si64")
U8 = PrintType(TypeKind.UNSIGNED, 8, "ui8")
U16 = PrintType(TypeKind.UNSIGNED, 16, "ui16")
U32 = PrintType(TypeKind.UNSIGNED, 32, "ui32")
U64 = PrintType(TypeKind.UNSIGNED, 64, "ui64")
F16 = PrintType(TypeKind.FLOAT, 16, "f16")
BF16 = PrintType(TypeKind.FLOAT, 16, "bf16")
F32 = PrintType(TypeKind.FLOAT, 32, "f32")
F64 = PrintType(TypeKind.FLOAT, 64, "f64")
PTR = PrintType(TypeKind.POINTER, 64, "ptr")

_BY_KIND_WIDTH: dict[tuple[TypeKind, int], PrintType] = {
    (t.kind, t.bitwidth): t for t in (SI8, SI16, SI32, SI64, U8, U16, U32, U64, F16, F32, F64)
}
