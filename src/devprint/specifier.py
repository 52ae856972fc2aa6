"""Conversion-specifier resolution for printf-style device prints.

Maps a printable type, a display mode and an optional field width to the
exact specifier text (``%u``, ``%3lli``, ``0x%08x``, ...). Resolution is a
pure function of its inputs, which is what lets the formatter reuse one
format string for every element of an operand.
"""

from devprint.errors import UnsupportedTypeError
from devprint.types import FLOAT_WIDTHS, PrintType, TypeKind

__all__ = ["resolve", "hex_digits"]


def hex_digits(dtype: PrintType) -> int:
    """Number of hex digits needed to show every bit of ``dtype``.

    Args:
        dtype: Printable type.

    Returns:
        ``bitwidth // 4`` (4 for 16-bit types, 8 for 32-bit, 16 for 64-bit).
    """
    return dtype.bitwidth // 4


def resolve(dtype: PrintType, hex: bool = False, width: int | None = None) -> str:
    """Resolve the conversion specifier for one printed value.

    Pointers always print as ``%p``. Hex values are zero-padded to the
    type's natural digit count and ignore ``width``. Decimal values may be
    right-aligned to ``width`` columns.

    Args:
        dtype: Type of the value being printed.
        hex: Print the raw bits in hexadecimal.
        width: Minimum field width for decimal output.

    Returns:
        Specifier text, e.g. ``"%u"``, ``"%2u"``, ``"%lli"``, ``"0x%016llx"``.

    Raises:
        UnsupportedTypeError: If ``dtype`` is not in the printable domain.
    """
    if not isinstance(dtype, PrintType):
        raise UnsupportedTypeError(f"not a printable type: {dtype!r}")
    kind = dtype.kind
    if kind is TypeKind.POINTER:
        return "%p"
    _check_width(dtype)

    if hex:
        length = "ll" if dtype.bitwidth > 32 else ""
        return f"0x%0{hex_digits(dtype)}{length}x"

    prefix = "%" if width is None else f"%{width}"
    if kind is TypeKind.FLOAT:
        spec = prefix + "f"
    elif kind is TypeKind.SIGNED:
        spec = prefix + ("lli" if dtype.bitwidth == 64 else "i")
    elif kind in (TypeKind.UNSIGNED, TypeKind.SIGNLESS):
        spec = prefix + ("llu" if dtype.bitwidth == 64 else "u")
    else:
        raise UnsupportedTypeError(f"not supported type: {dtype!r}")
    return spec


def _check_width(dtype: PrintType) -> None:
    """Reject bit widths the device printf cannot represent.

    Args:
        dtype: Non-pointer printable type.

    Raises:
        UnsupportedTypeError: For non-standard float widths or non-positive
            integer widths.
    """
    if dtype.kind is TypeKind.FLOAT and dtype.bitwidth not in FLOAT_WIDTHS:
        raise UnsupportedTypeError(f"unsupported float width {dtype.bitwidth} for {dtype!r}")
    if dtype.bitwidth <= 0 or dtype.bitwidth > 64:
        raise UnsupportedTypeError(f"unsupported bit width {dtype.bitwidth} for {dtype!r}")
