"""Planned formatted calls and the keys that select cached format strings."""

from typing import Any, NamedTuple

from devprint.request import DisplayMode
from devprint.types import PrintType

__all__ = ["FormatKey", "Emission"]


class FormatKey(NamedTuple):
    """Every decision that shapes an element's format text.

    Two elements with equal keys produce byte-identical format strings, so
    the key selects the cached handle.

    Attributes:
        operand: Operand index.
        rank: Operand rank.
        cutoff: Index position where the truncation marker is written, or
            ``None`` when every coordinate component fits.
        widths: Per-dimension decimal field widths.
        dtype: Element value type.
        display_mode: Value rendering mode.
    """

    operand: int
    rank: int
    cutoff: int | None
    widths: tuple[int, ...]
    dtype: PrintType
    display_mode: DisplayMode


class Emission(NamedTuple):
    """One planned formatted call.

    Attributes:
        fmt: Format text.
        args: Variadic arguments in specifier order.
        key: Cache key, or ``None`` for the operand-less call.
    """

    fmt: str
    args: tuple[Any, ...]
    key: FormatKey | None

