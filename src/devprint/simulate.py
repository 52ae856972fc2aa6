"""Host-side interpretation of planned printf calls.

Renders the format strings produced by the formatter with C printf
semantics, so a plan can be inspected and checked without a device.
Only the conversions the formatter emits are understood.
"""

import re
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np

from devprint.plan import Emission
from devprint.types import BF16, PrintType

__all__ = ["render", "render_emission", "render_plan"]

_SPEC_RE = re.compile(r"%(?P<zero>0*)(?P<width>[1-9]\d*)?(?P<length>ll)?(?P<conv>[uixfps%])")

_FLOAT_BITS = {16: np.float16, 32: np.float32, 64: np.float64}
_UINT_BITS = {16: np.uint16, 32: np.uint32, 64: np.uint64}


def _to_int(value: Any) -> int:
    """Coerce a printf integer argument, rejecting non-integral values."""
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if isinstance(value, (int, np.integer)):
        return int(value)
    raise TypeError(f"integer conversion applied to {type(value).__name__} value {value!r}")


def _bf16_bits(value: Any) -> int:
    """bfloat16 bit pattern of ``value``, rounded to nearest even."""
    if np.isnan(value):
        return 0x7FC0
    bits32 = int(np.array(value, dtype=np.float32).view(np.uint32))
    return ((bits32 + 0x7FFF + ((bits32 >> 16) & 1)) >> 16) & 0xFFFF


def _hex_bits(value: Any, bits: int, dtype: PrintType | None = None) -> int:
    """Raw bit pattern of ``value`` at ``bits`` width.

    Floats use the IEEE encoding of ``dtype`` when it is known; a 16-bit
    float of unknown type is encoded as fp16.
    """
    if isinstance(value, (float, np.floating)):
        if dtype == BF16:
            return _bf16_bits(value)
        if bits not in _FLOAT_BITS:
            raise ValueError(f"no {bits}-bit float encoding for {value!r}")
        return int(np.array(value, dtype=_FLOAT_BITS[bits]).view(_UINT_BITS[bits]))
    return _to_int(value) % (1 << bits)


def _convert(conv: str, length: str, digits: int, value: Any, dtype: PrintType | None) -> str:
    """Render one argument for a conversion character."""
    bits = 64 if length else 32
    if conv == "u":
        text = str(_to_int(value) % (1 << bits))
    elif conv == "i":
        raw = _to_int(value) % (1 << bits)
        text = str(raw - (1 << bits) if raw >> (bits - 1) else raw)
    elif conv == "x":
        # Zero-padded hex fields are always sized to the value's full width.
        text = format(_hex_bits(value, digits * 4 if digits else bits, dtype), "x")
    elif conv == "f":
        text = f"{float(value):f}"
    elif conv == "p":
        text = f"0x{_to_int(value):x}"
    else:
        text = str(value)
    return text


def render(fmt: str, args: Sequence[Any], types: Sequence[PrintType | None] | None = None) -> str:
    """Render one printf call.

    Args:
        fmt: Format text produced by the formatter.
        args: Arguments in specifier order.
        types: Printable type of each argument, ``None`` where unknown.
            Needed to tell bf16 from fp16 in hex output.

    Returns:
        The text the device printf would produce.

    Raises:
        ValueError: If the argument count does not match the specifiers.
        TypeError: If an integer conversion receives a non-integral value.
    """
    remaining = iter(args)
    arg_types = list(types) if types is not None else []
    consumed = 0

    def substitute(match: re.Match) -> str:
        nonlocal consumed
        conv = match.group("conv")
        if conv == "%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            raise ValueError(f"too few arguments for format {fmt!r}: got {len(args)}") from None
        dtype = arg_types[consumed] if consumed < len(arg_types) else None
        consumed += 1
        width = int(match.group("width") or 0)
        text = _convert(conv, match.group("length") or "", width if match.group("zero") else 0, value, dtype)
        fill = "0" if match.group("zero") else " "
        return text.rjust(width, fill)

    result = _SPEC_RE.sub(substitute, fmt)
    if consumed != len(args):
        raise ValueError(f"format {fmt!r} consumed {consumed} of {len(args)} arguments")
    return result


def render_emission(emission: Emission) -> str:
    """Render one planned call, typing its value argument from the cache key.

    Args:
        emission: Emission from ``plan_print``.

    Returns:
        The rendered line.
    """
    types: list[PrintType | None] = [None] * len(emission.args)
    if emission.key is not None and types:
        types[-1] = emission.key.dtype
    return render(emission.fmt, emission.args, types)


def render_plan(plan: Iterable[Emission]) -> list[str]:
    """Render every emission of a plan.

    Args:
        plan: Emissions from ``plan_print``.

    Returns:
        One rendered line per emission.
    """
    return [render_emission(emission) for emission in plan]
