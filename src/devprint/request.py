"""Print request data model and construction helpers.

A print request is what a single ``device_print(prefix, *tensors)`` call
becomes once the ownership collaborator has resolved, for the issuing
thread, which tensor elements it holds and where they sit in the logical
shape.
"""

import string
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, NamedTuple

import numpy as np

from devprint.errors import CoordinateRankError, InvalidPrefixError
from devprint.types import PrintType

__all__ = [
    "DisplayMode",
    "ThreadIdentity",
    "Element",
    "Operand",
    "PrintRequest",
    "normalize_prefix",
    "make_request",
    "operand_from_array",
]


class DisplayMode(Enum):
    """How element values are rendered."""

    DECIMAL = "decimal"
    HEX = "hex"


class ThreadIdentity(NamedTuple):
    """3-D program id of the issuing thread."""

    x: int
    y: int
    z: int


class Element(NamedTuple):
    """One owned scalar and its coordinate in the operand's logical shape.

    Attributes:
        value: Scalar value.
        coordinate: Index per shape dimension, outermost first. Empty for
            scalar operands.
    """

    value: Any
    coordinate: tuple[int, ...] = ()


class Operand(NamedTuple):
    """One tensor argument of a print request, restricted to owned elements.

    Attributes:
        index: Position among the request's operands.
        shape: Logical tensor shape; empty for scalars.
        elements: Elements owned by the issuing thread, in emission order.
        dtype: Element type. ``None`` infers it from each value.
    """

    index: int
    shape: tuple[int, ...]
    elements: tuple[Element, ...]
    dtype: PrintType | None = None

    @property
    def rank(self) -> int:
        """Number of dimensions in the logical shape."""
        return len(self.shape)

    @property
    def is_scalar(self) -> bool:
        """Whether the operand is a 0-d tensor."""
        return not self.shape

    def element_type(self, element: Element) -> PrintType:
        """Printable type of one of this operand's elements.

        Args:
            element: An element of this operand.

        Returns:
            ``dtype`` when set, otherwise the type inferred from the value.
        """
        return self.dtype if self.dtype is not None else PrintType.of(element.value)


class PrintRequest(NamedTuple):
    """Immutable description of one print directive.

    Attributes:
        prefix: User text printed after the index, before the value.
        operands: Tensor operands in argument order.
        display_mode: Decimal or hex rendering of element values.
    """

    prefix: str
    operands: tuple[Operand, ...] = ()
    display_mode: DisplayMode = DisplayMode.DECIMAL

    @property
    def hex(self) -> bool:
        """Whether values print in hexadecimal."""
        return self.display_mode is DisplayMode.HEX


def normalize_prefix(prefix: str, has_operands: bool) -> str:
    """Munge a user prefix so device output reads well.

    With operands, the prefix is made to end in ``": "`` and, when longer
    than two characters, gets a leading space so it separates from the
    index text that precedes it. Without operands the prefix is returned
    as is: the operand-less format already puts a space before it.

    Args:
        prefix: User-supplied prefix.
        has_operands: Whether any tensors follow the prefix.

    Returns:
        Normalized prefix.

    Raises:
        InvalidPrefixError: If the prefix contains non-printable or
            non-ASCII characters.
    """
    if not isinstance(prefix, str):
        raise InvalidPrefixError(f"{prefix!r} is not a string")
    bad = [ch for ch in prefix if ch not in string.printable]
    if bad:
        raise InvalidPrefixError(f"{prefix!r} is not an ascii string (offending characters: {bad!r})")
    if has_operands:
        if not prefix.endswith(" "):
            prefix += " "
        if not prefix.endswith(": "):
            prefix = prefix[:-1] + ": "
        if len(prefix) > 2 and not prefix.startswith(" "):
            prefix = " " + prefix
    return prefix


def make_request(prefix: str, *operands: Operand, hex: bool = False) -> PrintRequest:
    """Build a PrintRequest the way the device-print frontend does.

    Operands are re-indexed by argument position and the prefix is
    normalized.

    Args:
        prefix: User-supplied prefix.
        *operands: Tensor operands in argument order.
        hex: Print values in hexadecimal.

    Returns:
        The normalized request.
    """
    indexed = tuple(op._replace(index=i) for i, op in enumerate(operands))
    mode = DisplayMode.HEX if hex else DisplayMode.DECIMAL
    return PrintRequest(normalize_prefix(prefix, bool(indexed)), indexed, mode)


def operand_from_array(
    array: np.ndarray, coordinates: Iterable[Sequence[int]] | None = None, index: int = 0
) -> Operand:
    """Build an Operand from a tensor and the coordinates a thread owns.

    Args:
        array: Logical tensor contents.
        coordinates: Owned coordinates in emission order, as produced by the
            ownership collaborator. ``None`` means the thread owns every
            element, visited in row-major order.
        index: Operand position within the request.

    Returns:
        Operand whose elements are gathered from ``array`` in coordinate order.

    Raises:
        CoordinateRankError: If a coordinate's length differs from the
            array's rank.
        UnsupportedTypeError: If the array dtype is not printable.
    """
    array = np.asarray(array)
    dtype = PrintType.from_dtype(array.dtype)
    shape = tuple(int(d) for d in array.shape)
    if coordinates is None:
        coordinates = np.ndindex(*shape)

    elements: list[Element] = []
    for coord in coordinates:
        coord = tuple(int(c) for c in coord)
        if len(coord) != len(shape):
            raise CoordinateRankError(f"coordinate {coord} has rank {len(coord)}, operand shape is {shape}")
        elements.append(Element(array[coord].item(), coord))
    return Operand(index, shape, tuple(elements), dtype)
