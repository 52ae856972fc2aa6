"""Shared test utilities and fixtures for pytest."""

from collections.abc import Sequence

import numpy as np
import pytest

from devprint.emit import RecordingEmitter
from devprint.request import Element, Operand, ThreadIdentity
from devprint.types import PrintType


@pytest.fixture
def pid() -> ThreadIdentity:
    """Thread identity used by most formatter tests."""
    return ThreadIdentity(1, 2, 3)


@pytest.fixture
def emitter() -> RecordingEmitter:
    """Fresh recording emitter with the default nvptx argument ceiling."""
    return RecordingEmitter(max_args=32)


def make_operand(
    shape: tuple[int, ...],
    coords: Sequence[tuple[int, ...]],
    values: Sequence[object] | None = None,
    dtype: PrintType | None = None,
    index: int = 0,
) -> Operand:
    """Build an Operand from explicit coordinates.

    Args:
        shape: Logical tensor shape.
        coords: Owned coordinates in emission order.
        values: Element values; defaults to ``0, 1, 2, ...``.
        dtype: Element type; ``None`` infers it from the values.
        index: Operand position.

    Returns:
        The operand.
    """
    if values is None:
        values = list(range(len(coords)))
    elements = tuple(Element(v, tuple(c)) for v, c in zip(values, coords))
    return Operand(index, shape, elements, dtype)


def make_arange(shape: tuple[int, ...], dtype: np.dtype = np.int32) -> np.ndarray:
    """Deterministic tensor whose values are their row-major positions.

    Args:
        shape: Shape of the array to generate.
        dtype: Data type for the array.

    Returns:
        Array of ``arange(prod(shape))`` reshaped to ``shape``.
    """
    return np.arange(int(np.prod(shape)), dtype=dtype).reshape(shape)
