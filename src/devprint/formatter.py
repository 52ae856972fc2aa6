"""Lowering of print requests to printf-style formatted calls.

Format of each emitted line::

    pid (<x>, <y>, <z>) idx (<i1>, <i2>, ...)<prefix>(operand <n>) <elem>

where ``(operand <n>) `` is left off when the request has a single
operand, and the index is truncated when the operand's rank would push
the call past the backend's variadic argument ceiling.

Planning (``plan_print``) is a pure function of the request, the thread
identity and the configuration. ``emit_print`` replays a plan against an
``Emitter``, registering each distinct format once and reusing its handle.
"""

import logging
import math
from collections.abc import Sequence
from typing import Any

from devprint.config import DEFAULT_CONFIG, FormatterConfig
from devprint.emit import Emitter, FormatHandle
from devprint.errors import CoordinateRankError, PrintContractError
from devprint.plan import Emission, FormatKey
from devprint.report import plan_summary
from devprint.request import Element, Operand, PrintRequest, ThreadIdentity
from devprint.specifier import resolve
from devprint.types import I32

__all__ = [
    "TRUNCATION_MARKER",
    "FormatKey",
    "Emission",
    "dim_widths",
    "pid_format",
    "format_element",
    "plan_print",
    "emit_print",
]

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "... (truncated)"

INDEX_TYPE = I32
"""Type of the coordinate components passed to printf."""


def dim_widths(shape: Sequence[int]) -> tuple[int, ...]:
    """Decimal field width for each dimension's index.

    Args:
        shape: Logical tensor shape.

    Returns:
        ``ceil(log10(d))`` per dimension, ``0`` for empty dimensions.
    """
    return tuple(int(math.ceil(math.log10(d))) if d > 0 else 0 for d in shape)


def pid_format(config: FormatterConfig = DEFAULT_CONFIG) -> str:
    """Format text for the thread-identity triple.

    The pid is not padded: its maximum is unknown when the format is built.

    Args:
        config: Formatter configuration supplying the identity type.

    Returns:
        Text such as ``"pid (%u, %u, %u)"``.
    """
    spec = resolve(config.pid_type)
    return f"pid ({spec}, {spec}, {spec})"


def format_element(
    request: PrintRequest,
    operand: Operand,
    element: Element,
    pid: ThreadIdentity,
    widths: tuple[int, ...],
    config: FormatterConfig = DEFAULT_CONFIG,
) -> Emission:
    """Build the format text and arguments for one owned element.

    Args:
        request: Print request the element belongs to.
        operand: Operand holding the element.
        element: The element to print.
        pid: Issuing thread identity.
        widths: Per-dimension field widths of ``operand``.
        config: Formatter configuration.

    Returns:
        Emission for this element.

    Raises:
        CoordinateRankError: If the coordinate length differs from the
            operand's rank.
        UnsupportedTypeError: If the element's type is not printable.
    """
    coord = element.coordinate
    if len(coord) != operand.rank:
        raise CoordinateRankError(
            f"operand {operand.index}: coordinate {tuple(coord)} does not match shape {operand.shape}"
        )
    dtype = operand.element_type(element)
    max_rank = config.max_allowed_rank
    cutoff = max_rank if operand.rank > max_rank else None

    args: list[Any] = [pid.x, pid.y, pid.z]
    index_parts: list[str] = []
    for dim, component in enumerate(coord):
        if dim == cutoff:
            index_parts.append(TRUNCATION_MARKER)
            break
        index_parts.append(resolve(INDEX_TYPE, hex=False, width=widths[dim]))
        args.append(component)

    fmt = f"{pid_format(config)} idx ({', '.join(index_parts)})%s"
    args.append(request.prefix)
    if len(request.operands) > 1:
        fmt += f"(operand {operand.index}) "
    fmt += resolve(dtype, hex=request.hex)
    args.append(element.value)

    key = FormatKey(operand.index, operand.rank, cutoff, widths, dtype, request.display_mode)
    return Emission(fmt, tuple(args), key)


def _operand_elements(operand: Operand) -> tuple[Element, ...]:
    """Owned elements of ``operand``.

    A scalar operand owns at most one element, whose coordinate is empty;
    a non-empty scalar coordinate is rejected by ``format_element``.

    Raises:
        PrintContractError: If a scalar operand carries more than one element.
    """
    if operand.is_scalar and len(operand.elements) > 1:
        raise PrintContractError(f"scalar operand {operand.index} carries {len(operand.elements)} elements")
    return operand.elements


def plan_print(
    request: PrintRequest, pid: ThreadIdentity, config: FormatterConfig = DEFAULT_CONFIG
) -> tuple[Emission, ...]:
    """Plan every formatted call one thread makes for a print request.

    A request without operands becomes a single ``pid (...) %s`` call.
    Otherwise each owned element of each operand becomes one call, in the
    operand's element order. Operands with no owned elements are skipped.

    Args:
        request: The print request.
        pid: Issuing thread identity.
        config: Formatter configuration.

    Returns:
        Planned emissions in execution order.
    """
    if not request.operands:
        return (Emission(f"{pid_format(config)} %s", (pid.x, pid.y, pid.z, request.prefix), None),)

    plan: list[Emission] = []
    for operand in request.operands:
        elements = _operand_elements(operand)
        if not elements:
            continue
        widths = dim_widths(operand.shape)
        logger.debug("operand %d: shape=%s widths=%s elements=%d", operand.index, operand.shape, widths, len(elements))
        if operand.rank > config.max_allowed_rank:
            logger.debug(
                "operand %d: rank %d exceeds %d printf index slots, truncating index",
                operand.index,
                operand.rank,
                config.max_allowed_rank,
            )
        for element in elements:
            plan.append(format_element(request, operand, element, pid, widths, config))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("print plan for pid %s:\n%s", tuple(pid), plan_summary(plan))
    return tuple(plan)


def emit_print(
    request: PrintRequest, pid: ThreadIdentity, emitter: Emitter, config: FormatterConfig = DEFAULT_CONFIG
) -> list[FormatHandle]:
    """Plan a print request and execute it against an emitter.

    The first emission for each FormatKey passes its format text; later
    emissions with the same key pass the cached handle.

    Args:
        request: The print request.
        pid: Issuing thread identity.
        emitter: Emit primitive.
        config: Formatter configuration.

    Returns:
        Handle returned for each executed call, in order.
    """
    cache: dict[FormatKey, FormatHandle] = {}
    handles: list[FormatHandle] = []
    for emission in plan_print(request, pid, config):
        cached = cache.get(emission.key) if emission.key is not None else None
        if cached is None:
            handle = emitter.emit(emission.fmt, emission.args)
            if emission.key is not None:
                cache[emission.key] = handle
        else:
            logger.debug("reusing format handle %r for operand %d", cached, emission.key.operand)
            handle = emitter.emit(cached, emission.args)
        handles.append(handle)
    return handles
