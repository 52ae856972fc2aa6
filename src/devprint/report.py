"""Tabular summaries of print plans for logging and inspection."""

from collections.abc import Iterable

from tabulate import tabulate

from devprint.plan import Emission, FormatKey
from devprint.simulate import render_emission

__all__ = ["plan_summary"]

_HEADERS = ["operand", "line", "args", "cached"]


def plan_summary(plan: Iterable[Emission], tablefmt: str = "simple") -> str:
    """Render a plan as a table, one row per emission.

    The ``cached`` column marks emissions that reuse a format string
    registered by an earlier emission of the same plan.

    Args:
        plan: Emissions from ``plan_print``.
        tablefmt: Any ``tabulate`` table format.

    Returns:
        The formatted table.
    """
    seen: set[FormatKey] = set()
    rows: list[list[object]] = []
    for emission in plan:
        key = emission.key
        cached = key is not None and key in seen
        if key is not None:
            seen.add(key)
        operand = "-" if key is None else key.operand
        rows.append([operand, render_emission(emission), len(emission.args), "yes" if cached else "no"])
    return tabulate(rows, headers=_HEADERS, tablefmt=tablefmt)
