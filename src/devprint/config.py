"""Formatter configuration."""

from dataclasses import dataclass

from devprint.types import I32, PrintType

__all__ = ["FormatterConfig", "DEFAULT_CONFIG", "PID_ARGS", "TRAILING_ARGS"]

PID_ARGS = 3
"""Arguments consumed by the ``pid (x, y, z)`` triple."""

TRAILING_ARGS = 2
"""Arguments consumed after the index: the prefix string and the value."""


@dataclass(frozen=True)
class FormatterConfig:
    """Backend limits and conventions for print lowering.

    nvptx printf accepts at most 32 variadic arguments and prints garbage
    for any beyond that, so 32 is the default ceiling.

    Attributes:
        max_printf_operands: Maximum number of variadic arguments one
            formatted call may carry.
        pid_type: Type of the thread-identity components.
    """

    max_printf_operands: int = 32
    pid_type: PrintType = I32

    def __post_init__(self) -> None:
        """Validate that the ceiling leaves room for the reserved arguments.

        Raises:
            ValueError: If the ceiling is smaller than the reserved slots.
        """
        reserved = PID_ARGS + TRAILING_ARGS
        if self.max_printf_operands < reserved:
            raise ValueError(
                f"max_printf_operands={self.max_printf_operands} leaves no room for "
                f"the {reserved} reserved printf arguments"
            )

    @property
    def max_allowed_rank(self) -> int:
        """Number of coordinate components one formatted call can carry."""
        return self.max_printf_operands - PID_ARGS - TRAILING_ARGS


DEFAULT_CONFIG = FormatterConfig()
