"""Emit collaborator interface and a recording reference implementation.

The emit primitive executes one formatted call. The first call with new
format text registers the text and returns a handle; later calls may pass
that handle instead of the text.
"""

import logging
from collections.abc import Sequence
from typing import Any, NamedTuple, Protocol

__all__ = ["FormatHandle", "Emitter", "EmittedCall", "RecordingEmitter"]

logger = logging.getLogger(__name__)


class FormatHandle(NamedTuple):
    """Opaque reference to a registered format string.

    Attributes:
        slot: Registration slot in the emitter's string table.
        text: Registered format text.
    """

    slot: int
    text: str


class Emitter(Protocol):
    """Primitive that executes one formatted call."""

    def emit(self, fmt: "str | FormatHandle", args: Sequence[Any]) -> FormatHandle:
        """Execute a formatted call.

        Args:
            fmt: Format text for a first use, or a handle returned earlier.
            args: Variadic arguments in specifier order.

        Returns:
            Handle for the format text, reusable in later calls.
        """
        ...


class EmittedCall(NamedTuple):
    """One executed call recorded by RecordingEmitter."""

    handle: FormatHandle
    args: tuple[Any, ...]


class RecordingEmitter:
    """Emitter that interns format text and records every call.

    Identical text passed twice is registered once. Calls carrying more
    arguments than the backend ceiling are rejected, matching a printf
    backend that cannot pass them.

    Attributes:
        max_args: Argument ceiling per call.
        strings: Registered format texts, indexed by handle slot.
        calls: Executed calls in order.
    """

    def __init__(self, max_args: int = 32) -> None:
        """Initialize an empty string table and call log.

        Args:
            max_args: Argument ceiling per call.
        """
        self.max_args = max_args
        self.strings: list[str] = []
        self.calls: list[EmittedCall] = []
        self._slots: dict[str, int] = {}

    def emit(self, fmt: "str | FormatHandle", args: Sequence[Any]) -> FormatHandle:
        """Register ``fmt`` if needed and record the call.

        Args:
            fmt: Format text or a handle previously returned by this emitter.
            args: Variadic arguments.

        Returns:
            Handle for the format text.

        Raises:
            ValueError: If ``args`` exceeds ``max_args``.
            KeyError: If ``fmt`` is a handle this emitter never issued.
        """
        if len(args) > self.max_args:
            raise ValueError(f"printf call with {len(args)} arguments exceeds the limit of {self.max_args}")
        handle = self._lookup(fmt) if isinstance(fmt, FormatHandle) else self._intern(fmt)
        self.calls.append(EmittedCall(handle, tuple(args)))
        return handle

    def _intern(self, text: str) -> FormatHandle:
        """Return the handle for ``text``, registering it on first sight."""
        slot = self._slots.get(text)
        if slot is None:
            slot = len(self.strings)
            self.strings.append(text)
            self._slots[text] = slot
            logger.debug("registered format string %d: %r", slot, text)
        return FormatHandle(slot, text)

    def _lookup(self, handle: FormatHandle) -> FormatHandle:
        """Validate a handle issued by this emitter."""
        if handle.slot >= len(self.strings) or self.strings[handle.slot] != handle.text:
            raise KeyError(f"unknown format handle: {handle!r}")
        return handle

    def lines(self) -> list[tuple[str, tuple[Any, ...]]]:
        """Executed calls as ``(format text, args)`` pairs."""
        return [(call.handle.text, call.args) for call in self.calls]
