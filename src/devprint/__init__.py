"""devprint - per-thread printf lowering for device tensor prints.

Pipeline: print request -> per-element format plan -> emitter calls

Modules:
    types: Closed domain of printable scalar types
    specifier: Conversion-specifier resolution
    request: Print request data model and construction helpers
    plan: Planned calls and format cache keys
    formatter: Planning and emission of formatted calls
    emit: Emitter protocol and a recording reference emitter
    simulate: Host-side rendering of planned calls
    report: Tabular plan summaries
    utils: Logging configuration
"""

from devprint.config import DEFAULT_CONFIG, FormatterConfig
from devprint.emit import Emitter, FormatHandle, RecordingEmitter
from devprint.errors import CoordinateRankError, InvalidPrefixError, PrintContractError, UnsupportedTypeError
from devprint.formatter import TRUNCATION_MARKER, emit_print, plan_print
from devprint.plan import Emission, FormatKey
from devprint.request import (
    DisplayMode,
    Element,
    Operand,
    PrintRequest,
    ThreadIdentity,
    make_request,
    normalize_prefix,
    operand_from_array,
)
from devprint.specifier import resolve
from devprint.types import PrintType, TypeKind

__all__ = [
    "DEFAULT_CONFIG",
    "FormatterConfig",
    "Emitter",
    "FormatHandle",
    "RecordingEmitter",
    "PrintContractError",
    "UnsupportedTypeError",
    "CoordinateRankError",
    "InvalidPrefixError",
    "TRUNCATION_MARKER",
    "Emission",
    "FormatKey",
    "emit_print",
    "plan_print",
    "DisplayMode",
    "Element",
    "Operand",
    "PrintRequest",
    "ThreadIdentity",
    "make_request",
    "normalize_prefix",
    "operand_from_array",
    "resolve",
    "PrintType",
    "TypeKind",
]
