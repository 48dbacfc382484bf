"""Diagnostic system for formlocalizer errors.

Provides structured error diagnostics with codes, hints, and record context.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import LocalizerError, RecordFormatError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "LocalizerError",
    "RecordFormatError",
]
