"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for record stream failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Record format errors (malformed persisted records)
    """

    # Record format errors (1000-1999)
    RECORD_KEY_MISSING_SEPARATOR = 1001
    RECORD_UNKNOWN_USAGE = 1002
    RECORD_INVALID_TYPE = 1003


def _escape_control(text: str) -> str:
    """Escape control characters so record content cannot forge log lines."""
    return "".join(
        char if char.isprintable() else char.encode("unicode_escape").decode("ascii")
        for char in text
    )


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to point
    a translator at the offending record of a resource file.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        record_key: Key of the record that failed (None if not applicable)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    record_key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[RECORD_UNKNOWN_USAGE]: Unknown template usage 'Hlep'
              --> record 'TEMPLATE;Hlep;Name'
              = help: Use one of the TemplateUsage names

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape_control(self.message)}"]
        if self.record_key is not None:
            lines.append(f"  --> record '{_escape_control(self.record_key)}'")
        if self.hint:
            lines.append(f"  = help: {_escape_control(self.hint)}")
        return "\n".join(lines)
