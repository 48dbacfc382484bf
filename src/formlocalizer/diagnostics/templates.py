"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def record_key_missing_separator(record_key: str) -> Diagnostic:
        """Record key has no type prefix.

        Args:
            record_key: The malformed record key

        Returns:
            Diagnostic for RECORD_KEY_MISSING_SEPARATOR
        """
        msg = f"Record key '{record_key}' has no ';' after its record type"
        return Diagnostic(
            code=DiagnosticCode.RECORD_KEY_MISSING_SEPARATOR,
            message=msg,
            hint="Record keys look like 'VALUE;<key>', 'LIST;<key>' or 'TEMPLATE;<usage>;<field>'",
            record_key=record_key,
        )

    @staticmethod
    def unknown_usage(usage: str, record_key: str) -> Diagnostic:
        """Template record names a usage that does not exist.

        Args:
            usage: The unrecognized usage identifier
            record_key: The record key carrying it

        Returns:
            Diagnostic for RECORD_UNKNOWN_USAGE
        """
        msg = f"Unknown template usage '{usage}'"
        return Diagnostic(
            code=DiagnosticCode.RECORD_UNKNOWN_USAGE,
            message=msg,
            hint="Use one of the TemplateUsage names, e.g. 'NotUnderstood'",
            record_key=record_key,
        )

    @staticmethod
    def invalid_record_type(record: object) -> Diagnostic:
        """Record is not a pair of strings.

        Args:
            record: The record as read from the source

        Returns:
            Diagnostic for RECORD_INVALID_TYPE
        """
        if isinstance(record, (tuple, list)):
            shape = "(" + ", ".join(type(item).__name__ for item in record) + ")"
            first = record[0] if record else None
        else:
            shape = type(record).__name__
            first = None
        msg = f"Record must be a pair of strings, got {shape}"
        return Diagnostic(
            code=DiagnosticCode.RECORD_INVALID_TYPE,
            message=msg,
            hint="Record sources must yield (str, str) pairs",
            record_key=first if isinstance(first, str) else None,
        )
