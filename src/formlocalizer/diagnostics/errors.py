"""formlocalizer exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocalizerError(Exception):
    """Base exception for all formlocalizer errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizerError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class RecordFormatError(LocalizerError):
    """Malformed record encountered while loading a store.

    Aborts the load: no partially built store is returned and the store
    that initiated the load is left untouched.

    Attributes:
        record_key: Key of the offending record (empty if unknown)
    """

    def __init__(self, message: str | Diagnostic, *, record_key: str = "") -> None:
        """Initialize RecordFormatError.

        Args:
            message: Error message string OR Diagnostic object
            record_key: Key of the offending record
        """
        super().__init__(message)
        self.record_key = record_key
