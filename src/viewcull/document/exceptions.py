"""Custom exceptions for document snapshot I/O.

These exceptions wrap low-level file, JSON and schema errors with the path
of the snapshot that caused them.
"""

from pathlib import Path


class DocumentError(Exception):
    """Base exception for all document-related errors."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize document error with optional path context.

        Args:
            message: Human-readable error description.
            path: Path to the snapshot file that caused the error.
        """
        self.path = Path(path) if path else None
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with path context if available."""
        if self.path:
            return f"{self.message} (path: {self.path})"
        return self.message


class DocumentLoadError(DocumentError):
    """Raised when a snapshot file cannot be loaded.

    This error is raised when:
    - The file does not exist or cannot be read
    - The file is not valid JSON
    - The JSON does not match the document schema (e.g. zoom <= 0)
    """

    pass
