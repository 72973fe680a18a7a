from __future__ import annotations

"""
Domain Exceptions.

Failure taxonomy of the analyzer. Expected absences (an unresolved tag, a
component without a template) are not exceptions: they are logged and the
traversal continues. The classes below mark the conditions that abort a run.
"""


class VerifError(Exception):
    """Base class for every fatal condition raised by the analyzer."""


class InvalidComponentFileError(VerifError):
    """Raised when an argument is not recognized as a component file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} should be a vue file.")
        self.path = path


class RegistryNotInitializedError(VerifError):
    """Raised when a lookup hits a registry that was never populated."""

    def __init__(self) -> None:
        super().__init__("Components directory is not initialized.")


class TemplateParseError(VerifError):
    """Raised when component markup is too malformed to build an element tree."""


class InvalidPrinterFormatError(VerifError):
    """Raised for an output format the printers do not support."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid printer type: {value}")
        self.value = value


class RootNotFoundError(VerifError):
    """Raised when an entry point file does not exist on disk."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Root component not found: {path}")
        self.path = path
