"""Custom exceptions for the processing module."""

from typing import Any


class InputProcessingError(Exception):
    """Raised when errors are encountered while loading a changelog input dump."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__("Errors encountered during input processing.")
        self.errors = errors
