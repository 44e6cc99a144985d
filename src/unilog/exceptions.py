"""Exception classes for unilog operations.

None of these ever escape Logger.log(); they are raised by the settings
store and level parsing and absorbed or reported by their callers.
"""


class UnilogError(Exception):
    """Base exception for unilog operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class SettingsError(UnilogError):
    """Raised when the settings file cannot be written."""

    error_prefix = "Settings update failed"


class InvalidLevelError(UnilogError, ValueError):
    """Raised when a level name is not one of the known levels."""

    error_prefix = "Invalid log level"
