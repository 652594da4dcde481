"""Core application exception classes.

This module provides a centralized exception hierarchy for dummy file
generation errors. All custom exceptions inherit from DummyFileError.

Exception Hierarchy:
    DummyFileError (base)
    +-- ConfigurationError (missing/invalid configuration or parameters)
    |   +-- InvalidTargetSizeError
    +-- UnsupportedFormatError (unknown output format)

Encoder failures raised by the document/image libraries and filesystem
errors (OSError) are not wrapped; they propagate to the caller unchanged.
Size-policy violations are never raised, they are reported through
SizedContent and a warning log entry.
"""


class DummyFileError(Exception):
    """Base exception for all dummy file generator errors.

    Example:
        try:
            generator.create_and_write_all()
        except DummyFileError as e:
            logger.error("generation_failed", error=str(e))
            return 2
    """

    pass


class ConfigurationError(DummyFileError):
    """Exception for missing or invalid configuration.

    Raised when generator parameters or settings cannot be used, such as
    a negative target size or a size string that cannot be parsed.
    """

    pass


class InvalidTargetSizeError(ConfigurationError, ValueError):
    """Exception for target sizes that are negative or unparseable.

    Inherits from ValueError so settings validators surface it as a
    regular validation error.
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class UnsupportedFormatError(DummyFileError, ValueError):
    """Exception for output format names that are not supported."""

    def __init__(self, name: str):
        super().__init__(f"Unsupported file format: {name!r}")
        self.name = name
