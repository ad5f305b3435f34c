"""Exception types raised by the address checker."""


class AddressCheckError(Exception):
    """Base class for errors that abort a run."""


class MalformedRecordError(AddressCheckError):
    """An input row does not match the expected column shape."""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class ConfigError(AddressCheckError):
    """A configuration value could not be parsed."""
