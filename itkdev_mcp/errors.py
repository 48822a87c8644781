"""Error types raised by the template and project tools."""


class ItkDevError(Exception):
    """Base error for tool operations."""
    pass


class InvalidInputError(ItkDevError):
    """A required argument is missing or unusable."""

    def __init__(self, message: str, argument: str = None):
        super().__init__(message)
        self.argument = argument


class NotFoundError(ItkDevError):
    """A path, template, file or documentation file does not exist."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path
