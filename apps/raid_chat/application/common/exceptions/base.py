"""Application exception base class."""


class ApplicationError(Exception):
    """Base class for all application errors.

    Raised while a use case runs.
    """

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)
