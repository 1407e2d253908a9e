"""Custom exceptions for bean-board."""


class BeanBoardError(Exception):
    """Base exception for bean-board."""

    pass


class FetchError(BeanBoardError):
    """Raised when the CSV export cannot be retrieved."""

    def __init__(self, message: str, *, status: int | None = None):
        super().__init__(message)
        self.status = status


class SourceConfigError(BeanBoardError):
    """Raised when a data source is selected or configured incorrectly."""

    pass
