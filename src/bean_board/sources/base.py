"""Base source interface."""

from abc import ABC, abstractmethod


class BaseSource(ABC):
    """Abstract base class for CSV export sources."""

    @abstractmethod
    def read_text(self) -> str:
        """Return the full CSV export body.

        Raises:
            FetchError: If the export cannot be retrieved.
        """
        pass

    def describe(self) -> str:
        """Return a short human-readable description for logs."""
        return type(self).__name__
