"""Base TutorBook Storage Interface.

This module defines the abstract interface that all tutor book storages must
implement, so the application can switch storage formats without changing
the code that loads and saves students.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ..domain import TutorBook


class TutorBookStorage(ABC):
    """Abstract base class for tutor book storages."""

    @abstractmethod
    def get_file_path(self) -> Path:
        """Return the default file the tutor book is stored in."""

    @abstractmethod
    def read_tutor_book(self, file_path: Path | str | None = None) -> TutorBook | None:
        """Load the tutor book.

        Args:
            file_path: File to read (defaults to get_file_path())

        Returns:
            The loaded TutorBook, or None if the file does not exist

        Raises:
            DataLoadingError: If the file exists but cannot be loaded
        """

    @abstractmethod
    def save_tutor_book(self, tutor_book: TutorBook, file_path: Path | str | None = None) -> None:
        """Save the tutor book.

        Args:
            tutor_book: Students to save
            file_path: File to write (defaults to get_file_path())
        """
