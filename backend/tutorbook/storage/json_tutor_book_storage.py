"""JSON file storage for the TutorBook.

Reads and writes the whole student list as a single JSON document. Every
load and save runs under its own operation_id so the log entries it
produces can be correlated.
"""

from pathlib import Path

from pydantic import ValidationError

from ..core.config import settings
from ..core.constants import ErrorMessages, Logging
from ..core.exceptions import DataLoadingError
from ..core.logging import get_logger, set_operation_id
from ..domain import TutorBook
from .base import TutorBookStorage
from .json_serializable_tutor_book import JsonSerializableTutorBook

logger = get_logger(__name__)


def _violation_message(error: ValueError) -> str:
    """Return the user-facing message of a rejected value.

    Value objects reject input from inside a pydantic validator, which wraps
    the original ValueError in a ValidationError. Only that inner message is
    shown to the user.
    """
    if isinstance(error, ValidationError):
        for detail in error.errors():
            cause = detail.get('ctx', {}).get('error')
            if cause is not None:
                return str(cause)
    return str(error)


class JsonTutorBookStorage(TutorBookStorage):
    """Stores the tutor book in a JSON file on disk.

    Usage:
        storage = JsonTutorBookStorage("data/tutorbook.json")
        tutor_book = storage.read_tutor_book() or TutorBook()
        storage.save_tutor_book(tutor_book)
    """

    def __init__(self, file_path: Path | str | None = None):
        """Initialize the storage.

        Args:
            file_path: Default data file (falls back to settings.TUTORBOOK_DATA_FILE)
        """
        self.file_path = Path(file_path) if file_path is not None else Path(settings.TUTORBOOK_DATA_FILE)

    def get_file_path(self) -> Path:
        return self.file_path

    def read_tutor_book(self, file_path: Path | str | None = None) -> TutorBook | None:
        path = Path(file_path) if file_path is not None else self.file_path
        set_operation_id(prefix=Logging.OPERATION_ID_PREFIX_LOAD)

        if not path.exists():
            logger.info("Data file not found", extra={'path': str(path)})
            return None

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "Failed to read data file",
                extra={'path': str(path), 'error': str(e)}
            )
            raise DataLoadingError(
                ErrorMessages.DATA_FILE_UNREADABLE.format(path=path, error=e)
            ) from e

        try:
            serializable = JsonSerializableTutorBook.model_validate_json(content)
        except ValidationError as e:
            logger.error(
                "Data file is malformed",
                extra={'path': str(path), 'error_count': e.error_count()}
            )
            raise DataLoadingError(
                ErrorMessages.DATA_FILE_MALFORMED.format(path=path, error=e)
            ) from e

        try:
            tutor_book = serializable.to_model_type()
        except ValueError as e:
            logger.error(
                "Illegal values found in data file",
                extra={'path': str(path), 'error': str(e)}
            )
            raise DataLoadingError(_violation_message(e)) from e

        logger.info(
            "Tutor book loaded",
            extra={'path': str(path), 'students': len(tutor_book)}
        )
        return tutor_book

    def save_tutor_book(self, tutor_book: TutorBook, file_path: Path | str | None = None) -> None:
        path = Path(file_path) if file_path is not None else self.file_path
        set_operation_id(prefix=Logging.OPERATION_ID_PREFIX_SAVE)

        serializable = JsonSerializableTutorBook.from_model(tutor_book)

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            serializable.model_dump_json(by_alias=True, indent=settings.JSON_INDENT),
            encoding="utf-8"
        )

        logger.info(
            "Tutor book saved",
            extra={'path': str(path), 'students': len(tutor_book)}
        )
