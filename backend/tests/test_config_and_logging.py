"""
Tests for Configuration, Logging and PII Masking
"""

import json
import logging

import pytest
from pydantic import ValidationError

from tutorbook.core.config import Settings
from tutorbook.core.logging import (
    CustomJsonFormatter,
    get_logger,
    get_operation_id,
    set_operation_id,
    setup_logging,
)
from tutorbook.utils import generate_operation_id, mask_value, sanitize_log_data


class TestSettings:
    """Test suite for Settings"""

    def test_defaults(self, monkeypatch):
        """Test default settings values"""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("JSON_INDENT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.APP_NAME == "TutorBook"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.JSON_INDENT == 2

    def test_log_level_normalized(self, monkeypatch):
        """Test LOG_LEVEL is upper-cased"""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        """Test an unknown LOG_LEVEL is rejected"""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_negative_indent(self, monkeypatch):
        """Test a negative JSON_INDENT is rejected"""
        monkeypatch.setenv("JSON_INDENT", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLogging:
    """Test suite for structured logging"""

    def test_operation_id(self):
        """Test set_operation_id generates prefixed IDs"""
        operation_id = set_operation_id(prefix="load")
        assert operation_id.startswith("load-")
        assert get_operation_id() == operation_id

        assert set_operation_id("fixed-id") == "fixed-id"
        assert get_operation_id() == "fixed-id"

    def test_formatter_output(self):
        """Test log records are rendered as JSON with context fields"""
        set_operation_id("op-123")
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
        record = logging.LogRecord(
            name="tutorbook.test", level=logging.INFO, pathname=__file__, lineno=1,
            msg="Tutor book loaded", args=(), exc_info=None
        )
        record.students = 3

        output = json.loads(formatter.format(record))

        assert output["message"] == "Tutor book loaded"
        assert output["level"] == "INFO"
        assert output["logger"] == "tutorbook.test"
        assert output["operation_id"] == "op-123"
        assert output["students"] == 3

    def test_setup_logging(self):
        """Test setup_logging installs a single JSON handler on the root logger"""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            logger = setup_logging()
            assert logger is root
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_get_logger(self):
        """Test get_logger returns the named logger"""
        assert get_logger("tutorbook.storage").name == "tutorbook.storage"


class TestMasking:
    """Test suite for PII masking helpers"""

    def test_mask_value(self):
        """Test only the last characters are kept"""
        assert mask_value("98765432") == "****5432"
        assert mask_value("123") == "****"
        assert mask_value(None) == "****"

    def test_sanitize_log_data(self, sample_student_data):
        """Test phone, email and address are masked, other fields kept"""
        sanitized = sanitize_log_data({"record": sample_student_data})["record"]

        assert sanitized["name"] == "Amy"
        assert sanitized["phone"] == "****5432"
        assert sanitized["email"] == "*" * 11 + ".com"
        assert sanitized["address"].endswith(" Rd")
        assert sanitized["address"] != sample_student_data["address"]
        assert sample_student_data["phone"] == "98765432"

    def test_generate_operation_id(self):
        """Test generated IDs are unique"""
        assert generate_operation_id() != generate_operation_id()
        assert generate_operation_id("save").startswith("save-")
