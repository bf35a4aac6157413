"""
Pytest Configuration and Shared Fixtures

This module contains shared test fixtures and configuration for all test modules.
"""

import os

import pytest

os.environ["ENVIRONMENT"] = "test"

from tutorbook.domain.student import (  # noqa: E402
    Address,
    Email,
    FeeStatus,
    Lesson,
    Name,
    Phone,
    Remark,
    Student,
    Subject,
)


@pytest.fixture()
def sample_student_data():
    """Stored record of a valid student with no lessons"""
    return {
        "name": "Amy",
        "phone": "98765432",
        "email": "amy@example.com",
        "address": "123 Clementi Rd",
        "subject": "Math",
        "remark": "",
        "feeStatus": "PAID",
        "lessons": []
    }


@pytest.fixture()
def sample_lesson_data():
    """Stored record of a valid lesson"""
    return {
        "date": "2024-03-14",
        "startTime": "16:00",
        "endTime": "17:30"
    }


@pytest.fixture()
def sample_student():
    """Valid student with two lessons"""
    return Student(
        name=Name("Bernice Yu"),
        phone=Phone("99272758"),
        email=Email("berniceyu@example.com"),
        address=Address("Blk 30 Lorong 3 Serangoon Gardens, #07-18"),
        subject=Subject("Chemistry"),
        remark=Remark("Needs help with organic chemistry"),
        fee_status=FeeStatus("UNPAID"),
        lessons=(
            Lesson.model_validate({"date": "2024-03-14", "start_time": "16:00", "end_time": "17:30"}),
            Lesson.model_validate({"date": "2024-03-21", "start_time": "09:00", "end_time": "10:00"}),
        )
    )


@pytest.fixture()
def other_student():
    """Second valid student, different name from sample_student"""
    return Student(
        name=Name("Charlotte Oliveiro"),
        phone=Phone("93210283"),
        email=Email("charlotte@example.com"),
        address=Address("Blk 11 Ang Mo Kio Street 74, #11-04"),
        subject=Subject("Physics"),
        remark=Remark(None),
        fee_status=FeeStatus("PAID"),
    )


@pytest.fixture()
def valid_emails():
    """List of valid email addresses for testing"""
    return [
        "amy@example.com",
        "a@bc",
        "first.last@example.com",
        "user+tag@sub.example-domain.org",
        "peter_jack@very-very-very-long-example.com",
        "123@145",
    ]


@pytest.fixture()
def invalid_emails():
    """List of invalid email addresses for testing"""
    return [
        "",
        " ",
        "@example.com",
        "peterjackexample.com",
        "peterjack@",
        "peter jack@example.com",
        "-peterjack@example.com",
        "peterjack-@example.com",
        "peterjack@example.c",
        "peterjack@-example.com",
        "peterjack@example-.com",
        "peterjack@example.com-",
        "peter@jack@example.com",
    ]
