"""
Unit Tests for TutorBook

Tests the in-memory student collection and its duplicate detection.
"""

import pytest

from tutorbook.core.exceptions import DuplicateStudentError, StudentNotFoundError
from tutorbook.domain import TutorBook
from tutorbook.domain.student import Phone


class TestTutorBook:
    """Test suite for TutorBook"""

    def test_empty(self):
        """Test a new tutor book has no students"""
        book = TutorBook()
        assert len(book) == 0
        assert book.students == ()

    def test_add_and_has_student(self, sample_student):
        """Test an added student is found"""
        book = TutorBook()
        book.add_student(sample_student)
        assert book.has_student(sample_student)
        assert list(book) == [sample_student]

    def test_same_name_is_duplicate(self, sample_student):
        """Test a student with the same name but other details is a duplicate"""
        book = TutorBook([sample_student])
        edited = sample_student.model_copy(update={"phone": Phone("11111111")})

        assert edited != sample_student
        assert book.has_student(edited)
        with pytest.raises(DuplicateStudentError):
            book.add_student(edited)

    def test_remove_student(self, sample_student, other_student):
        """Test removing keeps the remaining order"""
        book = TutorBook([sample_student, other_student])
        book.remove_student(sample_student)
        assert book.students == (other_student,)

    def test_remove_missing_student(self, sample_student):
        """Test removing an absent student raises"""
        with pytest.raises(StudentNotFoundError):
            TutorBook().remove_student(sample_student)

    def test_set_students_is_all_or_nothing(self, sample_student, other_student):
        """Test a replacement with duplicates leaves the book unchanged"""
        book = TutorBook([other_student])
        with pytest.raises(DuplicateStudentError):
            book.set_students([sample_student, sample_student])
        assert book.students == (other_student,)

    def test_equality(self, sample_student, other_student):
        """Test tutor books compare by contents and order"""
        assert TutorBook([sample_student, other_student]) == TutorBook([sample_student, other_student])
        assert TutorBook([sample_student, other_student]) != TutorBook([other_student, sample_student])


class TestStudent:
    """Test suite for Student identity and display"""

    def test_is_same_student(self, sample_student, other_student):
        """Test identity is decided by name only"""
        assert sample_student.is_same_student(sample_student)
        assert not sample_student.is_same_student(other_student)
        assert not sample_student.is_same_student(None)

    def test_str(self, sample_student):
        """Test the display string lists the fields and lessons"""
        text = str(sample_student)
        assert text.startswith("Bernice Yu; Phone: 99272758")
        assert "Fee status: UNPAID" in text
        assert "2024-03-14 16:00-17:30, 2024-03-21 09:00-10:00" in text
