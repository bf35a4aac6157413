"""TutorBook: student records for private tutors, persisted as JSON."""

__version__ = "1.0.0"
