from student_tracker.models.student import Student

__all__ = ["Student"]
