"""
Student model - the single entity tracked by the platform.

Stores identity, contact details and three assessment marks (each out
of 20). Total, average, percentage and performance level are derived on
read and never persisted.
"""

from datetime import date, datetime, timezone
from sqlalchemy import CheckConstraint, Column, Integer, Date, DateTime, Index, String
from student_tracker.database import Base
from student_tracker.services.performance import compute_metrics


def utcnow():
    # Naive UTC keeps SQLite and PostgreSQL timestamps comparable
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Student(Base):
    """
    SQLAlchemy model for the students table.

    student_id is assigned by the database on insert and never changes.
    created_date is stamped once at creation.
    """
    __tablename__ = "students"

    student_id = Column(Integer, primary_key=True, autoincrement=True,
                        doc="Auto-incrementing student identifier")
    first_name = Column(String(50), nullable=False, default="",
                        doc="Student's first name")
    last_name = Column(String(50), nullable=False, default="",
                       doc="Student's last name")
    email = Column(String(100), nullable=False, default="",
                   doc="Contact email")
    phone = Column(String(20), nullable=False, default="",
                   doc="Phone number stored with the +267 country code")
    grade = Column(String(10), nullable=False, default="",
                   doc="Class/grade label, e.g. 10A")
    enrollment_date = Column(Date, nullable=False, default=date.today,
                             doc="Date the student enrolled")
    assessment1 = Column(Integer, nullable=False, default=0,
                         doc="First assessment mark (0-20)")
    assessment2 = Column(Integer, nullable=False, default=0,
                         doc="Second assessment mark (0-20)")
    assessment3 = Column(Integer, nullable=False, default=0,
                         doc="Third assessment mark (0-20)")
    created_date = Column(DateTime, nullable=False, default=utcnow,
                          doc="Timestamp when the record was created")

    __table_args__ = (
        Index("ix_students_last_name", "last_name"),
        Index("ix_students_first_name", "first_name"),
        CheckConstraint("assessment1 BETWEEN 0 AND 20", name="ck_students_assessment1_range"),
        CheckConstraint("assessment2 BETWEEN 0 AND 20", name="ck_students_assessment2_range"),
        CheckConstraint("assessment3 BETWEEN 0 AND 20", name="ck_students_assessment3_range"),
    )

    @property
    def metrics(self):
        return compute_metrics(self.assessment1 or 0, self.assessment2 or 0, self.assessment3 or 0)

    @property
    def total(self) -> int:
        return self.metrics.total

    @property
    def average(self) -> float:
        return self.metrics.average

    @property
    def percentage(self) -> float:
        return self.metrics.percentage

    @property
    def performance_level(self) -> str:
        return self.metrics.performance_level

    def __repr__(self):
        return f"<Student(id={self.student_id}, name='{self.first_name} {self.last_name}', total={self.total})>"
