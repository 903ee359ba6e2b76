"""
Record Store - keyed persistence for Student records.

Two implementations share the same interface
(find_by_id, list_all, insert, update, delete):

- SqlStudentStore: backed by a SQLAlchemy session (SQLite or PostgreSQL).
  Identity comes from the autoincrement primary key.
- InMemoryStudentStore: a dict guarded by one lock. Last write wins.

STORE_BACKEND selects which one the API uses ("sql" or "memory").
Database errors are wrapped in StoreFailure after rolling back the session.
"""

import os
import threading
from typing import Dict, List, Optional
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from student_tracker.database import get_db
from student_tracker.models.student import Student
from student_tracker.logging_config import get_logger, log_with_context

logger = get_logger("db")

STORE_BACKEND = os.getenv("STORE_BACKEND", "sql").lower()


class StoreFailure(Exception):
    """The record store could not complete an operation."""


class SqlStudentStore:
    """Record store over a single SQLAlchemy session (one per request)."""

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, operation: str, error: SQLAlchemyError):
        self.db.rollback()
        log_with_context(logger, "ERROR", "Store {} failed: {}".format(operation, str(error)),
                         extra_data={"operation": operation}, exc_info=True)
        raise StoreFailure("Store {} failed".format(operation)) from error

    def find_by_id(self, student_id: int) -> Optional[Student]:
        try:
            return self.db.get(Student, student_id)
        except SQLAlchemyError as e:
            self._fail("find_by_id", e)

    def list_all(self) -> List[Student]:
        try:
            return self.db.query(Student).order_by(Student.student_id).all()
        except SQLAlchemyError as e:
            self._fail("list_all", e)

    def insert(self, student: Student) -> Student:
        try:
            self.db.add(student)
            self.db.commit()
            self.db.refresh(student)
        except SQLAlchemyError as e:
            self._fail("insert", e)
        log_with_context(logger, "DEBUG", "Inserted student row",
                         context={"student_id": student.student_id})
        return student

    def update(self, student: Student) -> None:
        try:
            self.db.add(student)
            self.db.commit()
            self.db.refresh(student)
        except SQLAlchemyError as e:
            self._fail("update", e)

    def delete(self, student_id: int) -> None:
        try:
            student = self.db.get(Student, student_id)
            if student is not None:
                self.db.delete(student)
                self.db.commit()
        except SQLAlchemyError as e:
            self._fail("delete", e)


class InMemoryStudentStore:
    """
    Dict-backed record store.

    A single lock around the whole map serializes writers; identities
    are handed out from a monotonically increasing counter and never
    reused after delete.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._students: Dict[int, Student] = {}
        self._next_id = 1

    def find_by_id(self, student_id: int) -> Optional[Student]:
        with self._lock:
            return self._students.get(student_id)

    def list_all(self) -> List[Student]:
        with self._lock:
            return [self._students[k] for k in sorted(self._students)]

    def insert(self, student: Student) -> Student:
        with self._lock:
            student.student_id = self._next_id
            self._next_id += 1
            self._students[student.student_id] = student
        return student

    def update(self, student: Student) -> None:
        with self._lock:
            self._students[student.student_id] = student

    def delete(self, student_id: int) -> None:
        with self._lock:
            self._students.pop(student_id, None)


# Process-wide store used when STORE_BACKEND=memory
memory_store = InMemoryStudentStore()


def get_store(db: Session = Depends(get_db)):
    """
    FastAPI dependency that provides the configured record store.

    The SQL store wraps the per-request session from get_db; the memory
    store is shared by the whole process.
    """
    if STORE_BACKEND == "memory":
        return memory_store
    return SqlStudentStore(db)
