from __future__ import annotations

import itertools

import pytest

from student_tracker.models.student import Student
from student_tracker.services.performance import (
    EXCELLENT,
    GOOD,
    NEEDS_SUPPORT,
    SATISFACTORY,
    compute_metrics,
    performance_level,
)


def test_metrics_are_exact_for_every_valid_triple() -> None:
    for a1, a2, a3 in itertools.product(range(21), repeat=3):
        metrics = compute_metrics(a1, a2, a3)
        total = a1 + a2 + a3
        assert metrics.total == total
        assert metrics.average == total / 3.0
        assert metrics.percentage == total / 60.0 * 100


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        (0.0, NEEDS_SUPPORT),
        (49.99, NEEDS_SUPPORT),
        (50.0, SATISFACTORY),
        (55.0, SATISFACTORY),
        (55.01, GOOD),
        (75.0, GOOD),
        (75.01, EXCELLENT),
        (100.0, EXCELLENT),
    ],
)
def test_performance_band_boundaries(percentage: float, expected: str) -> None:
    assert performance_level(percentage) == expected


def test_band_labels_match_ui_text() -> None:
    assert (NEEDS_SUPPORT, SATISFACTORY, GOOD, EXCELLENT) == (
        "Needs Support",
        "Satisfactory",
        "Good",
        "Excellent",
    )


def test_sample_student_is_excellent() -> None:
    metrics = compute_metrics(18, 19, 17)
    assert metrics.total == 54
    assert metrics.average == 18.0
    assert metrics.percentage == 90.0
    assert metrics.performance_level == EXCELLENT


def test_student_model_exposes_derived_fields() -> None:
    student = Student(assessment1=15, assessment2=16, assessment3=14)
    assert student.total == 45
    assert student.average == 15.0
    assert student.percentage == 75.0
    assert student.performance_level == GOOD
