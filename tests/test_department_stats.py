"""Tests for the per-student department statistics."""
from deptboard.analysis.department_stats import (
    compute_department_stats,
    group_by_student,
    student_averages,
)
from deptboard.analysis.thresholds import Thresholds
from deptboard.models.marks_schemas import DepartmentStats, MarkRecord


def _record(student_id, marks):
    return MarkRecord(student_id=student_id, marks_obtained=marks, subject_name="DSA")


class TestEmptyDepartment:

    def test_no_records_is_all_zero(self):
        stats = compute_department_stats([])

        assert stats == DepartmentStats(
            average=0, pass_percentage=0, at_risk_count=0, total_students=0,
        )
        assert stats.model_dump(by_alias=True) == {
            "average": 0,
            "passPercentage": 0,
            "atRiskCount": 0,
            "totalStudents": 0,
        }


class TestStudentGrouping:

    def test_groups_keep_first_appearance_order(self):
        records = [_record("B", 1), _record("A", 2), _record("B", 3)]

        grouped = group_by_student(records)

        assert list(grouped) == ["B", "A"]
        assert [r.marks_obtained for r in grouped["B"]] == [1, 3]

    def test_student_averages(self):
        records = [_record("S1", 20), _record("S1", 30), _record("S2", None)]

        assert student_averages(records) == {"S1": 25, "S2": 0}


class TestDepartmentStats:

    def test_four_students(self):
        # per-student means 25, 19, 15, 30
        records = [
            _record("S1", 20), _record("S1", 30),
            _record("S2", 19),
            _record("S3", 10), _record("S3", 20),
            _record("S4", 30),
        ]

        stats = compute_department_stats(records)

        assert stats.total_students == 4
        assert stats.at_risk_count == 1
        # only 25 and 30 reach the pass mark of 20
        assert stats.pass_percentage == 50.0
        # (25 + 19 + 15 + 30) / 4 = 22.25, rounded half-up
        assert stats.average == 22.3

    def test_students_weighted_equally_regardless_of_entry_count(self):
        records = [_record("S1", 40)] * 5 + [_record("S2", 10)]

        stats = compute_department_stats(records)

        assert stats.average == 25.0
        assert stats.total_students == 2

    def test_pass_and_risk_boundaries(self):
        records = [_record("S1", 20), _record("S2", 18), _record("S3", 17.9)]

        stats = compute_department_stats(records)

        assert stats.pass_percentage == 33.3
        assert stats.at_risk_count == 1

    def test_pass_percentage_rounds_to_one_decimal(self):
        records = [_record("S1", 20), _record("S2", 25), _record("S3", 5)]

        assert compute_department_stats(records).pass_percentage == 66.7

    def test_custom_thresholds(self):
        thresholds = Thresholds(pass_mark=30, risk_mark=26)
        records = [_record("S1", 25), _record("S2", 35)]

        stats = compute_department_stats(records, thresholds)

        assert stats.pass_percentage == 50.0
        assert stats.at_risk_count == 1
