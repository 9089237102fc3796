from typing import Dict, Iterable, List, Optional

from deptboard.analysis.thresholds import Thresholds
from deptboard.models.marks_schemas import DepartmentStats, MarkRecord
from deptboard.utils.helpers import mean, round_half_up


def group_by_student(records: Iterable[MarkRecord]) -> Dict[str, List[MarkRecord]]:
    """Group records per student, keeping the order students first appear in."""
    grouped: Dict[str, List[MarkRecord]] = {}
    for record in records:
        grouped.setdefault(record.student_id, []).append(record)
    return grouped


def student_averages(records: Iterable[MarkRecord]) -> Dict[str, float]:
    return {
        student_id: mean([r.marks_obtained for r in entries])
        for student_id, entries in group_by_student(records).items()
    }


def compute_department_stats(
    records: List[MarkRecord],
    thresholds: Optional[Thresholds] = None,
) -> DepartmentStats:
    """
    Per-student summary for one department.

    Every student counts once: averages are taken over each student's own
    mean, not over raw mark entries.
    """
    if not records:
        return DepartmentStats()

    thresholds = thresholds or Thresholds.from_settings()
    averages = list(student_averages(records).values())
    total_students = len(averages)

    passed = sum(1 for avg in averages if avg >= thresholds.pass_mark)
    at_risk = sum(1 for avg in averages if avg < thresholds.risk_mark)

    return DepartmentStats(
        average=round_half_up(mean(averages)),
        pass_percentage=round_half_up(passed / total_students * 100),
        at_risk_count=at_risk,
        total_students=total_students,
    )
