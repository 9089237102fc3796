import itertools
from datetime import datetime, timezone
from typing import Dict, List, Optional

from deptboard.analysis.department_stats import group_by_student
from deptboard.analysis.thresholds import Thresholds
from deptboard.models.marks_schemas import (
    GRADE_LABELS,
    Alert,
    AlertSeverity,
    GradeDistribution,
    MarkRecord,
    MarkStatus,
    OverviewResponse,
)
from deptboard.utils.helpers import format_score, mean

# Lower bound (inclusive) of bands A..D; anything below the last is F
BAND_FLOORS = (80, 60, 40, 20)

ALL_CLEAR_MESSAGE = "All department metrics are within acceptable range"


def grade_band(percent: float) -> int:
    """Index into GRADE_LABELS for a percentage. >=100 is still A, negatives are F."""
    for index, floor in enumerate(BAND_FLOORS):
        if percent >= floor:
            return index
    return len(BAND_FLOORS)


def compute_grade_distribution(records: List[MarkRecord]) -> GradeDistribution:
    data = [0] * len(GRADE_LABELS)
    for record in records:
        data[grade_band(record.percent)] += 1
    return GradeDistribution(labels=list(GRADE_LABELS), data=data)


def build_alerts(
    records: List[MarkRecord],
    thresholds: Optional[Thresholds] = None,
    now: Optional[datetime] = None,
) -> List[Alert]:
    """
    Turn department marks into dashboard alerts.

    Order: cohort-at-risk critical (if any) first, then per-student warnings
    (capped), per-subject warnings, and the pending-review notice. Ids follow
    generation order, so the critical alert keeps the id it was created with
    even though it is displayed first.
    """
    thresholds = thresholds or Thresholds.from_settings()
    now = now or datetime.now(timezone.utc)
    scale = f"{thresholds.scale:g}"
    ids = itertools.count(1)

    def new_alert(severity: AlertSeverity, message: str) -> Alert:
        return Alert(id=next(ids), severity=severity, message=message, timestamp=now)

    alerts: List[Alert] = []

    # 1. students below the risk mark
    at_risk = 0
    for student_id, entries in group_by_student(records).items():
        avg = mean([r.marks_obtained for r in entries])
        if avg >= thresholds.risk_mark:
            continue
        at_risk += 1
        if at_risk <= thresholds.student_alert_cap:
            name = next((r.student_name for r in entries if r.student_name), student_id)
            alerts.append(new_alert(
                AlertSeverity.warning,
                f"{name} has low average ({format_score(avg)}/{scale})",
            ))

    if at_risk > thresholds.cohort_alert_threshold:
        alerts.insert(0, new_alert(
            AlertSeverity.critical,
            f"{at_risk} students are at risk with below-threshold marks",
        ))

    # 2. subjects with a poor class average
    subject_scores: Dict[str, List[float]] = {}
    for record in records:
        if record.subject_name is None:
            continue
        subject_scores.setdefault(record.subject_name, []).append(record.marks_obtained)

    for subject, scores in subject_scores.items():
        avg = mean(scores)
        if avg < thresholds.subject_mark:
            alerts.append(new_alert(
                AlertSeverity.warning,
                f"{subject} has low class average ({format_score(avg)}/{scale})",
            ))

    # 3. entries nobody has reviewed yet
    pending = sum(1 for r in records if r.status == MarkStatus.PENDING)
    if pending > 0:
        alerts.append(new_alert(
            AlertSeverity.info,
            f"{pending} mark entries are still pending review",
        ))

    if not alerts:
        alerts.append(Alert(
            id=1, severity=AlertSeverity.info, message=ALL_CLEAR_MESSAGE, timestamp=now,
        ))

    return alerts


def compute_overview(
    records: List[MarkRecord],
    faculty_count: int,
    thresholds: Optional[Thresholds] = None,
    now: Optional[datetime] = None,
) -> OverviewResponse:
    """HOD overview tab: grade histogram, alerts, and the injected faculty headcount."""
    return OverviewResponse(
        grade_distribution=compute_grade_distribution(records),
        alerts=build_alerts(records, thresholds=thresholds, now=now),
        faculty_count=faculty_count,
    )
