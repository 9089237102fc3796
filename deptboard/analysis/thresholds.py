from dataclasses import dataclass

from deptboard.core.config import CONFIG, Settings


@dataclass(frozen=True)
class Thresholds:
    """
    Cut-offs used by the dashboard aggregations.

    Values are absolute marks on a fixed 50-point scale. They are not
    rescaled by a record's own max_marks.
    """

    scale: float = 50
    pass_mark: float = 20
    risk_mark: float = 18
    subject_mark: float = 25
    student_alert_cap: int = 5
    cohort_alert_threshold: int = 5

    @classmethod
    def from_settings(cls, settings: Settings = CONFIG) -> "Thresholds":
        return cls(
            scale=settings.MARKS_SCALE,
            pass_mark=settings.PASS_THRESHOLD,
            risk_mark=settings.RISK_THRESHOLD,
            subject_mark=settings.SUBJECT_THRESHOLD,
            student_alert_cap=settings.STUDENT_ALERT_CAP,
            cohort_alert_threshold=settings.COHORT_ALERT_THRESHOLD,
        )
