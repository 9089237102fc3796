# deptboard/utils/helpers.py
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


def round_half_up(value: float, places: int = 1) -> float:
    """
    Round like the dashboard front-end does (``toFixed``): half-up on the
    exact binary value of the float, so 22.25 -> 22.3.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_score(value: float, places: int = 1) -> str:
    return f"{round_half_up(value, places):.{places}f}"


def coerce_number(value: Any) -> float | None:
    """
    Best-effort float conversion for loosely typed store values.
    Returns None for missing, non-numeric or non-finite input.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0
