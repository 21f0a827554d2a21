"""Progress classification against a daily calorie goal."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from calorie_tracker.domain.consumption import DailyConsumption
from calorie_tracker.domain.errors import ValidationFailed
from calorie_tracker.domain.numbers import round_half_up


class ProgressCategory(StrEnum):
    """Narrative category for a window of daily totals."""

    ON_TRACK = "on_track"
    SLIGHTLY_OVER = "slightly_over"
    NEEDS_ATTENTION = "needs_attention"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class ProgressThresholds:
    """Policy constants controlling how strict the classifier is."""

    on_track_pct: int = 80
    over_goal_tolerance: float = 1.05

    def __post_init__(self) -> None:
        if not 0 <= self.on_track_pct <= 100:  # noqa: PLR2004
            raise ValidationFailed("on_track_pct must be between 0 and 100")
        if self.over_goal_tolerance < 1:
            raise ValidationFailed("over_goal_tolerance must be at least 1.0")


@dataclass(frozen=True)
class ProgressReport:
    """Classifier output: a category and the statistics it interpolates."""

    category: ProgressCategory
    days: int
    goal: int
    avg: int | None = None
    pct_met: int | None = None
    pct_over: int | None = None

    def as_dict(self) -> dict[str, object]:
        """Return the category with only the parameters it defines."""
        params: dict[str, int] = {}
        if self.category is ProgressCategory.ON_TRACK:
            params = {"pct_met": self.pct_met}
        elif self.category is ProgressCategory.NEEDS_ATTENTION:
            params = {"avg": self.avg, "goal": self.goal, "pct_over": self.pct_over}
        elif self.category is ProgressCategory.SLIGHTLY_OVER:
            params = {"avg": self.avg, "goal": self.goal}
        return {"category": self.category.value, "days": self.days, "params": params}


def classify_progress(
    daily_totals: Sequence[DailyConsumption],
    goal: int,
    thresholds: ProgressThresholds | None = None,
) -> ProgressReport:
    """Classify adherence to the goal over the given days.

    Every input maps to exactly one category:

    - no days: insufficient data
    - enough days at or under goal and average within tolerance: on track
    - average above tolerance: needs attention, with percentage over goal
    - otherwise: slightly over
    """
    if isinstance(goal, bool) or not isinstance(goal, int) or goal <= 0:
        raise ValidationFailed("Daily goal must be a positive integer")
    policy = thresholds or ProgressThresholds()
    count = len(daily_totals)
    if count == 0:
        return ProgressReport(
            category=ProgressCategory.INSUFFICIENT_DATA, days=0, goal=goal
        )

    avg = round_half_up(sum(day.consumed for day in daily_totals) / count)
    met_days = sum(1 for day in daily_totals if day.consumed <= goal)
    pct_met = round_half_up(100 * met_days / count)
    ceiling = goal * policy.over_goal_tolerance

    if pct_met >= policy.on_track_pct and avg <= ceiling:
        category = ProgressCategory.ON_TRACK
        pct_over = None
    elif avg > ceiling:
        category = ProgressCategory.NEEDS_ATTENTION
        pct_over = round_half_up(100 * (avg - goal) / goal)
    else:
        category = ProgressCategory.SLIGHTLY_OVER
        pct_over = None
    return ProgressReport(
        category=category,
        days=count,
        goal=goal,
        avg=avg,
        pct_met=pct_met,
        pct_over=pct_over,
    )
