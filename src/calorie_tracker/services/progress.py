"""Dashboard composition: window totals, top foods and progress category."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from calorie_tracker.domain.consumption import DailyConsumption, TopFood
from calorie_tracker.domain.progress import (
    ProgressReport,
    ProgressThresholds,
    classify_progress,
)
from calorie_tracker.services.aggregation import (
    DEFAULT_TOP_FOODS_LIMIT,
    RangeAggregator,
)
from calorie_tracker.services.profiles import ProfileService


@dataclass(frozen=True)
class Dashboard:
    """Aggregated view of a user's window."""

    start: date
    end: date
    goal: int
    daily: list[DailyConsumption]
    top_foods: list[TopFood]
    progress: ProgressReport


@dataclass
class ProgressService:
    """Service combining range queries with the progress classifier."""

    aggregator: RangeAggregator
    profile_service: ProfileService
    thresholds: ProgressThresholds = field(default_factory=ProgressThresholds)

    def classify(self, user_id: UUID, start: date, end: date) -> ProgressReport:
        """Classify the window against the user's goal."""
        goal = self.profile_service.get_or_default(user_id).daily_goal
        daily = self.aggregator.daily_totals(user_id, start, end)
        return classify_progress(daily, goal, self.thresholds)

    def dashboard(
        self,
        user_id: UUID,
        start: date,
        end: date,
        top_limit: int = DEFAULT_TOP_FOODS_LIMIT,
    ) -> Dashboard:
        """Return totals, top foods and the progress category for a window."""
        goal = self.profile_service.get_or_default(user_id).daily_goal
        daily = self.aggregator.daily_totals(user_id, start, end)
        top_foods = self.aggregator.top_foods(user_id, start, end, top_limit)
        return Dashboard(
            start=start,
            end=end,
            goal=goal,
            daily=daily,
            top_foods=top_foods,
            progress=classify_progress(daily, goal, self.thresholds),
        )
