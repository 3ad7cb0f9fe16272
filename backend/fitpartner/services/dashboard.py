from sqlalchemy.orm import Session

from fitpartner.models import User
from fitpartner.repositories.user_repo import PartnerRepository
from fitpartner.repositories.workout_repo import WorkoutRepository
from fitpartner.schemas.stats import DashboardStats

def percent(part: int, whole: int) -> int:
    """Whole-number percentage, halves round up; 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return (part * 200 + whole) // (whole * 2)

def get_dashboard_stats(db: Session, user: User) -> DashboardStats:
    """Lifetime totals; no date window."""
    flags = WorkoutRepository(db).completion_flags(user.id)
    total = len(flags)
    completed = sum(1 for done in flags if done)
    return DashboardStats(
        total_workouts=total,
        completed_workouts=completed,
        progress=percent(completed, total),
        partners=PartnerRepository(db).count_accepted(user.id),
    )
