"""Workout reads, stats, templates and generation for the signed-in user."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fitpartner.errors import NotAuthorized, NotFound
from fitpartner.models import DailyWorkout, User
from fitpartner.repositories.set_repo import SetRepository
from fitpartner.repositories.user_repo import PartnerRepository
from fitpartner.repositories.workout_repo import (
    CatalogRepository,
    ExerciseRepository,
    WorkoutRepository,
)
from fitpartner.schemas.stats import ExerciseCompletion, PartnerStats, WorkoutStats
from fitpartner.schemas.workout import WorkoutDetail, WorkoutGenerate
from fitpartner.services.dashboard import percent

log = logging.getLogger(__name__)

EXERCISES_PER_BODY_PART = 2
# Placeholder; real duration is filled in downstream
INITIAL_DURATION = 1

@dataclass(frozen=True, slots=True)
class SetRange:
    min_sets: int
    max_sets: int
    reps: str

STRENGTH_RANGE = SetRange(3, 5, "6-12")
DEFAULT_RANGE = SetRange(2, 3, "12-15")

@dataclass(slots=True)
class ExerciseSpec:
    name: str
    target_sets: int
    target_reps: str
    notes: str | None = None

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def start_of_week(now: datetime) -> datetime:
    """Sunday 00:00 of the week containing ``now``, in ``now``'s timezone."""
    days_since_sunday = (now.weekday() + 1) % 7
    start = now - timedelta(days=days_since_sunday)
    return start.replace(hour=0, minute=0, second=0, microsecond=0)

def current_week_window() -> tuple[datetime, datetime]:
    now = utcnow()
    local_start = start_of_week(now.astimezone())
    return local_start.astimezone(timezone.utc), now

def short_date(day: datetime) -> str:
    """M/D/YY, e.g. 3/7/25."""
    return f"{day.month}/{day.day}/{day:%y}"

def set_range_for(workout_type: str) -> SetRange:
    return STRENGTH_RANGE if workout_type == "strength" else DEFAULT_RANGE

def _set_counts(workouts: Iterable[DailyWorkout]) -> tuple[int, int]:
    total = completed = 0
    for workout in workouts:
        for exercise in workout.exercises:
            total += len(exercise.exercise_sets)
            completed += sum(1 for s in exercise.exercise_sets if s.completed)
    return total, completed

# ---------------------------------------------------------------- stats

def get_workout_stats(db: Session, user: User) -> WorkoutStats:
    since, until = current_week_window()
    repo = WorkoutRepository(db)

    workouts = repo.list_in_range(user.id, since=since, until=until)
    total = len(workouts)
    completed = sum(1 for w in workouts if w.completed)
    sets_total, sets_done = _set_counts(workouts)

    partner_stats = None
    relation = PartnerRepository(db).first_accepted(user.id)
    if relation is not None:
        partner_workouts = repo.list_in_range(relation.partner_id, since=since, until=until)
        p_total, p_done = _set_counts(partner_workouts)
        partner_stats = PartnerStats(
            name=(relation.partner.name if relation.partner else None) or "Partner",
            completed_workouts=sum(1 for w in partner_workouts if w.completed),
            completion_rate=percent(p_done, p_total),
        )

    return WorkoutStats(
        weekly_workouts=total,
        completed_workouts=completed,
        completion_rate=percent(completed, total),
        exercise_completion=ExerciseCompletion(
            total=sets_total, completed=sets_done, rate=percent(sets_done, sets_total)
        ),
        partner=partner_stats,
    )

# ---------------------------------------------------------------- reads

def _fill_missing_sets(db: Session, user_id: int, workouts: list[DailyWorkout]) -> int:
    """Create the user's missing sets so every exercise has ``target_sets`` of them.

    Missing numbers are the lowest unused ones in 1..target_sets; sets numbered
    above the target are kept and counted. Flushed only.
    """
    sets = SetRepository(db)
    created = 0
    for workout in workouts:
        for exercise in workout.exercises:
            taken = {s.set_number for s in exercise.exercise_sets if s.user_id == user_id}
            if len(taken) >= exercise.target_sets:
                continue
            missing = [n for n in range(1, exercise.target_sets + 1) if n not in taken]
            missing = missing[: exercise.target_sets - len(taken)]
            sets.create_blank(exercise.id, user_id, missing)
            created += len(missing)
    return created

def _detail_for_user(workout: DailyWorkout, user_id: int) -> WorkoutDetail:
    detail = WorkoutDetail.model_validate(workout)
    for exercise in detail.exercises:
        exercise.exercise_sets = sorted(
            (s for s in exercise.exercise_sets if s.user_id == user_id),
            key=lambda s: s.set_number,
        )
    return detail

def get_current_week_workouts(db: Session, user: User) -> list[WorkoutDetail]:
    since, until = current_week_window()
    repo = WorkoutRepository(db)
    workouts = repo.list_in_range(user.id, since=since, until=until)

    try:
        created = _fill_missing_sets(db, user.id, workouts)
        if created:
            db.commit()
            log.info("created %d missing sets for user %s", created, user.id)
    except IntegrityError:
        # a concurrent request already created them
        db.rollback()
        log.warning("set numbers already taken for user %s; reloading", user.id)
        workouts = repo.list_in_range(user.id, since=since, until=until)

    return [_detail_for_user(w, user.id) for w in workouts]

def get_favorite_workouts(db: Session, user: User) -> list[WorkoutDetail]:
    """Favorites with every user's sets, newest first."""
    return [WorkoutDetail.model_validate(w) for w in WorkoutRepository(db).list_favorites(user.id)]

def toggle_favorite(db: Session, user: User, workout_id: int, is_favorite: bool) -> None:
    touched = WorkoutRepository(db).set_favorite(workout_id, user.id, is_favorite=is_favorite)
    if not touched:
        log.debug("favorite toggle on workout %s matched nothing for user %s", workout_id, user.id)

# ---------------------------------------------------------------- ownership & deletes

def ensure_workout_owner(db: Session, user: User, workout_id: int, *, action: str) -> DailyWorkout:
    workout = WorkoutRepository(db).get(workout_id)
    if workout is None:
        raise NotFound("Workout not found")
    if workout.user_id != user.id:
        raise NotAuthorized(f"Not authorized to {action}")
    return workout

def delete_workout(db: Session, user: User, workout_id: int) -> None:
    workout = ensure_workout_owner(db, user, workout_id, action="delete this workout")
    WorkoutRepository(db).delete(workout)

def delete_exercise(db: Session, user: User, exercise_id: int) -> None:
    exercises = ExerciseRepository(db)
    exercise = exercises.get(exercise_id)
    if exercise is None:
        raise NotFound("Exercise not found")
    ensure_workout_owner(db, user, exercise.daily_workout_id, action="delete this exercise")
    exercises.delete(exercise)

# ---------------------------------------------------------------- creation

def _create_workout(
    db: Session, user: User, exercises: list[ExerciseSpec], **fields
) -> DailyWorkout:
    """Insert a workout, its exercises and a fresh set of zeroed sets in one transaction."""
    workout_repo, exercise_repo, set_repo = WorkoutRepository(db), ExerciseRepository(db), SetRepository(db)
    try:
        workout = workout_repo.create(user.id, **fields)
        for spec in exercises:
            exercise = exercise_repo.create(
                workout.id,
                name=spec.name,
                target_sets=spec.target_sets,
                target_reps=spec.target_reps,
                notes=spec.notes,
            )
            set_repo.create_blank(exercise.id, user.id, range(1, spec.target_sets + 1))
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(workout)
    return workout

def add_workout_to_week(db: Session, user: User, workout_id: int) -> DailyWorkout:
    template = WorkoutRepository(db).get_with_exercises(workout_id)
    if template is None:
        raise NotFound("Workout not found")

    specs = [
        ExerciseSpec(name=ex.name, target_sets=ex.target_sets, target_reps=ex.target_reps, notes=ex.notes)
        for ex in template.exercises
    ]
    workout = _create_workout(
        db,
        user,
        specs,
        title=template.title,
        duration=template.duration,
        difficulty=template.difficulty,
        workout_type=template.workout_type,
        date=utcnow(),
    )
    log.info("user %s added workout %s to the week as %s", user.id, workout_id, workout.id)
    return workout

def pick_exercises(
    db: Session, body_parts: list[str], set_range: SetRange, rng: random.Random | None = None
) -> list[ExerciseSpec]:
    rng = rng or random
    catalog = CatalogRepository(db)
    picked: list[ExerciseSpec] = []
    for part in body_parts:
        candidates = catalog.list_by_muscle_group(part)
        if not candidates:
            raise NotFound(f"No exercises found for {part}")
        rng.shuffle(candidates)
        for ex in candidates[:EXERCISES_PER_BODY_PART]:
            picked.append(ExerciseSpec(
                name=ex.name,
                target_sets=rng.randint(set_range.min_sets, set_range.max_sets),
                target_reps=set_range.reps,
                notes=f"Equipment: {ex.primary_equipment}, Grip: {ex.grip_style or 'Any'}",
            ))
    return picked

def generate_workout(
    db: Session,
    user: User,
    request: WorkoutGenerate,
    *,
    rng: Optional[random.Random] = None,
) -> DailyWorkout:
    requested = [choice.body_part for choice in request.exercises]
    # title lists each part once; picking runs per requested entry
    body_parts = list(dict.fromkeys(requested))
    now = utcnow()
    title = f"{'/'.join(body_parts)} ({short_date(now.astimezone())})"

    specs = pick_exercises(db, requested, set_range_for(request.workout_type), rng)

    sharing = request.sharing
    workout = _create_workout(
        db,
        user,
        specs,
        title=title,
        duration=INITIAL_DURATION,
        difficulty=request.difficulty,
        workout_type=request.workout_type,
        date=now,
        is_shared=sharing.is_shared if sharing else False,
        shared_with=sharing.shared_with if sharing else [],
    )
    log.info("generated workout %s (%d exercises) for user %s", workout.id, len(specs), user.id)
    return workout
