from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import selectinload

from fitpartner.models import AvailableExercise, DailyWorkout, WorkoutExercise
from fitpartner.repositories.base import BaseRepository

def _with_exercises_and_sets():
    return selectinload(DailyWorkout.exercises).selectinload(WorkoutExercise.exercise_sets)

class WorkoutRepository(BaseRepository[DailyWorkout]):
    model = DailyWorkout

    def get_with_exercises(self, workout_id: int) -> Optional[DailyWorkout]:
        stmt = select(DailyWorkout).where(DailyWorkout.id == workout_id)\
                                   .options(selectinload(DailyWorkout.exercises))
        return self.db.execute(stmt).scalar_one_or_none()

    def completion_flags(self, user_id: int) -> list[bool]:
        """One ``completed`` flag per workout the user has ever had."""
        stmt = select(DailyWorkout.completed).where(DailyWorkout.user_id == user_id)
        return list(self.db.execute(stmt).scalars().all())

    def list_in_range(self, user_id: int, *, since: datetime, until: datetime) -> list[DailyWorkout]:
        stmt = select(DailyWorkout).where(
            DailyWorkout.user_id == user_id,
            DailyWorkout.date >= since,
            DailyWorkout.date <= until,
        ).options(_with_exercises_and_sets())\
         .order_by(DailyWorkout.date.asc(), DailyWorkout.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def list_favorites(self, user_id: int) -> list[DailyWorkout]:
        stmt = select(DailyWorkout).where(
            DailyWorkout.user_id == user_id, DailyWorkout.is_favorite.is_(True)
        ).options(_with_exercises_and_sets())\
         .order_by(DailyWorkout.created_at.desc(), DailyWorkout.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def set_favorite(self, workout_id: int, user_id: int, *, is_favorite: bool) -> int:
        """Returns the number of rows touched (0 when the user does not own it)."""
        stmt = update(DailyWorkout).where(
            DailyWorkout.id == workout_id, DailyWorkout.user_id == user_id
        ).values(is_favorite=is_favorite)
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount

    def create(
        self,
        user_id: int,
        *,
        title: str,
        duration: int,
        difficulty: str,
        date: datetime,
        workout_type: str | None = None,
        is_shared: bool = False,
        shared_with: list | None = None,
    ) -> DailyWorkout:
        workout = DailyWorkout(
            user_id=user_id,
            title=title,
            workout_type=workout_type,
            duration=duration,
            difficulty=difficulty,
            date=date,
            completed=False,
            is_favorite=False,
            is_shared=is_shared,
            shared_with=list(shared_with or []),
        )
        return self.add_and_refresh(workout)

    def delete(self, workout: DailyWorkout) -> None:
        self.db.delete(workout)
        self.db.commit()

class ExerciseRepository(BaseRepository[WorkoutExercise]):
    model = WorkoutExercise

    def create(
        self, daily_workout_id: int, *, name: str, target_sets: int, target_reps: str, notes: str | None
    ) -> WorkoutExercise:
        ex = WorkoutExercise(
            daily_workout_id=daily_workout_id,
            name=name,
            target_sets=target_sets,
            target_reps=target_reps,
            notes=notes,
        )
        return self.add_and_refresh(ex)

    def delete(self, exercise: WorkoutExercise) -> None:
        self.db.delete(exercise)
        self.db.commit()

class CatalogRepository(BaseRepository[AvailableExercise]):
    model = AvailableExercise

    def list_by_muscle_group(self, muscle_group: str) -> list[AvailableExercise]:
        stmt = select(AvailableExercise).where(AvailableExercise.main_muscle_group == muscle_group)\
                                        .order_by(AvailableExercise.id.asc())
        return list(self.db.execute(stmt).scalars().all())
