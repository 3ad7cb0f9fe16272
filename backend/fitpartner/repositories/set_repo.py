from __future__ import annotations
from typing import Iterable
from fitpartner.models import ExerciseSet
from fitpartner.repositories.base import BaseRepository

class SetRepository(BaseRepository[ExerciseSet]):
    model = ExerciseSet

    def create_blank(self, exercise_id: int, user_id: int, set_numbers: Iterable[int]) -> list[ExerciseSet]:
        """Zero weight/reps, not completed. Flushed, not committed."""
        sets = [
            ExerciseSet(exercise_id=exercise_id, user_id=user_id, set_number=n, weight=0, reps=0, completed=False)
            for n in set_numbers
        ]
        self.db.add_all(sets)
        self.db.flush()
        return sets
