from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class _Stats(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class DashboardStats(_Stats):
    total_workouts: int
    completed_workouts: int
    progress: int
    partners: int

class ExerciseCompletion(_Stats):
    total: int
    completed: int
    rate: int

class PartnerStats(_Stats):
    name: str
    completed_workouts: int
    completion_rate: int

class WorkoutStats(_Stats):
    weekly_workouts: int
    completed_workouts: int
    completion_rate: int
    exercise_completion: ExerciseCompletion
    partner: PartnerStats | None = None
