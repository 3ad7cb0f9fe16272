from typing import Annotated, Literal
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from fitpartner.schemas.exercise_set import SetRead

Difficulty = Literal["easy", "medium", "hard"]
BodyPart = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=60)]

class ExerciseRead(BaseModel):
    id: int
    name: str
    target_sets: int
    target_reps: str
    notes: str | None = None
    exercise_sets: list[SetRead] = []

    model_config = {"from_attributes": True}

class WorkoutRead(BaseModel):
    id: int
    user_id: int
    title: str
    workout_type: str | None = None
    duration: int
    difficulty: str
    date: datetime
    completed: bool
    is_favorite: bool
    is_shared: bool
    shared_with: list = []

    model_config = {"from_attributes": True}

class WorkoutDetail(WorkoutRead):
    exercises: list[ExerciseRead] = []

class FavoriteUpdate(BaseModel):
    is_favorite: bool

# Requests coming from the client use camelCase keys
class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class BodyPartChoice(_CamelModel):
    body_part: BodyPart

class Sharing(_CamelModel):
    is_shared: bool = False
    shared_with: list[int] = []

class WorkoutGenerate(_CamelModel):
    workout_type: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=60)]
    difficulty: Difficulty
    exercises: list[BodyPartChoice] = Field(min_length=1)
    sharing: Sharing | None = None
