from pydantic import BaseModel

class SetRead(BaseModel):
    id: int
    exercise_id: int
    user_id: int
    set_number: int
    weight: float
    reps: int
    completed: bool

    model_config = {"from_attributes": True}
