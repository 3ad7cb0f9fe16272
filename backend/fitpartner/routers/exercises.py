from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from fitpartner.db import get_db
from fitpartner.deps.auth import get_current_user
from fitpartner.models import User
from fitpartner.services.workouts import delete_exercise

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_exercise(exercise_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    # ownership is checked through the parent workout
    delete_exercise(db, current, exercise_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
