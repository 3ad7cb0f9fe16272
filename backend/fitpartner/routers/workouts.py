from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from fitpartner.db import get_db
from fitpartner.deps.auth import get_current_user
from fitpartner.models import User
from fitpartner.schemas.stats import WorkoutStats
from fitpartner.schemas.workout import FavoriteUpdate, WorkoutDetail, WorkoutGenerate, WorkoutRead
from fitpartner.services import workouts as svc

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("/stats", response_model=WorkoutStats)
def workout_stats(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return svc.get_workout_stats(db, current)

@router.get("/week", response_model=list[WorkoutDetail])
def current_week(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return svc.get_current_week_workouts(db, current)

@router.get("/favorites", response_model=list[WorkoutDetail])
def favorites(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return svc.get_favorite_workouts(db, current)

@router.put("/{workout_id}/favorite", status_code=status.HTTP_204_NO_CONTENT)
def set_favorite(
    workout_id: int,
    payload: FavoriteUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    svc.toggle_favorite(db, current, workout_id, payload.is_favorite)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{workout_id}/add-to-week", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def add_to_week(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return svc.add_workout_to_week(db, current, workout_id)

@router.post("/generate", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def generate(payload: WorkoutGenerate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return svc.generate_workout(db, current, payload)

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    svc.delete_workout(db, current, workout_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
