from fitpartner.models.auth_identity import AuthIdentity
from fitpartner.models.revoked_token import RevokedToken
from fitpartner.models.user import User
from fitpartner.models.workout_partner import WorkoutPartner, PartnerStatus
from fitpartner.models.daily_workout import DailyWorkout
from fitpartner.models.workout_exercise import WorkoutExercise
from fitpartner.models.exercise_set import ExerciseSet
from fitpartner.models.available_exercise import AvailableExercise

__all__ = [
    "AuthIdentity",
    "RevokedToken",
    "User",
    "WorkoutPartner",
    "PartnerStatus",
    "DailyWorkout",
    "WorkoutExercise",
    "ExerciseSet",
    "AvailableExercise",
]
