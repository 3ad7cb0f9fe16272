# shared helpers for the API tests
import uuid
from datetime import datetime, timezone

from fastapi.testclient import TestClient

from fitpartner.main import app
from fitpartner.db import SessionLocal
from fitpartner.models import (
    AvailableExercise,
    DailyWorkout,
    ExerciseSet,
    PartnerStatus,
    WorkoutExercise,
    WorkoutPartner,
)

client = TestClient(app)
PWD = "StrongPassw0rd!"

def uniq_email(prefix="u"):
    return f"{prefix}-{uuid.uuid4().hex[:10]}@ex.com"

def uniq_username():
    return f"user_{uuid.uuid4().hex[:10]}"

def register(email=None, *, name="Test", username=None, password=PWD):
    email = email or uniq_email()
    return client.post("/auth/register", json={
        "email": email,
        "password": password,
        "name": name,
        "username": username or uniq_username(),
        "height": 172.5,
        "weight": 70,
    })

def login(email, password=PWD):
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["access_token"]

def bearer(token):
    return {"Authorization": f"Bearer {token}"}

def make_user(name="Test"):
    """Register + login; returns (token, profile id)."""
    email = uniq_email()
    r = register(email, name=name)
    assert r.status_code == 201, r.text
    return login(email), r.json()["id"]

def add_workout(user_id, *, completed=False, is_favorite=False, date=None, title="Test workout", exercises=()):
    """
    exercises: iterable of (name, target_sets, sets) where sets is a list of
    (set_number, completed) or (set_number, completed, owner_id).
    Returns the workout id.
    """
    with SessionLocal() as db:
        w = DailyWorkout(
            user_id=user_id,
            title=title,
            workout_type="strength",
            duration=45,
            difficulty="medium",
            date=date or datetime.now(timezone.utc),
            completed=completed,
            is_favorite=is_favorite,
            is_shared=False,
            shared_with=[],
        )
        for name, target_sets, sets in exercises:
            ex = WorkoutExercise(name=name, target_sets=target_sets, target_reps="8-10", notes="n")
            for spec in sets:
                number, done = spec[0], spec[1]
                owner = spec[2] if len(spec) > 2 else user_id
                ex.exercise_sets.append(
                    ExerciseSet(user_id=owner, set_number=number, weight=20, reps=8, completed=done)
                )
            w.exercises.append(ex)
        db.add(w)
        db.commit()
        return w.id

def add_partner(user_id, partner_id, status=PartnerStatus.accepted):
    with SessionLocal() as db:
        db.add(WorkoutPartner(user_id=user_id, partner_id=partner_id, status=status))
        db.commit()

def add_catalog(group, names, *, equipment="Barbell", grip=None):
    with SessionLocal() as db:
        db.add_all([
            AvailableExercise(name=n, main_muscle_group=group, primary_equipment=equipment, grip_style=grip)
            for n in names
        ])
        db.commit()

def uniq_group(label="grp"):
    return f"{label}-{uuid.uuid4().hex[:6]}"
