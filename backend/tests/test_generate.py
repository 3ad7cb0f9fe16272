import random
from datetime import datetime

import pytest

from helpers import client, bearer, make_user, add_catalog, uniq_group
from fitpartner.db import SessionLocal
from fitpartner.models import DailyWorkout, User
from fitpartner.schemas.workout import WorkoutGenerate
from fitpartner.services import workouts as svc

def _request(workout_type, parts, **extra):
    return {"workoutType": workout_type, "difficulty": "hard",
            "exercises": [{"bodyPart": p} for p in parts], **extra}

def _week_workout(tok, workout_id):
    week = client.get("/workouts/week", headers=bearer(tok)).json()
    [w] = [w for w in week if w["id"] == workout_id]
    return w

def test_title_lists_distinct_body_parts_in_order():
    tok, _ = make_user()
    chest, back = uniq_group("chest"), uniq_group("back")
    add_catalog(chest, ["Bench", "Fly", "Dip"])
    add_catalog(back, ["Row", "Pulldown"])

    r = client.post("/workouts/generate", headers=bearer(tok), json=_request("strength", [chest, back, chest]))
    assert r.status_code == 201, r.text
    workout = r.json()
    today = datetime.now().astimezone()
    assert workout["title"] == f"{chest}/{back} ({today.month}/{today.day}/{today:%y})"
    assert workout["workout_type"] == "strength"
    assert workout["difficulty"] == "hard"
    assert workout["duration"] == 1
    assert workout["completed"] is False and workout["is_favorite"] is False
    assert workout["is_shared"] is False and workout["shared_with"] == []

    exercises = _week_workout(tok, workout["id"])["exercises"]
    # chest was asked for twice, so it is picked twice
    assert len(exercises) == 6
    for ex in exercises:
        assert 3 <= ex["target_sets"] <= 5
        assert ex["target_reps"] == "6-12"
        assert ex["notes"] == "Equipment: Barbell, Grip: Any"
        assert [s["set_number"] for s in ex["exercise_sets"]] == list(range(1, ex["target_sets"] + 1))
        assert all(s["weight"] == 0 and s["reps"] == 0 and not s["completed"] for s in ex["exercise_sets"])

def test_non_strength_uses_endurance_ranges_and_sharing():
    tok, _ = make_user()
    _, friend = make_user()
    legs = uniq_group("legs")
    add_catalog(legs, ["Squat"], equipment="Dumbbell", grip="Neutral")

    r = client.post("/workouts/generate", headers=bearer(tok), json=_request(
        "hypertrophy", [legs], sharing={"isShared": True, "sharedWith": [friend]},
    ))
    assert r.status_code == 201, r.text
    workout = r.json()
    assert workout["is_shared"] is True and workout["shared_with"] == [friend]

    [ex] = _week_workout(tok, workout["id"])["exercises"]
    assert ex["name"] == "Squat"
    assert 2 <= ex["target_sets"] <= 3
    assert ex["target_reps"] == "12-15"
    assert ex["notes"] == "Equipment: Dumbbell, Grip: Neutral"

def test_unknown_body_part_fails_without_creating_anything():
    tok, uid = make_user()
    known, missing = uniq_group("arms"), uniq_group("nothing")
    add_catalog(known, ["Curl"])

    r = client.post("/workouts/generate", headers=bearer(tok), json=_request("strength", [known, missing]))
    assert r.status_code == 404
    assert r.json()["detail"] == f"No exercises found for {missing}"
    with SessionLocal() as db:
        assert db.query(DailyWorkout).filter(DailyWorkout.user_id == uid).count() == 0

def test_validation():
    tok, _ = make_user()
    assert client.post("/workouts/generate", headers=bearer(tok),
                       json={"workoutType": "strength", "difficulty": "brutal",
                             "exercises": [{"bodyPart": "x"}]}).status_code == 422
    assert client.post("/workouts/generate", headers=bearer(tok),
                       json={"workoutType": "strength", "difficulty": "easy",
                             "exercises": []}).status_code == 422

def test_requires_auth():
    assert client.post("/workouts/generate", json=_request("strength", ["chest"])).status_code == 401

def test_pick_exercises_takes_two_shuffled_candidates():
    group = uniq_group("core")
    add_catalog(group, ["Plank", "Crunch", "Dead bug", "Hollow hold"])
    with SessionLocal() as db:
        picked = svc.pick_exercises(db, [group], svc.STRENGTH_RANGE, random.Random(7))
    assert len(picked) == 2
    assert len({p.name for p in picked}) == 2
    assert all(p.name in {"Plank", "Crunch", "Dead bug", "Hollow hold"} for p in picked)
    assert all(3 <= p.target_sets <= 5 for p in picked)

def test_generation_is_atomic(monkeypatch):
    _, uid = make_user()
    group = uniq_group("glutes")
    add_catalog(group, ["Hip thrust", "Bridge"])

    calls = {"n": 0}
    real = svc.SetRepository.create_blank

    def flaky(self, exercise_id, user_id, numbers):
        calls["n"] += 1
        if calls["n"] == 2:
            raise RuntimeError("insert failed")
        return real(self, exercise_id, user_id, numbers)

    monkeypatch.setattr(svc.SetRepository, "create_blank", flaky)
    request = WorkoutGenerate.model_validate(_request("strength", [group]))
    with SessionLocal() as db:
        user = db.get(User, uid)
        with pytest.raises(RuntimeError):
            svc.generate_workout(db, user, request)

    with SessionLocal() as db:
        assert db.query(DailyWorkout).filter(DailyWorkout.user_id == uid).count() == 0

def test_repeated_body_part_is_picked_again():
    tok, _ = make_user()
    chest = uniq_group("chest")
    add_catalog(chest, ["Bench", "Fly", "Dip", "Pushup"])

    r = client.post("/workouts/generate", headers=bearer(tok), json=_request("strength", [chest, chest]))
    assert r.status_code == 201, r.text
    assert r.json()["title"].startswith(f"{chest} (")
    assert len(_week_workout(tok, r.json()["id"])["exercises"]) == 4
