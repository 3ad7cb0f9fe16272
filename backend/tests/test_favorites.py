from datetime import datetime, timedelta, timezone

import pytest

from helpers import client, bearer, make_user, add_workout
from fitpartner.db import SessionLocal
from fitpartner.models import DailyWorkout, User
from fitpartner.services import workouts as svc

def _is_favorite(workout_id):
    with SessionLocal() as db:
        return db.get(DailyWorkout, workout_id).is_favorite

def test_toggle_favorite_on_own_workout():
    tok, uid = make_user()
    wid = add_workout(uid)
    r = client.put(f"/workouts/{wid}/favorite", headers=bearer(tok), json={"is_favorite": True})
    assert r.status_code == 204
    assert _is_favorite(wid) is True

    client.put(f"/workouts/{wid}/favorite", headers=bearer(tok), json={"is_favorite": False})
    assert _is_favorite(wid) is False

def test_toggle_favorite_on_someone_elses_workout_is_noop():
    tok, _ = make_user()
    _, other = make_user()
    wid = add_workout(other)
    r = client.put(f"/workouts/{wid}/favorite", headers=bearer(tok), json={"is_favorite": True})
    assert r.status_code == 204
    assert _is_favorite(wid) is False

def test_favorites_include_all_users_sets_newest_first():
    tok, uid = make_user()
    _, friend = make_user()
    first = add_workout(uid, is_favorite=True, title="first",
                        exercises=[("Squat", 2, [(1, True), (1, False, friend)])])
    second = add_workout(uid, is_favorite=True, title="second")
    add_workout(uid, is_favorite=False)

    body = client.get("/workouts/favorites", headers=bearer(tok)).json()
    assert [w["id"] for w in body] == [second, first]
    sets = body[1]["exercises"][0]["exercise_sets"]
    assert {s["user_id"] for s in sets} == {uid, friend}

def test_add_to_week_clones_template():
    tok, uid = make_user()
    old = datetime.now(timezone.utc) - timedelta(days=60)
    template = add_workout(uid, is_favorite=True, completed=True, date=old, title="Legs", exercises=[
        ("Squat", 3, [(1, True), (2, True), (3, True)]),
        ("Lunge", 2, [(1, True)]),
    ])

    r = client.post(f"/workouts/{template}/add-to-week", headers=bearer(tok))
    assert r.status_code == 201, r.text
    clone = r.json()
    assert clone["id"] != template
    assert clone["title"] == "Legs"
    assert clone["duration"] == 45 and clone["difficulty"] == "medium"
    assert clone["completed"] is False and clone["is_favorite"] is False and clone["is_shared"] is False
    assert clone["shared_with"] == []
    assert clone["date"][:10] == datetime.now(timezone.utc).date().isoformat()

    week = client.get("/workouts/week", headers=bearer(tok)).json()
    [copied] = [w for w in week if w["id"] == clone["id"]]
    assert [(e["name"], e["target_sets"]) for e in copied["exercises"]] == [("Squat", 3), ("Lunge", 2)]
    for exercise in copied["exercises"]:
        sets = exercise["exercise_sets"]
        assert [s["set_number"] for s in sets] == list(range(1, exercise["target_sets"] + 1))
        assert all(s["weight"] == 0 and s["reps"] == 0 and s["completed"] is False for s in sets)

def test_add_to_week_unknown_workout_404():
    tok, _ = make_user()
    r = client.post("/workouts/987654321/add-to-week", headers=bearer(tok))
    assert r.status_code == 404
    assert r.json()["detail"] == "Workout not found"

def test_add_to_week_from_another_users_workout():
    tok, uid = make_user()
    _, other = make_user()
    template = add_workout(other, is_favorite=True, title="Borrowed", exercises=[("Row", 2, [(1, True, other)])])

    r = client.post(f"/workouts/{template}/add-to-week", headers=bearer(tok))
    assert r.status_code == 201, r.text
    clone = r.json()
    assert clone["user_id"] == uid
    assert clone["title"] == "Borrowed"

    [copied] = [w for w in client.get("/workouts/week", headers=bearer(tok)).json() if w["id"] == clone["id"]]
    sets = copied["exercises"][0]["exercise_sets"]
    assert [(s["user_id"], s["set_number"]) for s in sets] == [(uid, 1), (uid, 2)]

def test_add_to_week_is_atomic(monkeypatch):
    _, uid = make_user()
    template = add_workout(uid, is_favorite=True, title="Two moves", exercises=[
        ("Squat", 2, []),
        ("Lunge", 2, []),
    ])

    calls = {"n": 0}
    real = svc.SetRepository.create_blank

    def flaky(self, exercise_id, user_id, numbers):
        calls["n"] += 1
        if calls["n"] == 2:
            raise RuntimeError("insert failed")
        return real(self, exercise_id, user_id, numbers)

    monkeypatch.setattr(svc.SetRepository, "create_blank", flaky)
    with SessionLocal() as db:
        user = db.get(User, uid)
        with pytest.raises(RuntimeError):
            svc.add_workout_to_week(db, user, template)

    with SessionLocal() as db:
        assert [w.id for w in db.query(DailyWorkout).filter(DailyWorkout.user_id == uid)] == [template]
