from helpers import client, register, login, bearer, uniq_email, uniq_username, PWD

def test_register_weak_password_rejected():
    r = client.post("/auth/register", json={
        "email": uniq_email(), "password": "short", "name": "Weak", "username": uniq_username(),
    })
    assert r.status_code == 422

def test_register_requires_username():
    r = client.post("/auth/register", json={"email": uniq_email(), "password": PWD, "name": "No Handle"})
    assert r.status_code == 422

def test_register_login_and_me():
    email = uniq_email()
    r = register(email, name="Ok")
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["email"] == email
    assert created["height"] == 172.5
    assert "password_hash" not in created

    r = client.post("/auth/login", json={"email": email, "password": PWD})
    assert r.status_code == 200
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["id"] == created["id"]

    me = client.get("/auth/me", headers=bearer(body["access_token"]))
    assert me.status_code == 200
    assert me.json()["auth_id"] == created["auth_id"]
    assert me.json()["name"] == "Ok"

def test_me_without_token_is_null():
    r = client.get("/auth/me")
    assert r.status_code == 200
    assert r.json() is None

def test_session_roundtrip():
    email = uniq_email()
    register(email)
    tok = login(email)

    assert client.get("/auth/session").json() is None

    r = client.get("/auth/session", headers=bearer(tok))
    assert r.status_code == 200
    body = r.json()
    assert body["access_token"] == tok
    assert body["token_type"] == "bearer"
    assert body["user_id"] == client.get("/auth/me", headers=bearer(tok)).json()["auth_id"]

def test_duplicate_email_rejected():
    e = uniq_email()
    assert register(e).status_code == 201
    r = register(e.upper())
    assert r.status_code == 400
    assert "already" in r.json()["detail"]

def test_login_unknown_email_401():
    r = client.post("/auth/login", json={"email": uniq_email(), "password": PWD})
    assert r.status_code == 401

def test_login_wrong_password_401():
    e = uniq_email()
    register(e)
    r = client.post("/auth/login", json={"email": e, "password": "WrongPass123!"})
    assert r.status_code == 401
    assert r.json()["detail"] == "invalid credentials"
