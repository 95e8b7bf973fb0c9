def test_register_and_login_scenario(client):
    res = client.post(
        "/api/users/register",
        json={"name": "alice", "email": "a@x.com", "password": "pw123456"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["ok"] is True
    user_id = body["data"]["user_id"]
    assert isinstance(user_id, int)

    res = client.post("/api/users/login", json={"email": "a@x.com", "password": "pw123456"})
    assert res.status_code == 200
    user = res.json()["data"]
    assert user["user_id"] == user_id
    assert user["name"] == "alice"
    assert "password" not in user
    assert "password_hash" not in user

    res = client.post("/api/users/login", json={"email": "a@x.com", "password": "wrong"})
    assert res.status_code == 401
    assert res.json() == {"ok": False, "error": "Invalid email or password"}


def test_register_with_bio(client):
    res = client.post(
        "/api/users/register",
        json={"name": "bob", "email": "b@x.com", "password": "pw", "bio": "hi there"},
    )
    user_id = res.json()["data"]["user_id"]
    profile = client.get(f"/api/users/{user_id}").json()["data"]
    assert profile["bio"] == "hi there"


def test_register_missing_fields(client):
    res = client.post("/api/users/register", json={"name": "alice", "email": "a@x.com"})
    assert res.status_code == 400
    assert res.json() == {"ok": False, "error": "password required"}

    res = client.post("/api/users/register", json={"name": "", "email": "a@x.com", "password": "pw"})
    assert res.status_code == 400
    assert res.json()["error"] == "name required"


def test_register_duplicate_email(client):
    payload = {"name": "alice", "email": "a@x.com", "password": "pw123456"}
    assert client.post("/api/users/register", json=payload).status_code == 201
    res = client.post("/api/users/register", json=payload)
    assert res.status_code == 400
    assert res.json()["error"] == "Email already registered"


def test_login_unknown_email_and_missing_fields(client):
    res = client.post("/api/users/login", json={"email": "nobody@x.com", "password": "pw"})
    assert res.status_code == 401

    res = client.post("/api/users/login", json={"email": "a@x.com"})
    assert res.status_code == 400
    assert res.json()["error"] == "password required"


def test_change_password(client, make_user):
    user_id = make_user("carol", password="old-secret")
    email = client.get(f"/api/users/{user_id}").json()["data"]["email"]

    res = client.post(
        "/api/users/change-password",
        json={"user_id": user_id, "oldPassword": "old-secret", "newPassword": "new-secret"},
    )
    assert res.status_code == 200
    assert res.json()["ok"] is True

    assert client.post("/api/users/login", json={"email": email, "password": "old-secret"}).status_code == 401
    assert client.post("/api/users/login", json={"email": email, "password": "new-secret"}).status_code == 200


def test_change_password_failures(client, make_user):
    user_id = make_user(password="secret")

    res = client.post(
        "/api/users/change-password",
        json={"user_id": user_id, "oldPassword": "nope", "newPassword": "x"},
    )
    assert res.status_code == 401

    res = client.post(
        "/api/users/change-password",
        json={"user_id": 9999, "oldPassword": "secret", "newPassword": "x"},
    )
    assert res.status_code == 404
    assert res.json()["error"] == "User not found"

    res = client.post("/api/users/change-password", json={"user_id": user_id, "oldPassword": "secret"})
    assert res.status_code == 400
    assert res.json()["error"] == "newPassword required"


def test_search(client, make_user):
    make_user("alice")
    make_user("malik")
    make_user("bob")

    assert client.get("/api/users/search").json()["data"] == []
    assert client.get("/api/users/search", params={"keyword": "   "}).json()["data"] == []

    names = {u["name"] for u in client.get("/api/users/search", params={"keyword": "li"}).json()["data"]}
    assert names == {"alice", "malik"}


def test_search_caps_results(client, make_user):
    for i in range(25):
        make_user(f"member{i}")
    res = client.get("/api/users/search", params={"keyword": "member"})
    assert len(res.json()["data"]) == 20


def test_get_profile(client, make_user):
    user_id = make_user("dave")
    res = client.get(f"/api/users/{user_id}")
    assert res.status_code == 200
    data = res.json()["data"]
    assert set(data) == {"user_id", "name", "email", "bio", "created_at"}
    assert data["name"] == "dave"

    res = client.get("/api/users/424242")
    assert res.status_code == 404
    assert res.json() == {"ok": False, "error": "User not found"}


def test_search_treats_wildcards_literally(client, make_user):
    make_user("alice")
    make_user("bob")
    make_user("a_b")

    names = [u["name"] for u in client.get("/api/users/search", params={"keyword": "_"}).json()["data"]]
    assert names == ["a_b"]
    assert client.get("/api/users/search", params={"keyword": "%"}).json()["data"] == []


def test_login_with_malformed_email_is_auth_error(client, make_user):
    make_user("erin")
    res = client.post("/api/users/login", json={"email": "nobody", "password": "pw123456"})
    assert res.status_code == 401
    assert res.json() == {"ok": False, "error": "Invalid email or password"}


def test_register_duplicate_email_caught_by_unique_index(client, monkeypatch):
    from micro_sns.services import auth_service

    async def _no_existing_user(db, email):
        return None

    # Simulates a concurrent registration slipping past the lookup
    monkeypatch.setattr(auth_service, "get_user_by_email", _no_existing_user)
    payload = {"name": "frank", "email": "f@x.com", "password": "pw123456"}
    assert client.post("/api/users/register", json=payload).status_code == 201

    res = client.post("/api/users/register", json=payload)
    assert res.status_code == 400
    assert res.json() == {"ok": False, "error": "Email already registered"}
