def _ids(res):
    return [p["post_id"] for p in res.json()["data"]]


def test_create_post(client, make_user):
    user_id = make_user()
    res = client.post("/api/posts", json={"user_id": user_id, "content": "hi"})
    assert res.status_code == 201
    assert isinstance(res.json()["data"]["post_id"], int)


def test_create_post_validation(client, make_user):
    user_id = make_user()
    res = client.post("/api/posts", json={"user_id": user_id})
    assert res.status_code == 400
    assert res.json()["error"] == "content required"

    res = client.post("/api/posts", json={"content": "hi"})
    assert res.status_code == 400

    res = client.post("/api/posts", json={"user_id": 777, "content": "hi"})
    assert res.status_code == 404
    assert res.json()["error"] == "User not found"


def test_list_posts_newest_first_with_like_count(client, make_user, make_post):
    alice = make_user("alice")
    bob = make_user("bob")
    first = make_post(alice, "first")
    second = make_post(bob, "second")
    client.post("/api/likes", json={"user_id": bob, "post_id": first})
    client.post("/api/likes", json={"user_id": alice, "post_id": first})

    posts = client.get("/api/posts").json()["data"]
    assert [p["post_id"] for p in posts] == [second, first]
    by_id = {p["post_id"]: p for p in posts}
    assert by_id[first]["like_count"] == 2
    assert by_id[second]["like_count"] == 0
    assert by_id[first]["author"] == "alice"
    assert by_id[first]["author_id"] == alice


def test_list_posts_by_user(client, make_user, make_post):
    alice = make_user()
    bob = make_user()
    a1 = make_post(alice)
    make_post(bob)
    a2 = make_post(alice)

    assert _ids(client.get(f"/api/posts/user/{alice}")) == [a2, a1]
    assert _ids(client.get("/api/posts/user/999")) == []


def test_get_single_post(client, make_user, make_post):
    alice = make_user("alice")
    post_id = make_post(alice, "hello world")

    res = client.get(f"/api/posts/{post_id}")
    assert res.status_code == 200
    post = res.json()["data"]
    assert post["content"] == "hello world"
    assert post["author"] == "alice"
    assert post["updated_at"] is None

    res = client.get("/api/posts/31337")
    assert res.status_code == 200
    assert res.json()["data"] is None


def test_update_post(client, make_user, make_post):
    post_id = make_post(make_user(), "draft")

    res = client.put(f"/api/posts/{post_id}", json={"content": "final"})
    assert res.status_code == 200
    assert res.json()["data"] == {"affectedRows": 1}
    post = client.get(f"/api/posts/{post_id}").json()["data"]
    assert post["content"] == "final"
    assert post["updated_at"] is not None

    res = client.put("/api/posts/5555", json={"content": "x"})
    assert res.json()["data"] == {"affectedRows": 0}

    res = client.put(f"/api/posts/{post_id}", json={})
    assert res.status_code == 400
    assert res.json()["error"] == "content required"


def test_delete_post(client, make_user, make_post):
    post_id = make_post(make_user())
    res = client.delete(f"/api/posts/{post_id}")
    assert res.json()["data"] == {"affectedRows": 1}
    assert client.get(f"/api/posts/{post_id}").json()["data"] is None


def test_delete_missing_post_is_not_an_error(client):
    res = client.delete("/api/posts/8080")
    assert res.status_code == 200
    assert res.json() == {"ok": True, "data": {"affectedRows": 0}, "error": None}


def test_delete_post_removes_comments_and_likes(client, make_user, make_post):
    alice = make_user()
    bob = make_user()
    post_id = make_post(alice)
    client.post("/api/comments", json={"post_id": post_id, "user_id": bob, "content": "nice"})
    client.post("/api/likes", json={"user_id": bob, "post_id": post_id})

    client.delete(f"/api/posts/{post_id}")

    assert client.get(f"/api/comments/by-post/{post_id}").json()["data"] == []
    assert client.get(f"/api/likes/count/{post_id}").json()["data"] == {"like_count": 0}
    assert client.get(f"/api/likes/by-user/{bob}").json()["data"] == []


def test_feed_contains_exactly_followed_authors(client, make_user, make_post):
    reader = make_user()
    b = make_user()
    c = make_user()
    stranger = make_user()

    assert client.get(f"/api/posts/feed/{reader}").json()["data"] == []

    client.post("/api/follows", json={"follower_id": reader, "following_id": b})
    client.post("/api/follows", json={"follower_id": reader, "following_id": c})

    b1 = make_post(b)
    make_post(stranger)
    c1 = make_post(c)
    make_post(reader)
    b2 = make_post(b)

    feed = client.get(f"/api/posts/feed/{reader}").json()["data"]
    assert [p["post_id"] for p in feed] == [b2, c1, b1]
    assert {p["author_id"] for p in feed} == {b, c}


def test_trending_orders_by_likes(client, make_user, make_post):
    users = [make_user() for _ in range(3)]
    quiet = make_post(users[0])
    popular = make_post(users[0])
    medium = make_post(users[1])
    for u in users:
        client.post("/api/likes", json={"user_id": u, "post_id": popular})
    client.post("/api/likes", json={"user_id": users[2], "post_id": medium})

    trending = client.get("/api/posts/trending").json()["data"]
    assert [p["post_id"] for p in trending] == [popular, medium, quiet]
    assert [p["like_count"] for p in trending] == [3, 1, 0]
