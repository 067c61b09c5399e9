def register(client, **overrides):
    body = {"email": "nina@example.com", "username": "nina", "password": "long-enough"}
    body.update(overrides)
    return client.post("/api/v1/auth/register", json=body)


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_register_and_login(client):
    response = register(client)
    assert response.status_code == 201
    assert response.get_json()["access_token"]

    response = client.post(
        "/api/v1/auth/login",
        json={"email": "nina@example.com", "password": "long-enough"},
    )
    assert response.status_code == 200

    token = response.get_json()["access_token"]
    me = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.get_json()["username"] == "nina"


def test_register_rejects_duplicates_and_weak_input(client):
    register(client)

    assert register(client).status_code == 409
    assert register(client, email="other@example.com", username="Bad Name").status_code == 400
    assert register(client, email="x@example.com", username="xavier", password="short").status_code == 400
    assert client.post("/api/v1/auth/register", json=["ada@example.com"]).status_code == 400
    assert client.post("/api/v1/auth/login", json=["ada@example.com"]).status_code == 400


def test_login_failures(client, user, db):
    bad = client.post("/api/v1/auth/login", json={"email": user.email, "password": "wrong"})
    assert bad.status_code == 401

    user.is_active = False
    db.session.commit()
    disabled = client.post("/api/v1/auth/login", json={"email": user.email, "password": "correct-horse"})
    assert disabled.status_code == 403


def test_refresh_token(client):
    refresh_token = register(client).get_json()["refresh_token"]

    response = client.post(
        "/api/v1/auth/refresh", headers={"Authorization": f"Bearer {refresh_token}"}
    )

    assert response.status_code == 200
    assert response.get_json()["access_token"]


def test_endpoints_require_a_token(client):
    assert client.get("/api/v1/portfolios").status_code == 401


def test_admin_listing_requires_admin_role(client, portfolio, user, admin_user, headers_for):
    assert client.get("/api/v1/admin/portfolios", headers=headers_for(user)).status_code == 403

    response = client.get("/api/v1/admin/portfolios", headers=headers_for(admin_user))
    body = response.get_json()

    assert response.status_code == 200
    assert body["items"][0]["owner"] == "ada"
    assert body["pagination"]["total"] == 1
