import pytest


def url(portfolio, suffix=""):
    return f"/api/v1/portfolios/{portfolio.id}{suffix}"


@pytest.fixture
def add_track(client, auth_headers, portfolio):
    def factory(title, **fields):
        body = {"title": title, "audio_url": f"/media/portfolio-media/{portfolio.id}/{title}.mp3"}
        body.update(fields)
        response = client.post(url(portfolio, "/tracks"), json=body, headers=auth_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return factory


def test_tracks_are_appended_in_order(add_track):
    first = add_track("opening", duration=215, release_date="2024-05-01")
    second = add_track("interlude")

    assert (first["order"], second["order"]) == (0, 1)
    assert first["release_date"] == "2024-05-01"
    assert first["is_published"] is True


@pytest.mark.parametrize("body", [
    {"title": "No audio"},
    {"title": "Bad duration", "audio_url": "/media/a.mp3", "duration": -1},
    {"title": "Bad date", "audio_url": "/media/a.mp3", "release_date": "May 1st"},
    {"title": "Bad url", "audio_url": "file:///etc/passwd"},
])
def test_invalid_tracks(client, auth_headers, portfolio, body):
    response = client.post(url(portfolio, "/tracks"), json=body, headers=auth_headers)

    assert response.status_code == 400


def test_update_track(client, auth_headers, add_track):
    track = add_track("opening")

    response = client.put(
        f"/api/v1/tracks/{track['id']}",
        json={"title": "Opening Theme", "lyrics": "la la"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.get_json()["title"] == "Opening Theme"


def test_reorder_tracks(client, auth_headers, portfolio, add_track):
    first = add_track("one")
    second = add_track("two")

    response = client.post(
        url(portfolio, "/tracks/reorder"),
        json={"ids": [second["id"], first["id"]]},
        headers=auth_headers,
    )

    assert [t["id"] for t in response.get_json()["items"]] == [second["id"], first["id"]]
    listing = client.get(url(portfolio, "/tracks"), headers=auth_headers).get_json()
    assert [t["title"] for t in listing["items"]] == ["two", "one"]


def test_reorder_requires_a_list(client, auth_headers, portfolio):
    response = client.post(url(portfolio, "/tracks/reorder"), json={"ids": "one"}, headers=auth_headers)

    assert response.status_code == 400


@pytest.mark.parametrize("suffix", ["/tracks", "/tracks/reorder", "/gallery", "/gallery/reorder"])
def test_collection_routes_reject_non_object_bodies(client, auth_headers, portfolio, suffix):
    response = client.post(url(portfolio, suffix), json=["one", "two"], headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid request body"}


def test_delete_track_compacts_order(client, auth_headers, portfolio, add_track):
    first = add_track("one")
    add_track("two")

    assert client.delete(f"/api/v1/tracks/{first['id']}", headers=auth_headers).status_code == 200

    listing = client.get(url(portfolio, "/tracks"), headers=auth_headers).get_json()
    assert [(t["title"], t["order"]) for t in listing["items"]] == [("two", 0)]


def test_unpublished_tracks_stay_off_the_page(client, auth_headers, portfolio, add_track):
    add_track("public")
    add_track("demo", is_published=False)
    client.patch(url(portfolio), json={"hero_title": "Nina"}, headers=auth_headers)
    client.post(url(portfolio, "/publish"), headers=auth_headers)

    page = client.get("/api/v1/public/ada/main").get_json()
    tracks = next(s for s in page["sections"] if s["id"] == "tracks")

    assert [t["title"] for t in tracks["content"]["tracks"]] == ["public"]


def test_other_owners_cannot_touch_tracks(client, add_track, other_user, headers_for):
    track = add_track("mine")

    response = client.put(
        f"/api/v1/tracks/{track['id']}", json={"title": "theirs"}, headers=headers_for(other_user)
    )

    assert response.status_code == 404


def test_gallery_crud(client, auth_headers, portfolio):
    created = client.post(
        url(portfolio, "/gallery"),
        json={"image_url": "https://cdn.example.com/stage.jpg", "title": "On stage"},
        headers=auth_headers,
    )
    item = created.get_json()

    assert created.status_code == 201
    assert item["type"] == "photo"

    updated = client.put(
        f"/api/v1/gallery/{item['id']}", json={"type": "video"}, headers=auth_headers
    )
    assert updated.get_json()["type"] == "video"

    assert client.put(
        f"/api/v1/gallery/{item['id']}", json={"type": "gif"}, headers=auth_headers
    ).status_code == 400

    assert client.delete(f"/api/v1/gallery/{item['id']}", headers=auth_headers).status_code == 200
    assert client.get(url(portfolio, "/gallery"), headers=auth_headers).get_json()["items"] == []


def test_gallery_requires_image(client, auth_headers, portfolio):
    response = client.post(url(portfolio, "/gallery"), json={"title": "x"}, headers=auth_headers)

    assert response.status_code == 400
