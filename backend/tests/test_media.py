import io
import os

from portfolio_builder.utils.media import media_path


def upload(client, portfolio, kind, headers, file):
    return client.post(
        f"/api/v1/portfolios/{portfolio.id}/media/{kind}",
        data={"file": file},
        headers=headers,
        content_type="multipart/form-data",
    )


def test_upload_sets_content_field_and_is_served(client, auth_headers, portfolio, png_upload):
    response = upload(client, portfolio, "hero_image", auth_headers, png_upload())
    body = response.get_json()

    assert response.status_code == 201
    assert body["field"] == "hero_image_url"
    assert body["url"].startswith(f"/media/portfolio-media/{portfolio.id}/")
    assert body["url"].endswith(".png")

    stored = client.get(f"/api/v1/portfolios/{portfolio.id}", headers=auth_headers).get_json()
    assert stored["content"]["hero_image_url"] == body["url"]

    served = client.get(body["url"])
    assert served.status_code == 200
    assert served.data.startswith(b"\x89PNG")


def test_replacing_media_removes_old_file(app, client, auth_headers, portfolio, png_upload):
    first = upload(client, portfolio, "profile_photo", auth_headers, png_upload()).get_json()["url"]
    second = upload(client, portfolio, "profile_photo", auth_headers, png_upload()).get_json()["url"]

    assert first != second
    assert not os.path.exists(media_path(first))
    assert os.path.exists(media_path(second))


def test_upload_falls_back_to_second_bucket(app, client, auth_headers, portfolio, png_upload):
    root = app.config["UPLOAD_ROOT"]
    os.makedirs(root, exist_ok=True)
    # A plain file where the primary bucket directory should be
    with open(os.path.join(root, app.config["MEDIA_PRIMARY_BUCKET"]), "w") as blocker:
        blocker.write("")

    response = upload(client, portfolio, "hero_image", auth_headers, png_upload())

    assert response.status_code == 201
    assert response.get_json()["url"].startswith("/media/public/")


def test_upload_only_returns_url_for_collection_media(client, auth_headers, portfolio):
    response = upload(
        client, portfolio, "audio", auth_headers, (io.BytesIO(b"ID3fake"), "song.mp3")
    )

    assert response.status_code == 201
    assert set(response.get_json()) == {"url"}


def test_rejected_uploads(client, auth_headers, portfolio):
    assert upload(
        client, portfolio, "hero_image", auth_headers, (io.BytesIO(b"MZ"), "tool.exe")
    ).status_code == 400
    assert upload(
        client, portfolio, "resume", auth_headers, (io.BytesIO(b"x"), "cv.png")
    ).status_code == 400
    assert upload(
        client, portfolio, "avatar", auth_headers, (io.BytesIO(b"x"), "a.png")
    ).status_code == 400


def test_media_paths_stay_inside_upload_root(app):
    assert media_path("/media/../../etc/passwd") is None
    assert media_path("https://cdn.example.com/a.png") is None
    assert media_path(None) is None


def test_missing_media_is_404(client):
    assert client.get("/media/portfolio-media/nope/missing.png").status_code == 404
