def url(portfolio, suffix=""):
    return f"/api/v1/portfolios/{portfolio.id}{suffix}"


def stored_config(client, portfolio, headers):
    return client.get(url(portfolio), headers=headers).get_json()["sections_config"]


def test_manifest(client):
    body = client.get("/api/v1/sections/manifest").get_json()
    by_id = {section["id"]: section for section in body["sections"]}

    assert body["home_section"] == "hero"
    assert len(body["sections"]) == 14
    assert by_id["tracks"]["default_view_options"] == {"view_type": "grid", "audio_player_mode": "bottom"}
    assert by_id["resume"]["default_enabled"] is False


def test_section_list_starts_from_defaults(client, auth_headers, portfolio):
    body = client.get(url(portfolio, "/sections"), headers=auth_headers).get_json()

    assert len(body["sections"]) == 14
    assert body["order"][:3] == ["hero", "about", "tracks"]
    assert "testimonials" not in body["order"]


def test_configure_section(client, auth_headers, portfolio):
    response = client.put(
        url(portfolio, "/sections/about"),
        json={"title": "My Journey", "view_type": "centered"},
        headers=auth_headers,
    )
    about = next(s for s in response.get_json()["sections"] if s["id"] == "about")

    assert response.status_code == 200
    assert about["title"] == "My Journey"
    assert about["name"] == "About Me"
    assert about["view_options"] == {"view_type": "centered"}
    assert stored_config(client, portfolio, auth_headers) == {
        "about": {"title": "My Journey", "view_type": "centered"}
    }


def test_enable_and_disable_sections(client, auth_headers, portfolio):
    client.put(url(portfolio, "/sections/resume"), json={"enabled": True}, headers=auth_headers)
    client.put(url(portfolio, "/sections/hobbies"), json={"enabled": False}, headers=auth_headers)

    order = client.get(url(portfolio, "/sections"), headers=auth_headers).get_json()["order"]
    config = stored_config(client, portfolio, auth_headers)

    assert "resume" in order
    assert "hobbies" not in order
    assert config["resume"]["user_manually_enabled"] is True
    assert config["hobbies"]["user_manually_disabled"] is True


def test_section_edits_that_are_rejected(client, auth_headers, portfolio):
    def put(section_id, body):
        return client.put(url(portfolio, f"/sections/{section_id}"), json=body, headers=auth_headers)

    assert put("hero", {"enabled": False}).status_code == 400
    assert put("legacy_widget", {"enabled": True}).status_code == 400
    assert put("about", {"order": 0}).status_code == 400
    assert put("about", {"enabled": "yes"}).status_code == 400
    assert put("about", {}).status_code == 400
    assert stored_config(client, portfolio, auth_headers) == {}


def test_reorder(client, auth_headers, portfolio):
    response = client.post(
        url(portfolio, "/sections/reorder"),
        json={"section_id": "tracks", "new_index": 0},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.get_json()["order"][:3] == ["tracks", "hero", "about"]
    assert stored_config(client, portfolio, auth_headers)["tracks"]["order"] == 0


def test_reorder_of_disabled_section_is_not_saved(client, auth_headers, portfolio):
    response = client.post(
        url(portfolio, "/sections/reorder"),
        json={"section_id": "testimonials", "new_index": 0},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.get_json()["order"][0] == "hero"
    assert stored_config(client, portfolio, auth_headers) == {}


def test_reorder_validates_body(client, auth_headers, portfolio):
    endpoint = url(portfolio, "/sections/reorder")

    assert client.post(endpoint, json=["tracks", 0], headers=auth_headers).status_code == 400
    assert client.post(endpoint, json={"section_id": "tracks"}, headers=auth_headers).status_code == 400
    assert client.post(
        endpoint, json={"section_id": "tracks", "new_index": "first"}, headers=auth_headers
    ).status_code == 400


def test_legacy_list_config_is_read(client, auth_headers, portfolio, db):
    portfolio.sections_config = ["tracks", "hero"]
    db.session.commit()

    body = client.get(url(portfolio, "/sections"), headers=auth_headers).get_json()

    assert body["order"] == ["tracks", "hero"]


def test_preview_matches_public_page(client, auth_headers, portfolio):
    client.patch(url(portfolio), json={"hero_title": "Nina Sound"}, headers=auth_headers)
    client.put(url(portfolio, "/sections/about"), json={"title": "My Journey"}, headers=auth_headers)
    client.post(
        url(portfolio, "/sections/reorder"),
        json={"section_id": "about", "new_index": 0},
        headers=auth_headers,
    )
    client.post(url(portfolio, "/publish"), headers=auth_headers)

    preview = client.get(url(portfolio, "/preview"), headers=auth_headers).get_json()
    public = client.get("/api/v1/public/ada/main").get_json()

    assert preview["surface"] == "preview"
    assert public["surface"] == "public"
    assert all("edit" in section for section in preview["sections"])
    assert [
        {k: v for k, v in section.items() if k != "edit"} for section in preview["sections"]
    ] == public["sections"]
    assert public["sections"][0]["title"] == "My Journey"
    assert public["portfolio"]["username"] == "ada"


def test_public_page_requires_publication(client, portfolio):
    assert client.get("/api/v1/public/ada/main").status_code == 404
    assert client.get("/api/v1/public/nobody/main").status_code == 404
