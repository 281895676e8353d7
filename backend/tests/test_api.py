"""HTTP surface: identity, validation, ownership errors and image handling."""

from __future__ import annotations

import json

from closet.models import Outfit, OutfitPiece, User

from tests.factories import ALICE, BOB, identity

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def _create_piece(client, user=ALICE, **overrides):
    data = {"name": "Striped tee", "category": "Top", "color": "Blue", "season": "Summer"}
    data.update(overrides)
    response = client.post("/api/pieces", data=data, headers=identity(user))
    assert response.status_code == 201, response.text
    return response.json()


def test_requests_without_identity_are_rejected(client) -> None:
    response = client.get("/api/pieces")

    assert response.status_code == 401
    assert response.json()["error_code"] == "AUTHENTICATION_ERROR"


def test_first_request_creates_the_user(client, db) -> None:
    headers = {**identity("carol"), "X-User-Email": "carol@example.com", "X-User-First-Name": "Carol"}

    response = client.get("/api/auth/user", headers=headers)

    assert response.status_code == 200
    assert response.json()["email"] == "carol@example.com"
    assert response.json()["first_name"] == "Carol"
    assert db.query(User).filter(User.id == "carol").count() == 1


def test_enums_endpoint_lists_fixed_values(client) -> None:
    body = client.get("/api/enums").json()

    assert len(body["categories"]) == 8
    assert len(body["colors"]) == 13
    assert body["seasons"] == ["Spring", "Summer", "Fall", "Winter"]
    assert len(body["tags"]) == 10


def test_create_piece_with_tags_and_image(client, static_dir) -> None:
    response = client.post(
        "/api/pieces",
        data={"name": "Denim jacket", "category": "Jacket", "color": "Blue", "season": "Fall",
              "tags": json.dumps(["casual", "not-in-vocabulary"])},
        files={"image": ("jacket.png", PNG, "image/png")},
        headers=identity(),
    )

    assert response.status_code == 201, response.text
    piece = response.json()
    assert piece["tags"] == ["casual", "not-in-vocabulary"]
    assert piece["image_path"].startswith("/static/pieces/")
    stored = static_dir / "pieces" / piece["image_path"].rsplit("/", 1)[-1]
    assert stored.read_bytes() == PNG


def test_create_piece_rejects_unknown_category(client) -> None:
    response = client.post(
        "/api/pieces",
        data={"name": "Cape", "category": "Cape", "color": "Red", "season": "Fall"},
        headers=identity(),
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert body["details"]["field"] == "category"


def test_create_piece_requires_name(client) -> None:
    response = client.post(
        "/api/pieces",
        data={"category": "Top", "color": "Red", "season": "Fall"},
        headers=identity(),
    )

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "name"


def test_create_piece_rejects_malformed_tags(client) -> None:
    response = client.post(
        "/api/pieces",
        data={"name": "Tee", "category": "Top", "color": "Red", "season": "Fall", "tags": "casual,comfy"},
        headers=identity(),
    )

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "tags"


def test_pieces_are_invisible_to_other_users(client) -> None:
    piece = _create_piece(client)

    assert client.get(f"/api/pieces/{piece['id']}", headers=identity(BOB)).status_code == 404
    assert client.patch(f"/api/pieces/{piece['id']}", data={"name": "Mine now"}, headers=identity(BOB)).status_code == 404
    assert client.delete(f"/api/pieces/{piece['id']}", headers=identity(BOB)).status_code == 404
    assert client.get("/api/pieces", headers=identity(BOB)).json() == []


def test_patch_piece_ignores_blank_fields(client) -> None:
    piece = _create_piece(client)

    response = client.patch(
        f"/api/pieces/{piece['id']}",
        data={"name": "", "color": "Black"},
        headers=identity(),
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Striped tee"
    assert response.json()["color"] == "Black"


def test_replacing_and_deleting_piece_image_removes_files(client, static_dir) -> None:
    created = client.post(
        "/api/pieces",
        data={"name": "Tee", "category": "Top", "color": "Red", "season": "Summer"},
        files={"image": ("a.png", PNG, "image/png")},
        headers=identity(),
    ).json()
    first_file = static_dir / "pieces" / created["image_path"].rsplit("/", 1)[-1]

    updated = client.patch(
        f"/api/pieces/{created['id']}",
        files={"image": ("b.png", PNG, "image/png")},
        headers=identity(),
    ).json()
    second_file = static_dir / "pieces" / updated["image_path"].rsplit("/", 1)[-1]

    assert not first_file.exists()
    assert second_file.exists()

    response = client.delete(f"/api/pieces/{created['id']}", headers=identity())
    assert response.status_code == 200
    assert not second_file.exists()


def test_non_image_upload_is_rejected(client) -> None:
    response = client.post(
        "/api/pieces",
        data={"name": "Tee", "category": "Top", "color": "Red", "season": "Summer"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=identity(),
    )

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "image"


def test_outfit_with_foreign_piece_is_forbidden(client, db) -> None:
    mine = _create_piece(client)
    theirs = _create_piece(client, user=BOB, name="Bob's coat", category="Jacket")

    response = client.post(
        "/api/outfits",
        data={"name": "Borrowed", "piece_ids": json.dumps([mine["id"], theirs["id"]])},
        headers=identity(),
    )

    assert response.status_code == 403
    assert response.json()["error_code"] == "AUTHORIZATION_ERROR"
    assert db.query(Outfit).count() == 0
    assert db.query(OutfitPiece).count() == 0


def test_outfit_lifecycle_over_http(client, static_dir) -> None:
    tee = _create_piece(client)
    jeans = _create_piece(client, name="Jeans", category="Bottom", season="Winter")

    created = client.post(
        "/api/outfits",
        data={"name": "Casual", "piece_ids": json.dumps([tee["id"], jeans["id"]])},
        files={"cover_image": ("cover.png", PNG, "image/png")},
        headers=identity(),
    )
    assert created.status_code == 201, created.text
    outfit = created.json()
    assert {p["id"] for p in outfit["pieces"]} == {tee["id"], jeans["id"]}
    cover_file = static_dir / "outfits" / outfit["cover_image"].rsplit("/", 1)[-1]
    assert cover_file.exists()

    patched = client.patch(
        f"/api/outfits/{outfit['id']}",
        data={"name": "Casual Friday", "piece_ids": "[]"},
        headers=identity(),
    )
    assert patched.status_code == 200
    assert patched.json()["name"] == "Casual Friday"
    assert patched.json()["pieces"] == []

    assert client.delete(f"/api/outfits/{outfit['id']}", headers=identity()).status_code == 200
    assert not cover_file.exists()
    assert client.get(f"/api/outfits/{outfit['id']}", headers=identity()).status_code == 404
    assert client.delete(f"/api/outfits/{outfit['id']}", headers=identity()).status_code == 404


def test_outfit_rejects_malformed_piece_ids(client) -> None:
    response = client.post(
        "/api/outfits",
        data={"name": "Broken", "piece_ids": "{not json"},
        headers=identity(),
    )

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "piece_ids"


def test_wear_log_and_analytics_endpoints(client) -> None:
    tee = _create_piece(client)
    spare = _create_piece(client, name="Spare socks", category="Accessories", color="White")
    outfit = client.post(
        "/api/outfits",
        data={"name": "Tee day", "piece_ids": json.dumps([tee["id"]])},
        headers=identity(),
    ).json()

    for location in ("Office", None):
        body = {"outfit_id": outfit["id"]}
        if location:
            body["location"] = location
        assert client.post("/api/wear-log", json=body, headers=identity()).status_code == 201

    recent = client.get("/api/wear-log/recent", params={"limit": 1}, headers=identity()).json()
    assert len(recent) == 1
    assert recent[0]["outfit"]["id"] == outfit["id"]

    analytics = client.get("/api/analytics", headers=identity()).json()
    assert analytics["total_pieces"] == 2
    assert analytics["total_outfits"] == 1
    assert analytics["total_wears"] == 2
    assert [p["id"] for p in analytics["never_worn_pieces"]] == [spare["id"]]
    assert analytics["least_worn_outfits"][0]["worn_count"] == 2
    assert analytics["least_worn_outfits"][0]["days_since_worn"] == 0
    assert analytics["pieces_by_color"] == {"Blue": 1, "White": 1}


def test_wear_log_for_unknown_outfit_is_not_found(client) -> None:
    response = client.post("/api/wear-log", json={"outfit_id": "missing"}, headers=identity())

    assert response.status_code == 404
    assert response.json()["error_code"] == "NOT_FOUND"


def test_wear_log_body_is_validated(client) -> None:
    response = client.post("/api/wear-log", json={"location": "Park"}, headers=identity())

    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_health_and_root(client) -> None:
    assert client.get("/health").json()["status"] == "ok"
    assert client.get("/").json()["docs"] == "/docs"


def test_recent_wear_log_limit_has_no_upper_cap(client) -> None:
    outfit = client.post("/api/outfits", data={"name": "Any"}, headers=identity()).json()
    client.post("/api/wear-log", json={"outfit_id": outfit["id"]}, headers=identity())

    response = client.get("/api/wear-log/recent", params={"limit": 500}, headers=identity())

    assert response.status_code == 200
    assert len(response.json()) == 1
    assert client.get("/api/wear-log/recent", params={"limit": 0}, headers=identity()).status_code == 422


def test_unknown_routes_use_the_error_envelope(client) -> None:
    missing = client.get("/api/no-such-thing", headers=identity())
    assert missing.status_code == 404
    assert missing.json()["error_code"] == "NOT_FOUND"
    assert missing.json()["success"] is False

    wrong_method = client.put("/health")
    assert wrong_method.status_code == 405
    assert wrong_method.json()["error_code"] == "HTTP_ERROR"
