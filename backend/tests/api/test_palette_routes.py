"""Palette Routes: list with color search, lookup, rename, delete."""

from sqlalchemy import select

from palette_picker.core.validate_body import COLOR_QUERY_MESSAGE
from palette_picker.models.palette import Palette
from palette_picker.models.project import Project


async def _first_palette(fetch) -> Palette:
    palettes = await fetch(select(Palette).order_by(Palette.id))
    return palettes[0]


async def _post_palette(client, project_id: int, name: str, **colors) -> int:
    body = {
        "name": name,
        "color_one": "#111111",
        "color_two": "#222222",
        "color_three": "#333333",
        "color_four": "#444444",
        "color_five": "#555555",
        **colors,
    }
    response = await client.post(f"/api/v1/projects/{project_id}/palettes", json=body)
    assert response.status_code == 201
    return response.json()["id"]


# --- GET /api/v1/palettes -------------------------------------------------------

async def test_list_palettes_without_color_returns_all(client, fetch):
    expected = await fetch(select(Palette).order_by(Palette.id))
    response = await client.get("/api/v1/palettes")
    assert response.status_code == 200
    names = [p["name"] for p in response.json()["palettes"]]
    assert names == [p.name for p in expected]


async def test_color_query_returns_only_matching_palettes(client, fetch):
    project = (await fetch(select(Project).order_by(Project.id)))[0]
    first = await _post_palette(client, project.id, "white one", color_two="#FFFFFF")
    second = await _post_palette(client, project.id, "white two", color_five="#ffffff")

    response = await client.get("/api/v1/palettes?color=FFFFFF")
    assert response.status_code == 200
    palettes = response.json()["palettes"]
    assert [p["id"] for p in palettes] == [first, second]
    assert [p["name"] for p in palettes] == ["white one", "white two"]


async def test_color_query_is_case_insensitive(client, fetch):
    response = await client.get("/api/v1/palettes?color=ff7f50")
    assert response.status_code == 200
    assert [p["name"] for p in response.json()["palettes"]] == ["Sunset"]


async def test_color_query_without_match_returns_empty_list(client):
    response = await client.get("/api/v1/palettes?color=ABCDEF")
    assert response.status_code == 200
    assert response.json() == {"palettes": []}


async def test_empty_color_query_returns_all(client, fetch):
    expected = await fetch(select(Palette))
    response = await client.get("/api/v1/palettes?color=")
    assert response.status_code == 200
    assert len(response.json()["palettes"]) == len(expected)


async def test_short_color_query_is_422(client):
    response = await client.get("/api/v1/palettes?color=EEEEE")
    assert response.status_code == 422
    assert response.json() == {"error": COLOR_QUERY_MESSAGE}


async def test_non_hex_color_query_is_422(client):
    response = await client.get("/api/v1/palettes?color=GGGGGG")
    assert response.status_code == 422


# --- GET /api/v1/palettes/{id} --------------------------------------------------

async def test_get_palette_returns_single_object(client, fetch):
    expected = await _first_palette(fetch)
    response = await client.get(f"/api/v1/palettes/{expected.id}")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == expected.name
    assert body["color_one"] == expected.color_one
    assert body["projects_id"] == expected.projects_id


async def test_get_missing_palette_is_404(client):
    response = await client.get("/api/v1/palettes/-11")
    assert response.status_code == 404
    assert response.json() == {"error": "Could not find palette with an id of -11"}


# --- PATCH /api/v1/palettes/{id} ------------------------------------------------

async def test_rename_palette_updates_only_name(client, fetch):
    palette = await _first_palette(fetch)
    response = await client.patch(
        f"/api/v1/palettes/{palette.id}",
        json={"name": "New and improved palette name"},
    )
    assert response.status_code == 200
    assert response.json() == {"id": palette.id}
    stored = (await fetch(select(Palette).where(Palette.id == palette.id)))[0]
    assert stored.name == "New and improved palette name"
    assert stored.color_one == palette.color_one


async def test_rename_missing_palette_is_404(client):
    response = await client.patch(
        "/api/v1/palettes/-7", json={"name": "New and improved palette name"},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Could not find palette with an id of -7"}


async def test_rename_palette_with_other_key_is_422_and_unchanged(client, fetch):
    palette = await _first_palette(fetch)
    response = await client.patch(
        f"/api/v1/palettes/{palette.id}", json={"color_one": "#000000"},
    )
    assert response.status_code == 422
    assert response.json()["error"] == (
        'Expected body format is: { name: <String> }. '
        'You must send only the required "name" property.'
    )
    stored = (await fetch(select(Palette).where(Palette.id == palette.id)))[0]
    assert stored.color_one == palette.color_one


async def test_rename_palette_with_null_name_is_422_and_unchanged(client, fetch):
    palette = await _first_palette(fetch)
    response = await client.patch(
        f"/api/v1/palettes/{palette.id}", json={"name": None},
    )
    assert response.status_code == 422
    stored = (await fetch(select(Palette).where(Palette.id == palette.id)))[0]
    assert stored.name == palette.name


# --- DELETE /api/v1/palettes/{id} -----------------------------------------------

async def test_delete_palette_removes_row(client, fetch):
    palette = await _first_palette(fetch)
    response = await client.delete(f"/api/v1/palettes/{palette.id}")
    assert response.status_code == 200
    assert response.text == (
        f"Palette with id {palette.id} has been removed successfully"
    )
    assert await fetch(select(Palette).where(Palette.id == palette.id)) == []


async def test_delete_then_get_palette_is_404(client, fetch):
    palette = await _first_palette(fetch)
    await client.delete(f"/api/v1/palettes/{palette.id}")
    response = await client.get(f"/api/v1/palettes/{palette.id}")
    assert response.status_code == 404


async def test_delete_palette_twice_is_404(client, fetch):
    palette = await _first_palette(fetch)
    await client.delete(f"/api/v1/palettes/{palette.id}")
    response = await client.delete(f"/api/v1/palettes/{palette.id}")
    assert response.status_code == 404
    assert response.json() == {
        "error": f"Could not find palette with an id of {palette.id}",
    }


async def test_delete_missing_palette_is_404(client):
    response = await client.delete("/api/v1/palettes/-4")
    assert response.status_code == 404
    assert response.json() == {"error": "Could not find palette with an id of -4"}


# --- Datastore failure ----------------------------------------------------------

async def test_list_palettes_with_missing_table_is_500(client, test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Palette.__table__.drop)
    response = await client.get("/api/v1/palettes")
    assert response.status_code == 500
    assert response.json()["error"].startswith("Database select failed:")
