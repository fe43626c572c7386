# tests/test_api.py

# --------------------
# /characters
# --------------------

def test_list_characters_default_creation_order(client):
    resp = client.get("/api/v1/characters")
    assert resp.status_code == 200
    assert [c["character_name"] for c in resp.json()["characters"]] == ["Borin", "Aria", "Cael"]

def test_list_characters_by_name(client):
    resp = client.get("/api/v1/characters", params={"order": "name"})
    assert resp.status_code == 200
    assert [c["character_name"] for c in resp.json()["characters"]] == ["Aria", "Borin", "Cael"]

def test_list_characters_bad_order(client):
    resp = client.get("/api/v1/characters", params={"order": "shoe_size"})
    assert resp.status_code == 422

def test_create_character(client):
    resp = client.post("/api/v1/characters", json={"character_name": "Dara", "profile_text": "Cartographer."})
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["character"]["character_name"] == "Dara"
    assert data["character"]["id"]
    assert [c["character_name"] for c in data["characters"]] == ["Borin", "Aria", "Cael", "Dara"]
    assert data["notification"] == {
        "title": "Success", "description": "Character saved successfully", "variant": "default",
    }

def test_create_character_blank_name_leaves_listing_unchanged(client):
    before = client.get("/api/v1/characters").json()

    resp = client.post("/api/v1/characters", json={"character_name": "  ", "profile_text": "Something"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please fill in both character name and profile"

    assert client.get("/api/v1/characters").json() == before

def test_create_character_missing_fields(client):
    resp = client.post("/api/v1/characters", json={})
    assert resp.status_code == 400

def test_update_character(client, ids):
    resp = client.put(
        f"/api/v1/characters/{ids['Aria']}",
        json={"character_name": "Aria", "profile_text": "Veteran duelist."},
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["character"]["profile_text"] == "Veteran duelist."
    assert data["notification"]["description"] == "Character updated successfully"

def test_update_unknown_character(client):
    resp = client.put("/api/v1/characters/missing", json={"character_name": "A", "profile_text": "B"})
    assert resp.status_code == 404

def test_update_blank_profile(client, ids):
    resp = client.put(f"/api/v1/characters/{ids['Aria']}", json={"character_name": "Aria", "profile_text": ""})
    assert resp.status_code == 400

def test_delete_character_removes_only_that_record(client, ids):
    resp = client.delete(f"/api/v1/characters/{ids['Borin']}")
    assert resp.status_code == 200
    assert resp.json()["notification"]["description"] == "Character deleted successfully"

    names = [c["character_name"] for c in client.get("/api/v1/characters").json()["characters"]]
    assert names == ["Aria", "Cael"]

def test_delete_of_already_removed_character_succeeds(client, seeded_store, ids):
    seeded_store.delete_character(ids["Borin"])
    resp = client.delete(f"/api/v1/characters/{ids['Borin']}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["notification"]["description"] == "Character deleted successfully"
    assert [c["character_name"] for c in data["characters"]] == ["Aria", "Cael"]

def test_store_failure_is_reported_generically(flaky_client, flaky_store):
    flaky_store.fail.add("list_characters")
    resp = flaky_client.get("/api/v1/characters")
    assert resp.status_code == 502
    assert resp.json()["detail"] == "store unavailable"

def test_create_succeeds_even_if_refresh_fails(flaky_client, flaky_store):
    flaky_store.fail.add("list_characters")
    resp = flaky_client.post("/api/v1/characters", json={"character_name": "Dara", "profile_text": "x"})
    assert resp.status_code == 201
    assert resp.json()["characters"] is None

def test_insert_failure(flaky_client, flaky_store):
    flaky_store.fail.add("insert_character")
    resp = flaky_client.post("/api/v1/characters", json={"character_name": "Dara", "profile_text": "x"})
    assert resp.status_code == 502

# --------------------
# /storyboard
# --------------------

def test_storyboard_options(client):
    data = client.get("/api/v1/storyboard/options").json()
    assert data["camera_movements"] == [
        "Static Shot", "Close-up", "Medium Shot", "Wide Shot", "Low-angle Shot", "Travelling Shot / Dolly",
    ]
    assert data["lighting_styles"] == [
        "Natural Light", "Soft Light", "Golden Hour", "Volumetric Lighting", "Cinematic Shadow",
    ]
    assert (data["min_duration"], data["default_duration"], data["max_duration"]) == (1, 6, 60)

def test_generate_storyboard(client, ids):
    payload = {
        "scene_description": "Duel at dawn",
        "scene_duration": 10,
        "selected_character_ids": [ids["Borin"], ids["Aria"], "deleted-id"],
        "camera_movement": "Close-up",
        "lighting_style": "Golden Hour",
    }
    resp = client.post("/api/v1/storyboard/generate", json=payload)
    assert resp.status_code == 200, resp.text
    prompts = resp.json()["prompts"]
    assert [p["id"] for p in prompts] == [1, 2, 3, 4]
    assert prompts[0]["text"] == (
        "Featuring characters: Aria, Borin. Scene: Duel at dawn. Camera: Close-up. "
        "Lighting: Golden Hour. Duration: 10 seconds. Opening establishing shot to set the mood and context."
    )

def test_generate_storyboard_defaults(client):
    resp = client.post("/api/v1/storyboard/generate", json={"scene_description": "A hero enters the room",
                                                            "camera_movement": ""})
    assert resp.status_code == 200
    assert resp.json()["prompts"][0]["text"].startswith("Scene: A hero enters the room. Duration: 6 seconds. ")

def test_generate_storyboard_blank_description(client):
    resp = client.post("/api/v1/storyboard/generate", json={"scene_description": "   "})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please provide a scene description"

def test_generate_storyboard_rejects_unknown_lighting(client):
    resp = client.post("/api/v1/storyboard/generate", json={"scene_description": "x", "lighting_style": "Disco"})
    assert resp.status_code == 422

def test_generate_storyboard_rejects_out_of_range_duration(client):
    for duration in (0, 61):
        resp = client.post("/api/v1/storyboard/generate", json={"scene_description": "x", "scene_duration": duration})
        assert resp.status_code == 422

def test_generate_storyboard_store_failure(flaky_client, flaky_store, ids):
    flaky_store.fail.add("list_characters")
    resp = flaky_client.post("/api/v1/storyboard/generate",
                             json={"scene_description": "x", "selected_character_ids": [ids["Aria"]]})
    assert resp.status_code == 502

def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
