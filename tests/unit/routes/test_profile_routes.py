from fitcart.repositories.profile import HEIGHT_KEY


def test_get_profile_defaults(client):
    response = client.get("/profile/")

    assert response.status_code == 200
    assert response.json() == {"height_cm": "", "weight_kg": "", "gender": "男性"}


def test_update_profile(client, settings_store):
    response = client.put(
        "/profile/", json={"height_cm": "168", "weight_kg": "58", "gender": "女性"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "height_cm": "168",
        "weight_kg": "58",
        "gender": "女性",
    }
    assert settings_store.get(HEIGHT_KEY) == "168"


def test_update_profile_partial(client):
    client.put("/profile/", json={"height_cm": "168"})

    response = client.put("/profile/", json={"weight_kg": "abc"})

    assert response.json()["height_cm"] == "168"
    assert response.json()["weight_kg"] == "abc"


def test_update_profile_invalid_gender_422(client):
    response = client.put("/profile/", json={"gender": "goblin"})

    assert response.status_code == 422


def test_get_profile_store_failure_500(failing_settings_client):
    response = failing_settings_client.get("/profile/")

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal error reading profile"


def test_update_profile_store_failure_500(failing_settings_client):
    response = failing_settings_client.put("/profile/", json={"height_cm": "170"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal error saving profile"
