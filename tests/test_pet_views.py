"""Integration tests for the pet form routes through the Flask test client."""
from datetime import date


def test_creation_form_renders_for_owner(client):
    response = client.get("/owners/1/pets/new")

    assert response.status_code == 200
    assert b"New Pet" in response.data
    assert b"George Franklin" in response.data
    assert b"hamster" in response.data


def test_creation_form_unknown_owner_is_404(client):
    response = client.get("/owners/999/pets/new")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Owner 999 not found"


def test_create_pet_saves_and_redirects(client, container):
    response = client.post("/owners/1/pets/new", data={
        "name": "Max",
        "birth_date": "2021-05-01",
        "type": "dog",
    })

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/owners/1")

    owner = container.get_owner_repository().find_by_id(1)
    pet = owner.get_pet("Max")
    assert pet is not None
    assert pet.id is not None
    assert pet.birth_date == date(2021, 5, 1)
    assert pet.type.name == "dog"


def test_create_pet_with_duplicate_name_redisplays_form(client, container):
    response = client.post("/owners/1/pets/new", data={
        "name": "leo",
        "birth_date": "2021-05-01",
        "type": "cat",
    })

    assert response.status_code == 200
    assert b"already exists" in response.data
    assert len(container.get_owner_repository().find_by_id(1).pets) == 1


def test_create_pet_with_missing_fields_keeps_input(client, container):
    response = client.post("/owners/1/pets/new", data={
        "name": "Max",
        "birth_date": "",
        "type": "dog",
    })

    assert response.status_code == 200
    assert b"is required" in response.data
    assert b'value="Max"' in response.data
    assert container.get_owner_repository().find_by_id(1).get_pet("Max") is None


def test_create_pet_ignores_owner_identity_input(client, container):
    response = client.post("/owners/2/pets/new", data={
        "id": "1",
        "name": "Spot",
        "birth_date": "2020-02-02",
        "type": "dog",
    })

    assert response.headers["Location"].endswith("/owners/2")
    assert container.get_owner_repository().find_by_id(2).get_pet("Spot") is not None
    assert container.get_owner_repository().find_by_id(1).get_pet("Spot") is None


def test_create_pet_does_not_persist_bound_owner_fields(client, container):
    client.post("/owners/1/pets/new", data={
        "first_name": "Jorge",
        "name": "Max",
        "birth_date": "2021-05-01",
        "type": "dog",
    })

    assert container.get_owner_repository().find_by_id(1).first_name == "George"


def test_update_form_prefilled(client):
    response = client.get("/owners/1/pets/1/edit")

    assert response.status_code == 200
    assert b'value="Leo"' in response.data
    assert b'value="2010-09-07"' in response.data
    assert b"Update Pet" in response.data


def test_update_form_shows_owner_from_path(client):
    response = client.get("/owners/2/pets/1/edit")

    assert response.status_code == 200
    assert b"Betty Davis" in response.data
    assert b"George Franklin" not in response.data


def test_update_form_unknown_pet_is_404(client):
    response = client.get("/owners/1/pets/999/edit")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Pet 999 not found"


def test_update_pet_saves_and_redirects(client, container):
    response = client.post("/owners/1/pets/1/edit", data={
        "name": "Leonardo",
        "birth_date": "2010-09-07",
        "type": "cat",
    })

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/owners/1")
    pet = container.get_pet_repository().find_by_id(1)
    assert pet.name == "Leonardo"
    assert [p.name for p in pet.owner.pets] == ["Leonardo"]


def test_update_pet_with_errors_keeps_input_and_store(client, container):
    response = client.post("/owners/1/pets/1/edit", data={
        "name": "Leonardo",
        "birth_date": "not-a-date",
        "type": "cat",
    })

    assert response.status_code == 200
    assert b'value="Leonardo"' in response.data
    assert b'value="not-a-date"' in response.data
    assert container.get_pet_repository().find_by_id(1).name == "Leo"


def test_health_endpoints(client):
    assert client.get("/health").get_json()["status"] == "healthy"
    assert client.get("/health/live").status_code == 200

    ready = client.get("/health/ready")
    assert ready.status_code == 200
    assert ready.get_json()["checks"]["storage"] is True
