"""HTTP tests for /states routes (fake Mongo collection via dependency override)."""

import pytest
from pymongo.errors import PyMongoError


def test_ping_and_root(client):
    assert client.get("/ping").json() == {"status": "ok", "message": "pong"}
    assert "/states" in client.get("/").json()["resources"]


def test_unknown_route_is_json_404(client):
    r = client.get("/nowhere")
    assert r.status_code == 404
    assert r.json()["message"] == "Not Found"


# --- contrôle du code d'état ----------------------------------------------


@pytest.mark.parametrize("path", ["/states/zz", "/states/zz/funfact", "/states/zz/capital"])
def test_invalid_code_is_rejected(client, path):
    r = client.get(path)
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid state abbreviation parameter"


def test_code_is_case_insensitive(client):
    r = client.get("/states/ga")
    assert r.status_code == 200
    assert r.json()["code"] == "GA"


# --- lecture --------------------------------------------------------------


def test_list_states_with_contig_filter(client, collection):
    collection.add("AK", ["Largest state"])

    r = client.get("/states")
    assert r.status_code == 200
    assert len(r.json()) == 50

    contiguous = client.get("/states", params={"contig": "true"}).json()
    assert len(contiguous) == 48
    assert not {"AK", "HI"} & {s["code"] for s in contiguous}

    non_contiguous = client.get("/states", params={"contig": "false"}).json()
    assert [s["code"] for s in non_contiguous] == ["AK", "HI"]
    assert non_contiguous[0]["funfacts"] == ["Largest state"]
    assert "funfacts" not in non_contiguous[1]


def test_attribute_endpoints(client):
    assert client.get("/states/ca/capital").json() == {"state": "California", "capital": "Sacramento"}
    assert client.get("/states/ca/nickname").json() == {"state": "California", "nickname": "Golden State"}
    assert client.get("/states/ca/population").json() == {"state": "California", "population": "38,332,521"}
    assert client.get("/states/ca/admission").json() == {"state": "California", "admitted": "1850-09-09"}


def test_random_funfact(client, collection):
    r = client.get("/states/KY/funfact")
    assert r.status_code == 404
    assert r.json()["message"] == "No Fun Facts found for Kentucky"

    collection.add("KY", ["Bourbon"])
    r = client.get("/states/KY/funfact")
    assert r.status_code == 200
    assert r.json() == {"funfact": "Bourbon"}


# --- mutations ------------------------------------------------------------


def test_funfact_crud_scenario(client, collection):
    r = client.get("/states/CA")
    assert r.json()["state"] == "California"
    assert "funfacts" not in r.json()

    r = client.post("/states/CA/funfact", json={"funfacts": ["Fact A"]})
    assert r.status_code == 201
    body = r.json()
    assert body["stateCode"] == "CA"
    assert body["funfacts"] == ["Fact A"]
    assert isinstance(body["_id"], str)

    assert client.get("/states/CA").json()["funfacts"] == ["Fact A"]

    client.post("/states/CA/funfact", json={"funfacts": ["Fact B"]})
    r = client.patch("/states/CA/funfact", json={"index": 2, "funfact": "Fact B2"})
    assert r.status_code == 200
    assert r.json()["funfacts"] == ["Fact A", "Fact B2"]

    r = client.request("DELETE", "/states/CA/funfact", json={"index": 1})
    assert r.status_code == 200
    assert r.json()["funfacts"] == ["Fact B2"]

    r = client.request("DELETE", "/states/CA/funfact", json={"index": 1})
    assert r.json()["funfacts"] == []
    assert "funfacts" not in client.get("/states/CA").json()

    r = client.patch("/states/CA/funfact", json={"index": 1, "funfact": "again"})
    assert r.status_code == 400
    assert r.json()["message"] == "No Fun Facts found for California"


@pytest.mark.parametrize(
    "payload, message",
    [
        ({}, "State fun facts value required"),
        ({"funfacts": "not a list"}, "State fun facts value must be an array"),
    ],
)
def test_post_funfact_validation(client, payload, message):
    r = client.post("/states/GA/funfact", json=payload)
    assert r.status_code == 400
    assert r.json()["message"] == message


def test_post_funfact_with_non_object_body(client, collection):
    r = client.post("/states/GA/funfact", json=["x"])
    assert r.status_code == 400
    assert r.json()["message"] == "State fun facts value required"
    assert collection.docs == []


def test_post_funfact_without_body(client):
    r = client.post("/states/GA/funfact")
    assert r.status_code == 400
    assert r.json()["message"] == "State fun facts value required"


def test_patch_validation_and_bounds(client, collection):
    collection.add("GA", ["a", "b"])

    r = client.patch("/states/GA/funfact", json={"funfact": "x"})
    assert r.status_code == 400
    assert r.json()["message"] == "State fun fact index value required"

    r = client.patch("/states/GA/funfact", json={"index": 1})
    assert r.json()["message"] == "State fun fact value required"

    r = client.patch("/states/GA/funfact", json={"index": 3, "funfact": "x"})
    assert r.status_code == 400
    assert r.json()["message"] == "No Fun Fact found at that index for Georgia"

    r = client.patch("/states/GA/funfact", json={"index": 2, "funfact": "x"})
    assert r.status_code == 200
    assert r.json()["funfacts"] == ["a", "x"]


def test_delete_funfact_requires_index(client):
    r = client.request("DELETE", "/states/GA/funfact", json={})
    assert r.status_code == 400
    assert r.json()["message"] == "State fun fact index value required"


# --- documents ------------------------------------------------------------


def test_create_and_delete_document(client, collection):
    r = client.post("/states", json={"stateCode": "nm", "funfacts": ["Hot air balloons"]})
    assert r.status_code == 201
    assert r.json()["stateCode"] == "NM"

    r = client.post("/states", json={"stateCode": "NM"})
    assert r.status_code == 400
    assert r.json()["message"] == "Fun facts already exist for NM."

    r = client.delete("/states/nm")
    assert r.status_code == 200
    assert r.json() == {"acknowledged": True, "deletedCount": 1}
    assert collection.stored("NM") is None

    r = client.delete("/states/nm")
    assert r.json() == {"acknowledged": True, "deletedCount": 0}


def test_create_document_requires_state_code(client):
    r = client.post("/states", json={"funfacts": []})
    assert r.status_code == 400
    assert r.json()["message"] == "stateCode is required."


def test_delete_document_by_body(client, collection):
    collection.add("ID", ["Potatoes"])

    r = client.request("DELETE", "/states", json={})
    assert r.status_code == 400
    assert r.json()["message"] == "A state code is required."

    r = client.request("DELETE", "/states", json={"code": "id"})
    assert r.json()["deletedCount"] == 1


# --- erreurs de stockage --------------------------------------------------


def test_storage_error_is_generic_500(client, collection):
    collection.fail_with = PyMongoError("secret driver detail")

    r = client.get("/states")
    assert r.status_code == 500
    assert r.json()["message"] == "Internal Error"
    assert "secret" not in r.text

    r = client.post("/states/GA/funfact", json={"funfacts": ["x"]})
    assert r.status_code == 500
