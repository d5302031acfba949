import pytest

BASE = "/api/ucsbdiningcommonsmenuitem"

POST_PARAMS = {"diningCommonsCode": "ortega", "name": "Baked Pesto Pasta with Chicken", "station": "Entree Specials"}

UPDATE_BODY = {"diningCommonsCode": "carrillo", "name": "Chicken Caesar Salad", "station": "Salads"}


def _create(client, headers, **overrides):
    params = dict(POST_PARAMS)
    params.update(overrides)
    r = client.post(f"{BASE}/post", params=params, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()


def test_role_matrix(client, user_headers):
    assert client.get(f"{BASE}/all").status_code == 403
    assert client.get(BASE, params={"id": 1}).status_code == 403
    assert client.post(f"{BASE}/post", params=POST_PARAMS, headers=user_headers).status_code == 403
    assert client.put(BASE, params={"id": 1}, json={}, headers=user_headers).status_code == 403
    assert client.delete(BASE, params={"id": 1}, headers=user_headers).status_code == 403


def test_list_and_get(client, admin_headers, user_headers):
    first = _create(client, admin_headers)
    second = _create(client, admin_headers, diningCommonsCode="portola", name="Tofu Banh Mi Sandwich (v)")
    r = client.get(f"{BASE}/all", headers=user_headers)
    assert sorted(r.json(), key=lambda item: item["id"]) == [first, second]

    r = client.get(BASE, params={"id": second["id"]}, headers=user_headers)
    assert r.json()["diningCommonsCode"] == "portola"


def test_update_then_get_returns_payload(client, admin_headers, user_headers):
    created = _create(client, admin_headers)
    r = client.put(BASE, params={"id": created["id"]}, json=UPDATE_BODY, headers=admin_headers)
    assert r.status_code == 200
    expected = dict(UPDATE_BODY, id=created["id"])
    assert r.json() == expected

    r = client.get(BASE, params={"id": created["id"]}, headers=user_headers)
    assert r.json() == expected


def test_delete_then_get_returns_404(client, admin_headers, user_headers):
    created = _create(client, admin_headers)
    r = client.delete(BASE, params={"id": created["id"]}, headers=admin_headers)
    assert r.json() == {"message": f"UCSBDiningCommonsMenuItem with id {created['id']} deleted"}
    assert client.get(BASE, params={"id": created["id"]}, headers=user_headers).status_code == 404


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_missing_item_returns_404(client, admin_headers, method):
    kwargs = {"params": {"id": 7}, "headers": admin_headers}
    if method == "put":
        kwargs["json"] = UPDATE_BODY
    r = getattr(client, method)(BASE, **kwargs)
    assert r.status_code == 404
    assert r.json() == {"type": "EntityNotFoundException", "message": "UCSBDiningCommonsMenuItem with id 7 not found"}
