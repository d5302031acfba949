import pytest

BASE = "/api/recommendationrequest"

POST_PARAMS = {
    "requesterEmail": "cgaucho@ucsb.edu",
    "professorEmail": "phtcon@ucsb.edu",
    "explanation": "BS/MS program",
    "dateRequested": "2022-04-20T00:00:00",
    "dateNeeded": "2022-05-01T00:00:00",
    "done": "false",
}

UPDATE_BODY = {
    "requesterEmail": "ldelplaya@ucsb.edu",
    "professorEmail": "richert@ucsb.edu",
    "explanation": "PhD CS Stanford",
    "dateRequested": "2022-05-20T00:00:00",
    "dateNeeded": "2022-11-15T00:00:00",
    "done": True,
}


def _create(client, headers):
    r = client.post(f"{BASE}/post", params=POST_PARAMS, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()


def test_role_matrix(client, user_headers):
    assert client.get(f"{BASE}/all").status_code == 403
    assert client.get(BASE, params={"id": 1}).status_code == 403
    assert client.post(f"{BASE}/post", params=POST_PARAMS, headers=user_headers).status_code == 403
    assert client.put(BASE, params={"id": 1}, json={}, headers=user_headers).status_code == 403
    assert client.delete(BASE, params={"id": 1}, headers=user_headers).status_code == 403


def test_crud_lifecycle(client, admin_headers, user_headers):
    created = _create(client, admin_headers)
    assert created["professorEmail"] == "phtcon@ucsb.edu"
    assert created["done"] is False
    assert created["dateNeeded"] == "2022-05-01T00:00:00"

    r = client.get(f"{BASE}/all", headers=user_headers)
    assert r.json() == [created]

    r = client.put(BASE, params={"id": created["id"]}, json=UPDATE_BODY, headers=admin_headers)
    assert r.status_code == 200
    expected = dict(UPDATE_BODY, id=created["id"])
    assert r.json() == expected
    r = client.get(BASE, params={"id": created["id"]}, headers=user_headers)
    assert r.json() == expected

    r = client.delete(BASE, params={"id": created["id"]}, headers=admin_headers)
    assert r.json() == {"message": f"RecommendationRequest with id {created['id']} deleted"}
    assert client.get(BASE, params={"id": created["id"]}, headers=user_headers).status_code == 404


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_missing_request_returns_404(client, admin_headers, method):
    kwargs = {"params": {"id": 7}, "headers": admin_headers}
    if method == "put":
        kwargs["json"] = UPDATE_BODY
    r = getattr(client, method)(BASE, **kwargs)
    assert r.status_code == 404
    assert r.json() == {"type": "EntityNotFoundException", "message": "RecommendationRequest with id 7 not found"}
