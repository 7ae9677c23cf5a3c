from sqlalchemy.exc import OperationalError

from app.routers import resources as resource_routes


def test_store_errors_are_not_passed_through(client, auth_headers, make_family, monkeypatch):
    family_id = make_family()

    def broken(*args, **kwargs):
        raise OperationalError("SELECT * FROM expenses", {}, Exception("password authentication failed for user"))

    monkeypatch.setattr(resource_routes, "list_rows", broken)

    response = client.get(f"/v1/expenses?familyId={family_id}", headers=auth_headers("alice@x.com"))
    assert response.status_code == 500
    assert response.json() == {"error": "database error"}


def test_malformed_ids_are_validation_errors(client, auth_headers, make_family):
    make_family()
    headers = auth_headers("alice@x.com")

    assert client.get("/v1/expenses?familyId=abc", headers=headers).status_code == 400
    response = client.delete("/v1/debts?id=xyz", headers=headers)
    assert response.status_code == 400
    assert response.json()["error"].startswith("id:")
