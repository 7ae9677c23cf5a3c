from datetime import datetime, timedelta, timezone

import jwt
import pytest
from sqlalchemy import func, select

from app.core.config import settings
from app.models.entities import Expense
from conftest import make_session_token

PROTECTED = [
    ("get", "/v1/me", None),
    ("get", "/v1/families", None),
    ("post", "/v1/families", {"familyName": "Smiths", "memberName": "Alice"}),
    ("post", "/v1/families/members", {"familyId": 1, "email": "bob@x.com", "name": "Bob"}),
    ("get", "/v1/categories?familyId=1", None),
    ("post", "/v1/categories", {"familyId": 1, "name": "Pets"}),
    ("get", "/v1/expenses?familyId=1", None),
    ("post", "/v1/expenses", {"familyId": 1, "amount": 10}),
    ("delete", "/v1/expenses?id=1", None),
    ("get", "/v1/savings?familyId=1", None),
    ("get", "/v1/currents?familyId=1", None),
    ("get", "/v1/debts?familyId=1", None),
    ("patch", "/v1/debts?id=1", {"status": "paid"}),
    ("get", "/v1/custom-sections?familyId=1", None),
    ("get", "/v1/custom-sections/transactions?sectionId=1", None),
    ("get", "/v1/summary?familyId=1", None),
]


def _cookie(token: str) -> dict[str, str]:
    return {"Cookie": f"{settings.session_cookie_name}={token}"}


@pytest.mark.parametrize("method,path,body", PROTECTED)
def test_endpoints_require_session(client, method, path, body):
    kwargs = {"json": body} if body is not None else {}
    response = client.request(method.upper(), path, **kwargs)
    assert response.status_code == 401
    assert response.json() == {"error": "Authentication required. Please sign in."}


def test_authentication_runs_before_validation(client):
    # No familyId and no session: the caller learns nothing beyond "sign in".
    assert client.get("/v1/expenses").status_code == 401
    assert client.post("/v1/expenses", json={"amount": -5}).status_code == 401


def test_unauthenticated_create_writes_nothing(client, db_session, make_family):
    family_id = make_family()
    response = client.post("/v1/expenses", json={"familyId": family_id, "amount": 10})
    assert response.status_code == 401
    assert db_session.execute(select(func.count(Expense.id))).scalar_one() == 0


def test_expired_session_is_rejected(client, make_family):
    make_family()
    token = make_session_token("alice@x.com", expires_in=-60)
    assert client.get("/v1/families", headers=_cookie(token)).status_code == 401


def test_tampered_session_is_rejected(client, make_family):
    make_family()
    token = jwt.encode(
        {"email": "alice@x.com", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "some-other-secret-that-is-long-enough",
        algorithm="HS256",
    )
    assert client.get("/v1/families", headers=_cookie(token)).status_code == 401
    assert client.get("/v1/families", headers=_cookie("not-a-jwt")).status_code == 401


def test_session_without_email_claim_is_rejected(client):
    token = make_session_token(None, name="Alice")
    assert client.get("/v1/me", headers=_cookie(token)).status_code == 401


def test_session_without_expiry_is_rejected(client):
    token = jwt.encode({"email": "alice@x.com"}, settings.session_secret, algorithm="HS256")
    assert client.get("/v1/me", headers=_cookie(token)).status_code == 401


def test_missing_secret_rejects_every_session(client, monkeypatch):
    token = make_session_token("alice@x.com")
    monkeypatch.setattr(settings, "session_secret", "")
    assert client.get("/v1/me", headers=_cookie(token)).status_code == 401


def test_secure_cookie_name_is_accepted(client):
    token = make_session_token("Alice@X.com", name="Alice")
    response = client.get("/v1/me", headers={"Cookie": f"__Secure-{settings.session_cookie_name}={token}"})
    assert response.status_code == 200
    assert response.json() == {"email": "alice@x.com", "name": "Alice", "memberships": []}


def test_me_lists_memberships(client, auth_headers, make_family):
    family_id = make_family()
    response = client.get("/v1/me", headers=auth_headers("alice@x.com"))
    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "alice@x.com"
    assert body["memberships"] == [
        {
            "familyId": family_id,
            "familyName": "Smiths",
            "memberId": body["memberships"][0]["memberId"],
            "isAdmin": True,
        }
    ]


def test_forward_auth_mode_uses_proxy_header(client, monkeypatch, make_family):
    family_id = make_family()
    monkeypatch.setattr(settings, "auth_mode", "forwardauth")

    assert client.get("/v1/families").status_code == 401
    response = client.get("/v1/families", headers={"X-Forwarded-User": "ALICE@x.com"})
    assert response.status_code == 200
    assert response.json()["id"] == family_id
