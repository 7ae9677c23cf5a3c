from app.core.config import settings


def test_unlisted_origin_gets_no_cors_headers(client, auth_headers, make_family):
    make_family()
    headers = {**auth_headers("alice@x.com"), "Origin": "https://evil.example"}

    response = client.get("/v1/families", headers=headers)
    assert response.status_code == 200
    # Without an allow-origin header the browser withholds the body from the page.
    assert "access-control-allow-origin" not in response.headers


def test_configured_origin_may_send_credentials(client, auth_headers, make_family):
    make_family()
    origin = settings.cors_origins[0]
    headers = {**auth_headers("alice@x.com"), "Origin": origin}

    response = client.get("/v1/families", headers=headers)
    assert response.headers["access-control-allow-origin"] == origin
    assert response.headers["access-control-allow-credentials"] == "true"


def test_preflight_from_unlisted_origin_is_rejected(client):
    response = client.options(
        "/v1/expenses",
        headers={"Origin": "https://evil.example", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers
