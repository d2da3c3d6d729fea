from datetime import datetime


def test_health_returns_ok_payload(client):
    res = client.get("/health")

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["service"] == "api"
    assert datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00")).tzinfo is not None


def test_root_points_to_health(client):
    res = client.get("/")

    assert res.status_code == 200
    assert res.json() == {"message": "Architecture Oracle API", "docs": "/health"}


def test_cors_preflight_is_allowed(client):
    res = client.options(
        "/architecture",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] in ("*", "http://localhost:3000")
