"""Liveness, readiness and CORS preflight."""


async def test_root_says_hello(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Hello, world!"
    assert resp.headers["content-type"].startswith("text/plain")


async def test_root_ignores_missing_data(client, data_dir):
    (data_dir / "exhibits.json").unlink()
    (data_dir / "qm_data.json").unlink()
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Hello, world!"


async def test_ready_when_both_files_present(client):
    resp = await client.get("/health/ready")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ready",
        "checks": {"exhibits.json": "available", "qm_data.json": "available"},
    }


async def test_not_ready_when_a_file_is_missing(client, data_dir):
    (data_dir / "qm_data.json").unlink()
    resp = await client.get("/health/ready")
    assert resp.status_code == 503
    body = resp.json()
    assert body["status"] == "not_ready"
    assert body["checks"]["qm_data.json"] == "missing"


async def test_preflight_options_allowed(client):
    resp = await client.options(
        "/exhibits",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "GET" in resp.headers["access-control-allow-methods"]
