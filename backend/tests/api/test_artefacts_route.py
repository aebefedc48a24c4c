"""Artefacts route — object-number filtering over the envelope's results.

Tests:
    - Response is a bare array, never the envelope
    - Exact-match filtering after trimming; unknown numbers yield []
    - Data file failures → 500 plain text
"""

import json


async def test_no_filter_returns_results_array(client, raw_artefacts):
    resp = await client.get("/artefacts")
    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body, list)
    assert body == raw_artefacts["results"]


async def test_single_object_number_returns_full_record(client, raw_artefacts):
    resp = await client.get("/artefacts", params={"objectNumbers": "MIA.2007.0012"})
    assert resp.status_code == 200
    assert resp.json() == [raw_artefacts["results"][0]]


async def test_wire_keys_are_camel_case(client):
    resp = await client.get("/artefacts", params={"objectNumbers": "MIA.2007.0012"})
    record = resp.json()[0]
    assert record["objectNumber"] == "MIA.2007.0012"
    assert record["objectImages"]["card"][0]["focalPoint"] == {"x": 240, "y": 300}
    assert "object_number" not in record


async def test_tokens_are_trimmed_and_order_follows_source(client):
    resp = await client.get(
        "/artefacts", params={"objectNumbers": " NMoQ.2019.0101 , MIA.2007.0012 "},
    )
    assert [a["objectNumber"] for a in resp.json()] == ["MIA.2007.0012", "NMoQ.2019.0101"]


async def test_unknown_object_number_returns_empty_array(client):
    resp = await client.get("/artefacts", params={"objectNumbers": "NONEXISTENT"})
    assert resp.status_code == 200
    assert resp.json() == []


async def test_match_is_case_sensitive(client):
    resp = await client.get("/artefacts", params={"objectNumbers": "mia.2007.0012"})
    assert resp.json() == []


async def test_success_sets_cors_headers(client):
    resp = await client.get("/artefacts")
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-methods"] == "GET, OPTIONS"
    assert resp.headers["access-control-allow-headers"] == "Content-Type"


async def test_missing_file_returns_500(client, data_dir):
    (data_dir / "qm_data.json").unlink()
    resp = await client.get("/artefacts")
    assert resp.status_code == 500
    assert resp.text.startswith("Error finding qm_data.json")
    assert (await client.get("/exhibits")).status_code == 200


async def test_bare_array_file_is_a_decode_error(client, data_dir):
    (data_dir / "qm_data.json").write_text("[]", encoding="utf-8")
    resp = await client.get("/artefacts")
    assert resp.status_code == 500
    assert resp.text == "Error parsing qm_data.json"


async def test_wrongly_typed_count_returns_500(client, data_dir, raw_artefacts):
    raw_artefacts["count"] = "2"
    (data_dir / "qm_data.json").write_text(json.dumps(raw_artefacts), encoding="utf-8")
    resp = await client.get("/artefacts")
    assert resp.status_code == 500
    assert resp.text == "Error parsing qm_data.json"


async def test_wrongly_typed_image_width_returns_500(client, data_dir, raw_artefacts):
    raw_artefacts["results"][0]["objectImages"]["card"][0]["width"] = "480"
    (data_dir / "qm_data.json").write_text(json.dumps(raw_artefacts), encoding="utf-8")
    resp = await client.get("/artefacts", params={"objectNumbers": "NMoQ.2019.0101"})
    assert resp.status_code == 500
