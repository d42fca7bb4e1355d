from __future__ import annotations

import httpx
import pytest

from src.adapters.api.dependencies import get_coordinate_service
from src.app.services.coordinate_service import CoordinateService
from src.main import app


async def _post(path: str, payload: dict) -> httpx.Response:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.post(path, json=payload)


@pytest.mark.unit
@pytest.mark.anyio
async def test_parse_returns_coordinate_with_detected_precision() -> None:
    resp = await _post("/coordinates/parse", {"text": "10.5 20.25"})

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["latitude"] == 10.5
    assert payload["longitude"] == 20.25
    assert payload["precision"] == 0.01
    assert payload["grammar"] == "float"
    assert payload["globe"] == "http://www.wikidata.org/entity/Q2"


@pytest.mark.unit
@pytest.mark.anyio
async def test_parse_honours_explicit_precision_and_globe() -> None:
    resp = await _post(
        "/coordinates/parse",
        {
            "text": "55° 45.20' N, 37° 37.06' E",
            "precision": 0.5,
            "globe": "http://www.wikidata.org/entity/Q405",
        },
    )

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["precision"] == 0.5
    assert payload["globe"] == "http://www.wikidata.org/entity/Q405"
    assert payload["grammar"] == "degree_minute"


@pytest.mark.unit
@pytest.mark.anyio
async def test_parse_unrecognized_text_returns_422_with_text() -> None:
    resp = await _post("/coordinates/parse", {"text": "somewhere nice"})

    assert resp.status_code == 422
    assert resp.json() == {
        "detail": "The format of the coordinate could not be determined.",
        "text": "somewhere nice",
        "format": "coordinate",
    }


@pytest.mark.unit
@pytest.mark.anyio
async def test_parse_off_globe_point_returns_422() -> None:
    resp = await _post("/coordinates/parse", {"text": "100 20"})

    assert resp.status_code == 422
    assert "latitude" in resp.json()["detail"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_parse_oversized_degrees_returns_422() -> None:
    text = "9" * 400 + "° 30', 20° 15'"
    resp = await _post("/coordinates/parse", {"text": text})

    assert resp.status_code == 422
    assert resp.json()["text"] == text


@pytest.mark.unit
@pytest.mark.anyio
async def test_parse_rejects_non_positive_precision() -> None:
    resp = await _post("/coordinates/parse", {"text": "10 20", "precision": 0})

    assert resp.status_code == 422


@pytest.mark.unit
@pytest.mark.anyio
async def test_parse_uses_service_default_globe() -> None:
    def _override() -> CoordinateService:
        return CoordinateService(default_globe="http://www.wikidata.org/entity/Q111")

    app.dependency_overrides[get_coordinate_service] = _override
    try:
        resp = await _post("/coordinates/parse", {"text": "10 20"})
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 200
    assert resp.json()["globe"] == "http://www.wikidata.org/entity/Q111"


@pytest.mark.unit
def test_default_globe_comes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    moon = "http://www.wikidata.org/entity/Q405"
    monkeypatch.setenv("COORDINATES_DEFAULT_GLOBE", moon)
    assert get_coordinate_service().default_globe == moon

    monkeypatch.setenv("COORDINATES_DEFAULT_GLOBE", "  ")
    assert get_coordinate_service().default_globe == "http://www.wikidata.org/entity/Q2"


@pytest.mark.unit
@pytest.mark.anyio
async def test_format_writes_decimal_degrees() -> None:
    resp = await _post(
        "/coordinates/format",
        {"latitude": 10.5, "longitude": -20.25, "precision": 0.01},
    )

    assert resp.status_code == 200
    assert resp.json() == {"text": "10.50, -20.25"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_health() -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
