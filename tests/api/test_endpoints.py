"""Test API endpoints."""

import pytest
from fastapi.testclient import TestClient

from astrovogue.api.app import create_app
from astrovogue.core.errors import GeneratorError
from astrovogue.locales import EN, SIGNS

RESULT = {"description": "Bold day", "mood": "Energetic", "color": "Red"}


@pytest.fixture
def make_client(make_service):
    def _make(*outcomes):
        service, generator = make_service(*outcomes)
        return TestClient(create_app(service=service)), generator

    return _make


def test_daily_end_to_end(make_client):
    client, generator = make_client(RESULT)

    response = client.get("/api/daily", params={"sign": "Leo", "day": "today", "lang": "en"})

    assert response.status_code == 200
    data = response.json()
    assert data["sign"] == "leo"
    assert data["sign_name"] == "Leo"
    assert data["mood"] == "Energetic"
    assert data["color"] == "Red"
    assert data["description"] == "Bold day"
    assert data["fashion_tip"] == EN.color_tips["Red"]
    assert data["lucky_number"] == EN.daily_defaults["lucky_number"]
    assert data["lucky_time"] == EN.daily_defaults["lucky_time"]
    assert data["brand"] == "AstroVogue"
    assert len(generator.calls) == 1


def test_daily_second_request_is_cached(make_client):
    client, generator = make_client(RESULT)
    params = {"sign": "leo", "day": "today", "lang": "en"}

    first = client.get("/api/daily", params=params)
    second = client.get("/api/daily", params=params)

    assert first.content == second.content
    assert len(generator.calls) == 1


@pytest.mark.parametrize("sign", ["", "ophiuchus", "123", "leo;drop"])
def test_daily_invalid_sign_is_400(make_client, sign):
    client, generator = make_client(RESULT)
    response = client.get("/api/daily", params={"sign": sign, "lang": "en"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid sign."}
    assert generator.calls == []


@pytest.mark.parametrize("sign", SIGNS)
def test_daily_accepts_every_sign_uppercased(make_client, sign):
    client, _ = make_client(RESULT)
    response = client.get("/api/daily", params={"sign": sign.upper(), "lang": "en"})
    assert response.status_code == 200
    assert response.json()["sign"] == sign


def test_daily_invalid_day_is_400(make_client):
    client, _ = make_client(RESULT)
    response = client.get("/api/daily", params={"sign": "leo", "day": "someday", "lang": "tr"})
    assert response.status_code == 400
    assert response.json() == {"error": "Geçersiz gün."}


def test_daily_invalid_lang_is_400(make_client):
    client, _ = make_client(RESULT)
    response = client.get("/api/daily", params={"sign": "leo", "lang": "xx"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_daily_generator_failure_still_200(make_client):
    client, _ = make_client(GeneratorError("OpenAI 502"))
    response = client.get("/api/daily", params={"sign": "leo", "lang": "en"})
    assert response.status_code == 200
    data = response.json()
    assert data["mood"] == "Balanced"
    assert all(value for key, value in data.items())


def test_personalized_end_to_end(make_client):
    client, generator = make_client({"focus": "Career", "color": "Black"})

    response = client.post(
        "/api/personalized", json={"sun": "Leo", "rising": "Virgo", "day": "tomorrow", "lang": "en"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["sun"] == "leo"
    assert data["rising"] == "virgo"
    assert data["rising_name"] == "Virgo"
    assert data["focus"] == "Career"
    assert data["style"] == EN.color_tips["Black"]
    assert data["day"] == "tomorrow"


def test_personalized_without_rising(make_client):
    client, _ = make_client(RESULT)
    response = client.post("/api/personalized", json={"sun": "aries", "lang": "en"})
    assert response.status_code == 200
    assert response.json()["rising"] is None


def test_personalized_invalid_rising_is_400(make_client):
    client, generator = make_client(RESULT)
    response = client.post("/api/personalized", json={"sun": "aries", "rising": "x", "lang": "en"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid rising sign."}
    assert generator.calls == []


def test_personalized_malformed_body_is_400(make_client):
    client, _ = make_client(RESULT)
    response = client.post(
        "/api/personalized", content="not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_signs_endpoint(make_client):
    client, _ = make_client()
    response = client.get("/api/signs", params={"lang": "en"})
    assert response.status_code == 200
    assert [s["id"] for s in response.json()["signs"]] == list(SIGNS)


def test_health_endpoint(make_client):
    """Test /healthz endpoint returns 200."""
    client, _ = make_client()
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "astrovogue-gateway"}


def test_metrics_endpoint(make_client):
    """Test /metrics endpoint returns metrics."""
    client, _ = make_client()
    data = client.get("/metrics").json()
    for key in ("total_requests", "total_errors", "cache_hits", "cache_misses", "p50_ms"):
        assert key in data


def test_health_has_request_id(make_client):
    """Test that responses include X-Request-ID header."""
    client, _ = make_client()
    assert "x-request-id" in client.get("/healthz").headers


def test_root_without_static_dir(make_client):
    client, _ = make_client()
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "astrovogue-gateway"


def test_root_serves_index_html(make_service, settings, tmp_path):
    (tmp_path / "index.html").write_text("<h1>AstroVogue</h1>", encoding="utf-8")
    settings.static_dir = str(tmp_path)
    service, _ = make_service()
    client = TestClient(create_app(service=service))

    response = client.get("/")

    assert response.status_code == 200
    assert "AstroVogue" in response.text
    assert client.get("/static/index.html").status_code == 200
