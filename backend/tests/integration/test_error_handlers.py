import pytest
from httpx import ASGITransport, AsyncClient

from fittrack.core.errors import StorageUnavailable
from fittrack.main import create_app
from fittrack.storage import MemoryStorage


class _BrokenWorkouts:
    def get(self, record_id):
        raise StorageUnavailable("DB error: connection refused")

    def list_by_owner(self, owner_id):
        raise StorageUnavailable("DB error: connection refused")


@pytest.fixture
async def broken_client(settings):
    storage = MemoryStorage(seed=False)
    storage.workouts = _BrokenWorkouts()
    app = create_app(settings=settings, storage=storage)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_storage_failure_is_503(broken_client):
    resp = await broken_client.get("/api/workouts/1")
    assert resp.status_code == 503
    assert resp.json() == {"message": "DB error: connection refused"}

    resp = await broken_client.get("/api/users/1/workouts")
    assert resp.status_code == 503


@pytest.mark.asyncio
async def test_non_integer_id_is_400(client):
    resp = await client.get("/api/workouts/abc")
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Validation error")


@pytest.mark.asyncio
async def test_malformed_json_is_400(client):
    resp = await client.post(
        "/api/workouts",
        content="{not json",
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_unknown_route_uses_message_body(client):
    resp = await client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


@pytest.mark.asyncio
async def test_json_responses_declare_utf8(client):
    resp = await client.get("/health")
    assert resp.headers["content-type"] == "application/json; charset=utf-8"


@pytest.mark.asyncio
async def test_ids_beyond_integer_range_are_400(client, user):
    huge = 2**63
    for path in (f"/api/workouts/{huge}", f"/api/users/{huge}", f"/api/users/{huge}/dashboard"):
        resp = await client.get(path)
        assert resp.status_code == 400, path
        assert resp.json()["message"].startswith("Validation error")

    resp = await client.post(
        "/api/nutrition",
        json={"userId": huge, "date": "2024-01-01", "calories": 500},
    )
    assert resp.status_code == 400
    assert "userId" in resp.json()["message"]

    resp = await client.post(
        "/api/activity-logs",
        json={"userId": user.id, "date": "2024-01-01", "steps": huge},
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_largest_integer_id_is_a_plain_404(client):
    resp = await client.get(f"/api/workouts/{2**63 - 1}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Workout not found"}


@pytest.mark.asyncio
async def test_epoch_number_dates_are_400(client, user):
    resp = await client.post(
        "/api/nutrition",
        json={"userId": user.id, "date": 1714521600, "calories": 500},
    )
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["path"] == "date"


class _CrashingGoals:
    def get(self, record_id):
        raise RuntimeError("unexpected")


@pytest.mark.asyncio
async def test_unexpected_errors_are_500_with_message(settings):
    storage = MemoryStorage(seed=False)
    storage.goals = _CrashingGoals()
    app = create_app(settings=settings, storage=storage)
    # the server still re-raises after answering; keep it out of the test
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/goals/1")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
