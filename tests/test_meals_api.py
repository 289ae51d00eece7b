"""
End-to-end tests for the meal routes.

Each test drives the FastAPI app through TestClient, which keeps the session
cookie between requests the way a browser would.
"""

import uuid
from unittest.mock import Mock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from test_fixtures import HOUR_MS, LUNCH_AT, meal_payload
from api.dependencies import get_db
from app.config import settings


def _create_meal(client: TestClient, **overrides) -> None:
    r = client.post("/meals", json=meal_payload(**overrides))
    assert r.status_code == 201, r.text


def _first_meal_id(client: TestClient) -> str:
    r = client.get("/meals")
    assert r.status_code == 200
    return r.json()["meals"][0]["id"]


# =============================================================================
# SESSION COOKIE
# =============================================================================


def test_first_request_sets_session_cookie(client: TestClient):
    r = client.post("/meals", json=meal_payload())

    assert r.status_code == 201
    assert r.content == b""
    token = r.cookies.get(settings.session_cookie_name)
    assert token
    set_cookie = r.headers["set-cookie"]
    assert "Path=/" in set_cookie
    assert f"Max-Age={settings.session_cookie_max_age}" in set_cookie
    assert "HttpOnly" in set_cookie


def test_returning_caller_keeps_its_session(client: TestClient):
    first = client.get("/meals")
    token = first.cookies.get(settings.session_cookie_name)

    second = client.get("/meals")

    assert "set-cookie" not in second.headers
    assert client.cookies.get(settings.session_cookie_name) == token


def test_failed_first_request_still_sets_session_cookie(client: TestClient):
    r = client.get(f"/meals/{uuid.uuid4()}")

    assert r.status_code == 404
    token = r.cookies.get(settings.session_cookie_name)
    assert token
    assert "HttpOnly" in r.headers["set-cookie"]

    retry = client.post("/meals", json=meal_payload())

    assert retry.status_code == 201
    assert "set-cookie" not in retry.headers
    assert client.cookies.get(settings.session_cookie_name) == token


def test_rejected_first_request_still_sets_session_cookie(client: TestClient):
    r = client.post("/meals", json=meal_payload(name=""))

    assert r.status_code == 422
    assert r.cookies.get(settings.session_cookie_name)


# =============================================================================
# CRUD
# =============================================================================


def test_create_meal(client: TestClient):
    _create_meal(client)

    r = client.get("/meals")
    assert r.status_code == 200
    meals = r.json()["meals"]
    assert len(meals) == 1
    assert meals[0]["name"] == "Grilled chicken salad"
    assert meals[0]["description"] == "Chicken breast, lettuce, olive oil"
    assert meals[0]["occurredAt"] == LUNCH_AT
    assert meals[0]["isOnDiet"] is True
    uuid.UUID(meals[0]["id"])
    assert "owner" not in meals[0]


def test_create_meal_with_iso_datetime(client: TestClient):
    _create_meal(client, occurred_at="2024-03-04T12:30:00Z")

    meal = client.get("/meals").json()["meals"][0]
    assert meal["occurredAt"] == LUNCH_AT


def test_list_meals_in_creation_order(client: TestClient):
    _create_meal(client, name="Dinner", occurred_at=LUNCH_AT + 6 * HOUR_MS)
    _create_meal(client, name="Breakfast", occurred_at=LUNCH_AT - 4 * HOUR_MS)

    names = [m["name"] for m in client.get("/meals").json()["meals"]]
    assert names == ["Dinner", "Breakfast"]


def test_get_specific_meal(client: TestClient):
    _create_meal(client)
    meal_id = _first_meal_id(client)

    r = client.get(f"/meals/{meal_id}")

    assert r.status_code == 200
    assert r.json() == {
        "meal": {
            "id": meal_id,
            "name": "Grilled chicken salad",
            "description": "Chicken breast, lettuce, olive oil",
            "occurredAt": LUNCH_AT,
            "isOnDiet": True,
        }
    }


def test_edit_meal(client: TestClient):
    _create_meal(client)
    meal_id = _first_meal_id(client)

    r = client.put(
        f"/meals/{meal_id}",
        json=meal_payload(name="Apple", description="Apple description", is_on_diet=False),
    )

    assert r.status_code == 204
    assert r.content == b""
    meal = client.get(f"/meals/{meal_id}").json()["meal"]
    assert meal["id"] == meal_id
    assert meal["name"] == "Apple"
    assert meal["isOnDiet"] is False


def test_delete_meal(client: TestClient):
    _create_meal(client)
    meal_id = _first_meal_id(client)

    r = client.delete(f"/meals/{meal_id}")

    assert r.status_code == 204
    assert client.get(f"/meals/{meal_id}").status_code == 404
    assert client.get("/meals").json() == {"meals": []}


def test_unknown_meal_is_404(client: TestClient):
    missing = uuid.uuid4()

    for r in (
        client.get(f"/meals/{missing}"),
        client.put(f"/meals/{missing}", json=meal_payload()),
        client.delete(f"/meals/{missing}"),
    ):
        assert r.status_code == 404
        body = r.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"
        assert body["error"]["message"] == "Meal not found"


# =============================================================================
# VALIDATION
# =============================================================================


def test_meal_id_must_be_uuid(client: TestClient):
    r = client.get("/meals/not-a-uuid")

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_meal_rejects_malformed_body(client: TestClient):
    missing_flag = meal_payload()
    del missing_flag["isOnDiet"]

    bad_bodies = [
        missing_flag,
        meal_payload(name=""),
        meal_payload(name="   "),
        meal_payload(occurred_at=10**20),
        meal_payload(occurred_at=-(10**20)),
        {**meal_payload(), "isOnDiet": "yes"},
        {**meal_payload(), "occurredAt": "yesterday"},
    ]
    for body in bad_bodies:
        r = client.post("/meals", json=body)
        assert r.status_code == 422, body
        error = r.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]

    assert client.get("/meals").json() == {"meals": []}


def test_update_meal_rejects_malformed_body(client: TestClient):
    _create_meal(client)
    meal_id = _first_meal_id(client)

    r = client.put(f"/meals/{meal_id}", json={"name": "Only a name"})

    assert r.status_code == 422
    assert client.get(f"/meals/{meal_id}").json()["meal"]["name"] == "Grilled chicken salad"


# =============================================================================
# SESSION SCOPING
# =============================================================================


def test_sessions_only_list_their_own_meals(client: TestClient, other_client: TestClient):
    _create_meal(client, name="Mine")
    _create_meal(other_client, name="Theirs")

    assert [m["name"] for m in client.get("/meals").json()["meals"]] == ["Mine"]
    assert [m["name"] for m in other_client.get("/meals").json()["meals"]] == ["Theirs"]


def test_meal_id_is_enough_to_reach_another_sessions_meal(
    client: TestClient, other_client: TestClient
):
    """Ownership is not re-checked on id-scoped routes unless enforcement is on."""
    _create_meal(client)
    meal_id = _first_meal_id(client)

    assert other_client.get(f"/meals/{meal_id}").status_code == 200
    assert other_client.put(f"/meals/{meal_id}", json=meal_payload(name="Edited")).status_code == 204
    assert client.get(f"/meals/{meal_id}").json()["meal"]["name"] == "Edited"
    assert other_client.delete(f"/meals/{meal_id}").status_code == 204
    assert client.get("/meals").json() == {"meals": []}


def test_enforced_ownership_returns_404_to_other_sessions(
    client: TestClient, other_client: TestClient, enforce_ownership
):
    _create_meal(client)
    meal_id = _first_meal_id(client)

    assert other_client.get(f"/meals/{meal_id}").status_code == 404
    assert other_client.put(f"/meals/{meal_id}", json=meal_payload()).status_code == 404
    assert other_client.delete(f"/meals/{meal_id}").status_code == 404

    assert client.get(f"/meals/{meal_id}").status_code == 200
    assert client.delete(f"/meals/{meal_id}").status_code == 204


# =============================================================================
# METRICS
# =============================================================================


def test_list_meal_metrics(client: TestClient):
    _create_meal(client, name="Meal 1", is_on_diet=True)
    _create_meal(client, name="Meal 2", is_on_diet=True)
    _create_meal(client, name="Meal 3", is_on_diet=False)

    r = client.get("/meals/metrics")

    assert r.status_code == 200
    assert r.json() == {
        "totalMeals": 3,
        "mealsOnDiet": 2,
        "mealsOffDiet": 1,
        "bestOnDietSequence": 2,
    }


def test_metrics_for_new_session(client: TestClient):
    r = client.get("/meals/metrics")

    assert r.status_code == 200
    assert r.json() == {
        "totalMeals": 0,
        "mealsOnDiet": 0,
        "mealsOffDiet": 0,
        "bestOnDietSequence": 0,
    }


def test_metrics_reflect_updates_and_deletes(client: TestClient):
    for hours, flag in [(0, True), (1, False), (2, True)]:
        _create_meal(client, occurred_at=LUNCH_AT + hours * HOUR_MS, is_on_diet=flag)
    assert client.get("/meals/metrics").json()["bestOnDietSequence"] == 1

    off_diet_id = next(
        m["id"] for m in client.get("/meals").json()["meals"] if not m["isOnDiet"]
    )
    client.put(
        f"/meals/{off_diet_id}",
        json=meal_payload(occurred_at=LUNCH_AT + HOUR_MS, is_on_diet=True),
    )

    metrics = client.get("/meals/metrics").json()
    assert metrics["mealsOffDiet"] == 0
    assert metrics["bestOnDietSequence"] == 3

    client.delete(f"/meals/{off_diet_id}")
    metrics = client.get("/meals/metrics").json()
    assert metrics["totalMeals"] == 2
    assert metrics["bestOnDietSequence"] == 2


# =============================================================================
# STORAGE FAILURES
# =============================================================================


def test_storage_unavailable_is_503(client: TestClient):
    from main import app

    broken = Mock(spec=Session)
    broken.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
    app.dependency_overrides[get_db] = lambda: broken
    try:
        r = client.get("/meals")
    finally:
        app.dependency_overrides.pop(get_db, None)

    assert r.status_code == 503
    assert r.json()["error"]["code"] == "STORAGE_UNAVAILABLE"
    broken.rollback.assert_called_once()
