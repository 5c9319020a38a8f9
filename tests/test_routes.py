import pytest

from app.api import dependencies
from app.api.rest_routes import auth, expenses, feedback
from app.core.security import create_access_token
from app.models.advisory import FarmerAnswer
from app.models.market_price import MarketAnalysis
from app.models.user import Language, User


@pytest.fixture
def user_store(monkeypatch):
    """In-memory replacement for the user collection."""
    users = {}

    async def save_user(user):
        users[user.id] = User.model_validate(user.model_dump(by_alias=True))
        return users[user.id]

    async def get_user_from_id(user_id):
        return users.get(user_id)

    async def delete_user(user_id):
        return users.pop(user_id, None) is not None

    async def delete_expenses_from_user_id(user_id):
        return 0

    monkeypatch.setattr(auth, "save_user", save_user)
    monkeypatch.setattr(auth, "db_delete_user", delete_user)
    monkeypatch.setattr(auth, "delete_expenses_from_user_id", delete_expenses_from_user_id)
    monkeypatch.setattr(dependencies, "get_user_from_id", get_user_from_id)
    return users


@pytest.fixture
def expense_store(monkeypatch):
    items = []

    async def save_expense(expense):
        items.append(expense)
        return expense

    async def get_expenses_from_user_id(user_id):
        mine = [e for e in items if e.user_id == user_id]
        return sorted(mine, key=lambda e: e.created_at, reverse=True)

    async def delete_expense(expense_id, user_id):
        for e in items:
            if e.id == expense_id and e.user_id == user_id:
                items.remove(e)
                return True
        return False

    monkeypatch.setattr(expenses, "save_expense", save_expense)
    monkeypatch.setattr(expenses, "get_expenses_from_user_id", get_expenses_from_user_id)
    monkeypatch.setattr(expenses, "delete_expense", delete_expense)
    return items


def test_root(anonymous_client):
    response = anonymous_client.get("/")
    assert response.status_code == 200
    assert "Kisan Sathi" in response.json()["message"]


def test_helplines_are_public(anonymous_client):
    response = anonymous_client.get("/helplines/")

    assert response.status_code == 200
    body = response.json()
    assert [h["name"] for h in body] == [
        "Kisan Call Centre",
        "PM-KISAN Helpdesk",
        "Fertilizer Helpline",
        "National Seeds Corporation",
    ]
    assert body[0]["dial_uri"] == "tel:18001801551"
    assert body[0]["number_display"] == "1800-180-1551"


def test_protected_routes_need_a_token(anonymous_client):
    assert anonymous_client.get("/market-prices/").status_code == 401
    assert anonymous_client.post("/advisory/question", json={"question": "?"}).status_code == 401


def test_invalid_token_is_rejected(anonymous_client):
    response = anonymous_client.get(
        "/auth/user", headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401


def test_onboard_then_use_token(anonymous_client, user_store):
    response = anonymous_client.post(
        "/auth/onboard",
        json={"name": "Sita", "village": "Sita Pur", "crop": "Rice", "language": "मराठी"},
    )

    assert response.status_code == 201
    token = response.json()["access_token"]
    assert response.json()["user"]["language"] == "मराठी"

    me = anonymous_client.get("/auth/user", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["village"] == "Sita Pur"
    assert me.json()["crop"] == "Rice"


def test_language_change_applies_to_next_request(anonymous_client, user_store):
    user = User(name="Gurpreet", village="Khanna", language=Language.ENGLISH)
    user_store[user.id] = user
    headers = {"Authorization": f"Bearer {create_access_token({'sub': user.id})}"}

    response = anonymous_client.patch(
        "/auth/user", json={"language": "ਪੰਜਾਬੀ", "crop": "Maize"}, headers=headers
    )

    assert response.status_code == 200
    assert user_store[user.id].language is Language.PUNJABI
    assert anonymous_client.get("/auth/user", headers=headers).json()["crop"] == "Maize"


def test_empty_profile_update_is_rejected(anonymous_client, user_store):
    user = User(name="Gurpreet", village="Khanna")
    user_store[user.id] = user
    headers = {"Authorization": f"Bearer {create_access_token({'sub': user.id})}"}

    response = anonymous_client.patch("/auth/user", json={}, headers=headers)

    assert response.status_code == 400


def test_token_for_deleted_user_is_rejected(anonymous_client, user_store):
    user = User(name="Ramesh", village="Rampur")
    user_store[user.id] = user
    headers = {"Authorization": f"Bearer {create_access_token({'sub': user.id})}"}

    assert anonymous_client.delete("/auth/delete", headers=headers).status_code == 204
    assert anonymous_client.get("/auth/user", headers=headers).status_code == 401


def test_market_prices_route(client, fake_model):
    fake_model.result = MarketAnalysis(summary="Rampur Mandi is best for wheat.")

    response = client.get("/market-prices/")

    assert response.status_code == 200
    body = response.json()
    assert body["summary"] == "Rampur Mandi is best for wheat."
    assert [p["is_best"] for p in body["prices"]].count(True) == 1


def test_market_prices_route_busy_model(client, fake_model):
    fake_model.error = RuntimeError("503 overloaded")

    response = client.get("/market-prices/", params={"location": "Nagpur"})

    assert response.status_code == 503
    assert "busy" in response.json()["detail"]


def test_question_route(client, fake_model):
    fake_model.result = FarmerAnswer(answer="Sow in November.")

    response = client.post("/advisory/question", json={"question": "When to sow wheat?"})

    assert response.status_code == 200
    assert response.json() == {"answer": "Sow in November."}


def test_question_route_rejects_empty_question(client):
    response = client.post("/advisory/question", json={"question": ""})
    assert response.status_code == 422


def test_diagnose_route_rejects_non_image(client):
    response = client.post(
        "/plant-health/diagnose", json={"photo_data_uri": "data:text/plain;base64,aGk="}
    )
    assert response.status_code == 422


def test_expense_tracker(client, expense_store, context):
    first = client.post("/expenses/", json={"category": "seeds", "amount": 500})
    second = client.post("/expenses/", json={"category": "labor", "amount": 1250.5})

    assert first.status_code == 201
    assert second.status_code == 201

    listing = client.get("/expenses/").json()
    assert listing["total"] == 1750.5
    assert {e["category"] for e in listing["expenses"]} == {"seeds", "labor"}
    assert all(e["user_id"] == context.user.id for e in listing["expenses"])

    expense_id = first.json()["_id"]
    assert client.delete(f"/expenses/{expense_id}").status_code == 204
    assert client.delete(f"/expenses/{expense_id}").status_code == 404
    assert client.get("/expenses/").json()["total"] == 1250.5


@pytest.mark.parametrize(
    "payload",
    [{"category": "seeds", "amount": 0}, {"category": "tractor", "amount": 100}],
)
def test_expense_validation(client, expense_store, payload):
    assert client.post("/expenses/", json=payload).status_code == 422


def test_feedback_is_saved(client, monkeypatch, context):
    saved = []

    async def save_feedback(item):
        saved.append(item)
        return item

    monkeypatch.setattr(feedback, "save_feedback", save_feedback)

    response = client.post("/feedback/", json={"helpful": True})

    assert response.status_code == 201
    assert saved[0].helpful is True
    assert saved[0].user_id == context.user.id
