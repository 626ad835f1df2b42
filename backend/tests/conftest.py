"""Test fixtures: the app wired to in-memory repositories.

Every route reaches MongoDB only through the repository dependencies
(get_user_repository, get_plant_repository, get_order_repository), so the
tests override those three and never open a database connection.
Credentials are real JWTs signed with the test secret.
"""

import os

os.environ["ENV"] = "test"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["STRIPE_SK_KEY"] = "sk_test_dummy"

from collections import defaultdict

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from main import app
from utils.jwt import create_access_token
from utils.orders import get_order_repository
from utils.plants import get_plant_repository
from utils.users import get_user_repository


class FakeUserRepository:
    def __init__(self):
        self.docs: dict[str, dict] = {}

    def add(self, email, role="customer", status="none", **fields):
        self.docs[email] = {"_id": ObjectId(), "email": email, "role": role, "status": status, **fields}
        return self.docs[email]

    async def find_by_email(self, email):
        doc = self.docs.get(email)
        return dict(doc) if doc else None

    async def upsert(self, email, on_insert, always):
        if email not in self.docs:
            self.docs[email] = {"_id": ObjectId(), "email": email, **on_insert}
        self.docs[email].update(always)
        return dict(self.docs[email])

    async def update_fields(self, email, fields):
        if email not in self.docs:
            return False
        self.docs[email].update(fields)
        return True

    async def list_excluding(self, email):
        return [dict(d) for e, d in self.docs.items() if e != email]

    async def count_by_role(self, role):
        return sum(1 for d in self.docs.values() if d.get("role") == role)

    async def count_all(self):
        return len(self.docs)


class FakePlantRepository:
    def __init__(self):
        self.docs: dict[ObjectId, dict] = {}

    def add(self, **plant):
        oid = ObjectId()
        self.docs[oid] = {"_id": oid, **plant}
        return self.docs[oid]

    async def insert(self, plant):
        oid = ObjectId()
        self.docs[oid] = {"_id": oid, **plant}
        return str(oid)

    async def list_all(self):
        return [dict(d) for d in self.docs.values()]

    async def find_by_id(self, plant_id):
        doc = self.docs.get(plant_id)
        return dict(doc) if doc else None

    async def adjust_quantity(self, plant_id, delta):
        doc = self.docs.get(plant_id)
        if not doc or doc["quantity"] + delta < 0:
            return False
        doc["quantity"] += delta
        return True

    async def count_all(self):
        return len(self.docs)


class FakeOrderRepository:
    def __init__(self):
        self.docs: list[dict] = []

    def add(self, _id=None, **order):
        doc = {"_id": _id or ObjectId(), **order}
        self.docs.append(doc)
        return doc

    async def insert(self, order):
        doc = self.add(**order)
        return str(doc["_id"])

    async def find_by_customer(self, email):
        return [dict(d) for d in self.docs if d.get("customer", {}).get("email") == email]

    async def find_by_seller(self, email):
        return [dict(d) for d in self.docs if d.get("seller", {}).get("email") == email]

    async def count_all(self):
        return len(self.docs)

    async def daily_revenue(self):
        days = defaultdict(lambda: {"revenue": 0, "orders": 0})
        for d in self.docs:
            day = d["_id"].generation_time.strftime("%Y-%m-%d")
            days[day]["revenue"] += d.get("price", 0)
            days[day]["orders"] += 1
        return [{"date": day, **totals} for day, totals in sorted(days.items())]


@pytest.fixture()
def users():
    return FakeUserRepository()


@pytest.fixture()
def plants():
    return FakePlantRepository()


@pytest.fixture()
def orders():
    return FakeOrderRepository()


@pytest.fixture()
def session_for():
    """Build a Cookie header carrying a valid credential for `email`."""

    def _session(email: str) -> dict:
        token = create_access_token({"email": email})
        return {"Cookie": f"token={token}"}

    return _session


@pytest_asyncio.fixture()
async def client(users, plants, orders):
    app.dependency_overrides[get_user_repository] = lambda: users
    app.dependency_overrides[get_plant_repository] = lambda: plants
    app.dependency_overrides[get_order_repository] = lambda: orders

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
