"""Shared fixtures.

Settings are read once per process, so the test environment is exported
before anything from `healthhub` is imported. MongoDB is replaced by
mongomock-motor; it has no server transactions, so the unit of work runs on
its compensating path.
"""
import os
import tempfile
from uuid import uuid4

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/healthhub_test")
os.environ["MONGODB_TRANSACTIONS"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["APP_DEBUG"] = "false"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="healthhub-logs-")

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from healthhub import database
from healthhub.constants import ApprovalStatus, Role
from healthhub.main import app
from healthhub.models import Admin, Customer, DeliveryPartner
from healthhub.security import create_admin_token, hash_password

from .factories import SUPERADMIN_PASSWORD


@pytest.fixture
async def db():
    # fresh database per test
    await database.init_db(client=AsyncMongoMockClient(), database_name=f"healthhub_test_{uuid4().hex}")
    yield
    await database.close_db()


@pytest.fixture
async def client(db):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def superadmin(db) -> Admin:
    admin = Admin(
        name="Root",
        email="root@healthhub.io",
        password=hash_password(SUPERADMIN_PASSWORD),
        role=Role.SUPERADMIN,
    )
    await admin.insert()
    return admin


@pytest.fixture
def auth_headers():
    def _headers(admin: Admin) -> dict:
        return {"Authorization": f"Bearer {create_admin_token(admin)}"}

    return _headers


@pytest.fixture
def su_headers(superadmin, auth_headers) -> dict:
    return auth_headers(superadmin)


@pytest.fixture
def make_customer(db):
    counter = {"n": 0}

    async def _make(**overrides) -> Customer:
        counter["n"] += 1
        n = counter["n"]
        data = {
            "name": f"Customer {n}",
            "email": f"customer{n}@mail.io",
            "phoneNumber": f"90000000{n:02d}",
            "password": hash_password("pw"),
            "otp": "123456",
        }
        data.update(overrides)
        customer = Customer(**data)
        await customer.insert()
        return customer

    return _make


@pytest.fixture
def make_delivery_partner(db):
    counter = {"n": 0}

    async def _make(**overrides) -> DeliveryPartner:
        counter["n"] += 1
        n = counter["n"]
        data = {
            "name": f"Rider {n}",
            "phoneNumber": f"80000000{n:02d}",
            "vehicleType": "bike",
            "approvalStatus": ApprovalStatus.PENDING,
        }
        data.update(overrides)
        partner = DeliveryPartner(**data)
        await partner.insert()
        return partner

    return _make

