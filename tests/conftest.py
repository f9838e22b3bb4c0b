"""Pytest fixtures: an in-memory stand-in for the Supabase client.

The fake implements just the query-builder chain the services use
(select/eq/gte/in_/order/limit/offset, insert/upsert/update, execute) and the
handful of auth calls, so the API can be exercised end to end without a
hosted project.
"""
import threading
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from superconnector.database.supabase_client import get_supabase
from superconnector.modules.auth.service import clear_session_cache
from superconnector.main import app

_EPOCH = datetime(2025, 4, 15, 18, 0, tzinfo=timezone.utc)


class FakeStoreError(Exception):
    pass


class FakeQuery:
    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.op = "select"
        self.columns = None
        self.payload = None
        self.on_conflict = None
        self.filters = []
        self.orders = []
        self._limit = None
        self._offset = 0

    def select(self, columns="*"):
        self.op = "select"
        if columns.strip() != "*":
            self.columns = [c.strip() for c in columns.split(",")]
        return self

    def insert(self, payload):
        self.op, self.payload = "insert", payload
        return self

    def upsert(self, payload, on_conflict=None):
        self.op, self.payload, self.on_conflict = "upsert", payload, on_conflict
        return self

    def update(self, payload):
        self.op, self.payload = "update", payload
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def gte(self, column, value):
        self.filters.append(lambda row: row.get(column) is not None and row.get(column) >= value)
        return self

    def in_(self, column, values):
        values = list(values)
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def order(self, column, desc=False):
        self.orders.append((column, desc))
        return self

    def limit(self, n):
        self._limit = n
        return self

    def offset(self, n):
        self._offset = n
        return self

    def execute(self):
        return self.db.run(self)


class FakeAuth:
    OTP_CODE = "123456"

    def __init__(self):
        self.tokens = {}
        self.users_by_email = {}
        self.otp_requests = []
        self.signed_out = 0

    def add_user(self, user_id=None, email=None, token=None, **metadata):
        user_id = user_id or str(uuid.uuid4())
        user = SimpleNamespace(
            id=user_id,
            email=email or f"{user_id}@example.com",
            user_metadata=metadata,
            app_metadata={},
        )
        self.users_by_email[user.email] = user
        token = token or f"token-{user_id}"
        self.tokens[token] = user
        return user, token

    def sign_in_with_otp(self, credentials):
        self.otp_requests.append(credentials)
        return SimpleNamespace(user=None, session=None)

    def verify_otp(self, params):
        if params["token"] != self.OTP_CODE:
            raise FakeStoreError("Token has expired or is invalid")
        user = self.users_by_email.get(params["email"])
        if user is None:
            user, _ = self.add_user(email=params["email"])
        token = f"token-{uuid.uuid4()}"
        self.tokens[token] = user
        return SimpleNamespace(user=user, session=SimpleNamespace(access_token=token))

    def get_user(self, jwt=None):
        user = self.tokens.get(jwt)
        if user is None:
            raise FakeStoreError("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=user)

    def sign_out(self):
        self.signed_out += 1


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.failing = set()
        self.calls = []
        self.auth = FakeAuth()
        self._seq = 0
        self._lock = threading.Lock()

    def table(self, name):
        return FakeQuery(self, name)

    def fail(self, table):
        """Make every query against ``table`` raise like a dropped connection."""
        self.failing.add(table)

    def _stamp(self):
        self._seq += 1
        return (_EPOCH + timedelta(seconds=self._seq)).isoformat()

    def seed(self, table, **row):
        with self._lock:
            return dict(self._insert(table, row))

    def _insert(self, table, payload):
        row = {"id": str(uuid.uuid4()), "created_at": self._stamp()}
        row.update(payload)
        self.tables.setdefault(table, []).append(row)
        return row

    def run(self, query):
        with self._lock:
            self.calls.append((query.table, query.op))
            if query.table in self.failing:
                raise FakeStoreError(f"connection reset while querying {query.table}")
            table = self.tables.setdefault(query.table, [])

            if query.op == "insert":
                return SimpleNamespace(data=[dict(self._insert(query.table, query.payload))])

            if query.op == "upsert":
                keys = (query.on_conflict or "id").split(",")
                for row in table:
                    if all(row.get(k) == query.payload.get(k) for k in keys):
                        row.update(query.payload)
                        return SimpleNamespace(data=[dict(row)])
                return SimpleNamespace(data=[dict(self._insert(query.table, query.payload))])

            matched = [row for row in table if all(f(row) for f in query.filters)]

            if query.op == "update":
                for row in matched:
                    row.update(query.payload)
                return SimpleNamespace(data=[dict(row) for row in matched])

            for column, desc in reversed(query.orders):
                matched.sort(key=lambda r: (r.get(column) is None, r.get(column) or ""), reverse=desc)
            matched = matched[query._offset:]
            if query._limit is not None:
                matched = matched[:query._limit]
            if query.columns:
                return SimpleNamespace(data=[{c: row.get(c) for c in query.columns} for row in matched])
            return SimpleNamespace(data=[dict(row) for row in matched])

    def count(self, table, **filters):
        return sum(1 for row in self.tables.get(table, []) if all(row.get(k) == v for k, v in filters.items()))


@pytest.fixture(scope="function")
def fake_supabase():
    clear_session_cache()
    yield FakeSupabase()
    clear_session_cache()


@pytest.fixture(scope="function")
def client(fake_supabase):
    """FastAPI TestClient with the Supabase dependency overridden by the fake."""
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def sign_in(fake: FakeSupabase, user_id: str = None, **metadata) -> tuple:
    """Register a user with the fake auth provider; returns (user_id, headers)."""
    user, token = fake.auth.add_user(user_id=user_id, **metadata)
    return user.id, {"Authorization": f"Bearer {token}"}


def seed_profile(fake: FakeSupabase, user_id: str, name: str = None, bio: str = None, **fields) -> dict:
    return fake.seed("superconnector_profiles", id=user_id, name=name, bio=bio, **fields)


def seed_event(fake: FakeSupabase, creator_id: str = "creator", title: str = "Stanford Salon", start: datetime = None) -> dict:
    start = start or datetime(2025, 4, 15, 18, 0, tzinfo=timezone.utc)
    return fake.seed(
        "superconnector_events",
        title=title,
        description="A gathering of minds to discuss technology, art, and the future.",
        location="Stanford University, Palo Alto, CA",
        start_time=start.isoformat(),
        end_time=(start + timedelta(hours=3)).isoformat(),
        creator_id=creator_id,
    )


def seed_rsvp(fake: FakeSupabase, event_id: str, user_id: str, status: str) -> dict:
    return fake.seed("superconnector_attendees", event_id=event_id, user_id=user_id, rsvp_status=status)
