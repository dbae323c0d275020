# =============================================================================
# tests/fakes.py - In-Memory Supabase Stand-In
# =============================================================================
# A small fake of the two SDK surfaces the household service uses:
# - client.table(name): PostgREST builder (select/insert/update/delete,
#   eq/gte/lte filters, multi-key order, limit)
# - client.auth: password sign-in/sign-up/sign-out and get_session()
#
# Rows are stored as JSON-mode dicts, exactly what PostgREST would return.
# Every executed request is recorded in `calls` so tests can assert on the
# filters and orderings the service asked for.
# =============================================================================

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any
from uuid import uuid4

from supabase import AuthApiError

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


@dataclass
class RecordedCall:
    """One executed request."""
    table: str
    op: str
    payload: dict[str, Any] | None
    filters: list[tuple[str, str, Any]]
    orders: list[tuple[str, bool]]


@dataclass
class FakeResponse:
    data: list[dict[str, Any]]
    count: int | None = None


class FakeQuery:
    """Chainable request builder for one table."""

    def __init__(self, db: FakeSupabase, table: str):
        self._db = db
        self._table = table
        self._op = "select"
        self._payload: dict[str, Any] | None = None
        self._filters: list[tuple[str, str, Any]] = []
        self._orders: list[tuple[str, bool]] = []
        self._limit: int | None = None

    # -- operations -----------------------------------------------------------

    def select(self, *columns: str, **kwargs: Any) -> FakeQuery:
        self._op = "select"
        return self

    def insert(self, row: dict[str, Any]) -> FakeQuery:
        self._op = "insert"
        self._payload = dict(row)
        return self

    def update(self, row: dict[str, Any]) -> FakeQuery:
        self._op = "update"
        self._payload = dict(row)
        return self

    def delete(self) -> FakeQuery:
        self._op = "delete"
        return self

    # -- modifiers ------------------------------------------------------------

    def eq(self, column: str, value: Any) -> FakeQuery:
        self._filters.append(("eq", column, value))
        return self

    def gte(self, column: str, value: Any) -> FakeQuery:
        self._filters.append(("gte", column, value))
        return self

    def lte(self, column: str, value: Any) -> FakeQuery:
        self._filters.append(("lte", column, value))
        return self

    def order(self, column: str, desc: bool = False, **kwargs: Any) -> FakeQuery:
        self._orders.append((column, desc))
        return self

    def limit(self, count: int) -> FakeQuery:
        self._limit = count
        return self

    # -- execution ------------------------------------------------------------

    def _matches(self, row: dict[str, Any]) -> bool:
        for op, column, value in self._filters:
            current = row.get(column)
            if op == "eq" and current != value:
                return False
            if op == "gte" and (current is None or current < value):
                return False
            if op == "lte" and (current is None or current > value):
                return False
        return True

    def _sorted(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        # Stable sorts applied from the last key to the first
        for column, desc in reversed(self._orders):
            rows = sorted(rows, key=lambda r: (r.get(column) is None, r.get(column)), reverse=desc)
        return rows

    def execute(self) -> FakeResponse:
        self._db.calls.append(
            RecordedCall(self._table, self._op, self._payload, list(self._filters), list(self._orders))
        )
        error = self._db.failures.pop((self._table, self._op), None)
        if error is not None:
            raise error

        rows = self._db.tables.setdefault(self._table, [])

        if self._op == "insert":
            row = self._db.with_server_defaults(self._table, self._payload or {})
            rows.append(row)
            return FakeResponse(data=[dict(row)])

        matched = [row for row in rows if self._matches(row)]

        if self._op == "update":
            for row in matched:
                row.update(self._payload or {})
            return FakeResponse(data=[dict(row) for row in matched])

        if self._op == "delete":
            self._db.tables[self._table] = [row for row in rows if not self._matches(row)]
            return FakeResponse(data=[dict(row) for row in matched])

        result = self._sorted(matched)
        if self._limit is not None:
            result = result[: self._limit]
        return FakeResponse(data=[dict(row) for row in result], count=len(result))


class FakeAuth:
    """Password auth with auto-confirmed sign-ups."""

    def __init__(self):
        self.users: dict[str, tuple[str, SimpleNamespace]] = {}
        self.session: SimpleNamespace | None = None
        self.require_confirmation = False

    def register(self, email: str, password: str) -> SimpleNamespace:
        user = SimpleNamespace(id=str(uuid4()), email=email)
        self.users[email] = (password, user)
        return user

    def _start_session(self, user: SimpleNamespace) -> SimpleNamespace:
        self.session = SimpleNamespace(
            user=user,
            access_token=f"token-{user.id}",
            expires_at=1_900_000_000,
        )
        return self.session

    def sign_in_with_password(self, credentials: dict[str, str]) -> SimpleNamespace:
        entry = self.users.get(credentials["email"])
        if entry is None or entry[0] != credentials["password"]:
            raise AuthApiError("Invalid login credentials", 400, "invalid_credentials")
        session = self._start_session(entry[1])
        return SimpleNamespace(user=session.user, session=session)

    def sign_up(self, credentials: dict[str, str]) -> SimpleNamespace:
        if credentials["email"] in self.users:
            raise AuthApiError("User already registered", 422, "user_already_exists")
        user = self.register(credentials["email"], credentials["password"])
        if self.require_confirmation:
            return SimpleNamespace(user=user, session=None)
        session = self._start_session(user)
        return SimpleNamespace(user=user, session=session)

    def sign_out(self) -> None:
        self.session = None

    def get_session(self) -> SimpleNamespace | None:
        return self.session


@dataclass
class FakeSupabase:
    """Stand-in for supabase.Client."""
    tables: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)
    failures: dict[tuple[str, str], Exception] = field(default_factory=dict)
    auth: FakeAuth = field(default_factory=FakeAuth)
    _clock: Any = field(default_factory=lambda: itertools.count(1))

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail_next(self, table: str, op: str, error: Exception) -> None:
        """Make the next `op` on `table` raise `error`."""
        self.failures[(table, op)] = error

    def calls_to(self, table: str, op: str | None = None) -> list[RecordedCall]:
        return [c for c in self.calls if c.table == table and (op is None or c.op == op)]

    def with_server_defaults(self, table: str, payload: dict[str, Any]) -> dict[str, Any]:
        # Strictly increasing timestamps keep created_at orderings deterministic
        now = (_EPOCH + timedelta(seconds=next(self._clock))).isoformat().replace("+00:00", "Z")
        row = dict(payload)
        row.setdefault("id", str(uuid4()))
        if table == "group_members":
            row.setdefault("joined_at", now)
        else:
            row.setdefault("created_at", now)
        if table == "groups":
            row.setdefault("invite_code", uuid4().hex[:8])
        return row

    def seed(self, table: str, *rows: dict[str, Any]) -> list[dict[str, Any]]:
        """Insert rows directly, bypassing call recording."""
        stored = [self.with_server_defaults(table, row) for row in rows]
        self.tables.setdefault(table, []).extend(stored)
        return stored
