from __future__ import annotations

from typing import Any

import pytest


class FakeResponse:
    def __init__(self, data: Any) -> None:
        self.data = data


class FakeQuery:
    """Records a chained PostgREST query and answers with canned rows."""

    def __init__(self, client: "FakeSupabase", table: str) -> None:
        self.client = client
        self.table = table
        self.ops: list[tuple[str, tuple, dict]] = []

    def _record(self, name: str, *args: Any, **kwargs: Any) -> "FakeQuery":
        self.ops.append((name, args, kwargs))
        return self

    def select(self, *args: Any, **kwargs: Any) -> "FakeQuery":
        return self._record("select", *args, **kwargs)

    def eq(self, *args: Any) -> "FakeQuery":
        return self._record("eq", *args)

    def order(self, *args: Any, **kwargs: Any) -> "FakeQuery":
        return self._record("order", *args, **kwargs)

    def limit(self, *args: Any) -> "FakeQuery":
        return self._record("limit", *args)

    def insert(self, payload: Any) -> "FakeQuery":
        return self._record("insert", payload)

    def update(self, payload: Any) -> "FakeQuery":
        return self._record("update", payload)

    def upsert(self, payload: Any, **kwargs: Any) -> "FakeQuery":
        return self._record("upsert", payload, **kwargs)

    def execute(self) -> FakeResponse:
        self.client.executed.append(self)
        if self.client.error is not None:
            raise self.client.error
        return FakeResponse(self.client.rows.get(self.table, []))


class FakeRPC:
    def __init__(self, client: "FakeSupabase", name: str, params: dict) -> None:
        self.client = client
        self.name = name
        self.params = params

    def execute(self) -> FakeResponse:
        self.client.rpc_calls.append((self.name, self.params))
        if self.client.error is not None:
            raise self.client.error
        return FakeResponse(self.client.rpc_result)


class FakeSupabase:
    def __init__(self) -> None:
        self.rows: dict[str, list[dict]] = {}
        self.rpc_result: Any = True
        self.error: Exception | None = None
        self.executed: list[FakeQuery] = []
        self.rpc_calls: list[tuple[str, dict]] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rpc(self, name: str, params: dict) -> FakeRPC:
        return FakeRPC(self, name, params)

    def queries(self, table: str) -> list[FakeQuery]:
        return [query for query in self.executed if query.table == table]


@pytest.fixture
def fake_supabase(monkeypatch: pytest.MonkeyPatch) -> FakeSupabase:
    from winrep.api.routes import health
    from winrep.data import accounts_repository
    from winrep.persistence import accounts as accounts_persistence
    from winrep.persistence import database

    client = FakeSupabase()
    for module in (accounts_repository, database, accounts_persistence, health):
        monkeypatch.setattr(module, "get_supabase_client", lambda: client)
    return client


@pytest.fixture
def no_supabase(monkeypatch: pytest.MonkeyPatch) -> None:
    from winrep.api.routes import health
    from winrep.data import accounts_repository
    from winrep.persistence import accounts as accounts_persistence
    from winrep.persistence import database

    for module in (accounts_repository, database, accounts_persistence, health):
        monkeypatch.setattr(module, "get_supabase_client", lambda: None)
