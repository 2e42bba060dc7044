import json
from datetime import date
from pathlib import Path

import pytest

from winrep.errors import PersistenceError, RateLimitExceeded
from winrep.persistence import accounts as accounts_persistence
from winrep.persistence import database
from winrep.persistence.filesystem import FileStorage


def test_file_storage_creates_run_directory(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="weekly_routes_test")

    assert run_dir.exists()
    assert run_dir.is_dir()
    assert run_dir.parent == tmp_path / "outputs"


def test_file_storage_writes_run_files(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    run_dir = storage.write_run("weekly_routes_test", {"hello": "world"}, "a,b\n1,2\n")

    assert json.loads((run_dir / "summary.json").read_text(encoding="utf-8")) == {"hello": "world"}
    assert (run_dir / "stops.csv").read_text(encoding="utf-8") == "a,b\n1,2\n"


def test_save_weekly_routes_upserts_on_user_and_week(fake_supabase):
    routes = {"Monday": {"stops": [], "googleRoute": ""}}

    saved = database.save_weekly_routes("rep-1", 3, date(2025, 3, 3), "Rockridge Rd, Lakeland FL", routes)

    assert saved is True
    query = fake_supabase.queries("weekly_routes")[0]
    name, args, kwargs = query.ops[0]
    assert name == "upsert"
    assert args[0] == {
        "user_id": "rep-1",
        "week_number": 3,
        "week_start_date": "2025-03-03",
        "origin_address": "Rockridge Rd, Lakeland FL",
        "routes": routes,
    }
    assert kwargs == {"on_conflict": "user_id,week_start_date"}


def test_save_weekly_routes_without_supabase(no_supabase):
    assert database.save_weekly_routes("rep-1", 3, date(2025, 3, 3), "origin", {}) is False


def test_save_weekly_routes_raises_on_write_failure(fake_supabase):
    fake_supabase.error = RuntimeError("boom")

    with pytest.raises(PersistenceError):
        database.save_weekly_routes("rep-1", 3, date(2025, 3, 3), "origin", {})


def test_get_weekly_routes_returns_first_row(fake_supabase):
    fake_supabase.rows["weekly_routes"] = [{"user_id": "rep-1", "week_number": 3}]

    record = database.get_weekly_routes("rep-1", date(2025, 3, 3))

    assert record == {"user_id": "rep-1", "week_number": 3}
    query = fake_supabase.queries("weekly_routes")[0]
    assert ("eq", ("week_start_date", "2025-03-03"), {}) in query.ops


def test_get_weekly_routes_missing(fake_supabase):
    assert database.get_weekly_routes("rep-1", date(2025, 3, 3)) is None


def test_rate_limit_allows_when_rpc_returns_true(fake_supabase):
    database.check_rate_limit("rep-1")

    name, params = fake_supabase.rpc_calls[0]
    assert name == "check_rate_limit"
    assert params == {
        "p_user_id": "rep-1",
        "p_function_name": "generate-weekly-routes",
        "p_max_requests": 20,
        "p_window_minutes": 1,
    }


def test_rate_limit_exceeded(fake_supabase):
    fake_supabase.rpc_result = False

    with pytest.raises(RateLimitExceeded):
        database.check_rate_limit("rep-1")


def test_rate_limit_not_enforced_without_supabase(no_supabase):
    database.check_rate_limit("rep-1")


def test_log_function_call_inserts_entry(fake_supabase):
    database.log_function_call(
        status_code=200,
        response_time_ms=12,
        method="POST",
        request_path="/api/routes/weekly",
        user_id="rep-1",
        metadata={"weekNumber": 3},
    )

    query = fake_supabase.queries("edge_function_logs")[0]
    name, args, _ = query.ops[0]
    assert name == "insert"
    assert args[0]["status_code"] == 200
    assert args[0]["metadata"] == {"weekNumber": 3}
    assert "error_message" not in args[0]


def test_log_function_call_swallows_errors(fake_supabase):
    fake_supabase.error = RuntimeError("logs table missing")

    database.log_function_call(status_code=500, response_time_ms=1, method="POST", request_path="/x")


def test_create_account_scopes_to_user(fake_supabase):
    fake_supabase.rows["route_accounts"] = [
        {"id": "A1", "name": "Celebration", "address": "Celebration FL", "region": "Orlando", "tags": ["firstStop"]}
    ]

    account = accounts_persistence.create_account("rep-1", {"name": "Celebration", "region": "Orlando"})

    assert account.id == "A1"
    assert account.tags == ("firstStop",)
    name, args, _ = fake_supabase.queries("route_accounts")[0].ops[0]
    assert name == "insert"
    assert args[0]["user_id"] == "rep-1"
    assert args[0]["is_active"] is True


def test_deactivate_account_soft_deletes(fake_supabase):
    fake_supabase.rows["route_accounts"] = [{"id": "A1", "is_active": False}]

    assert accounts_persistence.deactivate_account("rep-1", "A1") is True
    query = fake_supabase.queries("route_accounts")[0]
    assert query.ops[0] == ("update", ({"is_active": False},), {})
    assert ("eq", ("user_id", "rep-1"), {}) in query.ops


def test_update_missing_account_returns_none(fake_supabase):
    assert accounts_persistence.update_account("rep-1", "nope", {"name": "New"}) is None


def test_account_writes_require_supabase(no_supabase):
    with pytest.raises(PersistenceError):
        accounts_persistence.deactivate_account("rep-1", "A1")
