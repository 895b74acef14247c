"""Component tests for the labbook CLI.

Run standalone: pytest tests/components/ -v
"""

import json

import httpx
from typer.testing import CliRunner

from labbook.cli.main import app

runner = CliRunner()

ALICE = {"id": 7, "name": "Alice", "email": "alice@lab.org", "role": "user"}


class TestConnectionCommands:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "labbook" in result.output

    def test_resolve_prints_production_url(self, cli_env, backend):
        result = runner.invoke(app, ["resolve"])
        assert result.exit_code == 0, result.output
        assert "labbook.example.com" in result.output
        assert backend.calls.call_count == 0

    def test_health_ok(self, cli_env, health_route):
        health_route.mock(return_value=httpx.Response(200, json={"status": "healthy"}))
        result = runner.invoke(app, ["health"])
        assert result.exit_code == 0, result.output
        assert "healthy" in result.output

    def test_health_unreachable_exits_1(self, cli_env, health_route):
        health_route.mock(side_effect=httpx.ConnectError)
        result = runner.invoke(app, ["health"])
        assert result.exit_code == 1
        assert "unreachable" in result.output


class TestAuthCommands:
    def test_login_stores_token(self, cli_env, backend):
        backend.post("/auth/login").mock(
            return_value=httpx.Response(200, json={"success": True, "token": "tok-1", "user": ALICE})
        )
        result = runner.invoke(app, ["login", "alice@lab.org", "--password", "pw"])
        assert result.exit_code == 0, result.output
        assert "Alice" in result.output
        assert json.loads(cli_env.read_text())["authToken"] == "tok-1"

    def test_login_rejected(self, cli_env, backend):
        backend.post("/auth/login").mock(return_value=httpx.Response(401, json={"message": "Invalid credentials"}))
        result = runner.invoke(app, ["login", "alice@lab.org", "--password", "nope"])
        assert result.exit_code == 1
        assert "Invalid credentials" in result.output

    def test_whoami_without_token(self, cli_env, backend):
        result = runner.invoke(app, ["whoami"])
        assert result.exit_code == 1
        assert "Not signed in" in result.output
        assert backend.calls.call_count == 0

    def test_logout_clears_token(self, cli_env, backend):
        cli_env.write_text(json.dumps({"authToken": "tok-1"}))
        backend.post("/auth/logout").mock(return_value=httpx.Response(200, json={"success": True}))
        result = runner.invoke(app, ["logout"])
        assert result.exit_code == 0, result.output
        assert "authToken" not in json.loads(cli_env.read_text())


class TestBookingCommands:
    def test_equipment_table(self, cli_env, backend):
        backend.get("/equipment").mock(
            return_value=httpx.Response(200, json={"equipment": [{"id": 3, "name": "qPCR", "status": "available"}]})
        )
        result = runner.invoke(app, ["equipment"])
        assert result.exit_code == 0, result.output
        assert "qPCR" in result.output

    def test_bookings_requires_login(self, cli_env, backend):
        backend.get("/bookings/my-bookings").mock(return_value=httpx.Response(401, json={"message": "No token"}))
        result = runner.invoke(app, ["bookings"])
        assert result.exit_code == 1
        assert "labbook login" in result.output

    def test_bookings_show_state_glyphs(self, cli_env, backend):
        """Each booking state carries its own mark in the status column."""
        backend.get("/bookings/my-bookings").mock(
            return_value=httpx.Response(
                200,
                json={
                    "bookings": [
                        {"id": 1, "equipment_name": "qPCR", "booking_date": "2026-10-20", "status": "pending"},
                        {"id": 2, "equipment_name": "FACS", "booking_date": "2026-10-21", "status": "rejected"},
                    ]
                },
            )
        )
        result = runner.invoke(app, ["bookings"])
        assert result.exit_code == 0, result.output
        assert "◔ pending" in result.output
        assert "⊘ rejected" in result.output

    def test_book(self, cli_env, backend):
        cli_env.write_text(json.dumps({"authToken": "tok-1"}))
        route = backend.post("/bookings").mock(
            return_value=httpx.Response(201, json={"booking": {"id": 9, "status": "pending"}})
        )
        result = runner.invoke(app, ["book", "3", "2026-10-20", "09:00", "10:30"])
        assert result.exit_code == 0, result.output
        assert "#9" in result.output
        assert route.calls.last.request.headers["Authorization"] == "Bearer tok-1"

    def test_slots(self, cli_env, backend):
        backend.get("/bookings/available-slots").mock(
            return_value=httpx.Response(200, json={"slots": [{"start_time": "09:00", "end_time": "10:00"}]})
        )
        result = runner.invoke(app, ["slots", "3", "2026-10-20"])
        assert result.exit_code == 0, result.output
        assert "09:00" in result.output

