"""Unit tests for the dashboard API."""

import random

import pytest
from fastapi.testclient import TestClient

from goldarena.api import server
from goldarena.config import Settings
from goldarena.dashboard import DashboardSession


@pytest.fixture
def client(monkeypatch):
    session = DashboardSession.load(Settings(), rng=random.Random(21))
    monkeypatch.setattr(server, "_session", session)
    return TestClient(server.app)


def test_health(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_roster(client) -> None:
    roster = client.get("/api/roster").json()

    assert [bot["id"] for bot in roster] == ["aureus", "midas", "bullion", "goldfish"]
    assert set(roster[0]) == {"id", "name", "color", "avatar", "config"}


def test_series_windows(client) -> None:
    full = client.get("/api/series").json()
    day = client.get("/api/series", params={"window": "24h"}).json()

    assert len(full) == 120
    assert day == full[-4:]
    assert {"timestamp", "label", "aureus", "midas", "bullion", "goldfish"} <= set(full[0])


def test_leaderboard(client) -> None:
    board = client.get("/api/leaderboard").json()

    assert [row["rank"] for row in board] == [1, 2, 3, 4]
    values = [row["accountValue"] for row in board]
    assert values == sorted(values, reverse=True)
    assert all(row["biggestLoss"] <= 0 for row in board)


def test_leaderboard_is_cached(client) -> None:
    assert client.get("/api/leaderboard").json() == client.get("/api/leaderboard").json()


def test_summary_and_legend(client) -> None:
    summary = client.get("/api/summary").json()
    legend = client.get("/api/legend").json()

    assert summary["total_capital"] == 40000
    assert summary["started_on"] == "2025-11-20"
    assert len(legend) == 4


def test_chat(client) -> None:
    assert len(client.get("/api/chat").json()) == 5
    assert len(client.get("/api/chat", params={"bot": "midas"}).json()) == 1
    assert client.get("/api/chat", params={"bot": "silver"}).status_code == 404


def test_copy_trade(client) -> None:
    response = client.post("/api/copy-trade/bullion")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Copied Bullion Beast trade settings"
    assert body["dismiss_after_ms"] == 3000


def test_copy_trade_unknown_agent(client) -> None:
    assert client.post("/api/copy-trade/silver").status_code == 404


def test_reload_replaces_session(client) -> None:
    before = server._session

    response = client.post("/api/reload")

    assert response.status_code == 200
    assert response.json()["samples"] == 120
    assert server._session is not before
