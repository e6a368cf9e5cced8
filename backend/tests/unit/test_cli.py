"""Unit tests for the command line interface."""

import json

from goldarena.__main__ import main


def test_simulate_json(capsys) -> None:
    assert main(["simulate", "--seed", "3", "--window", "3d", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert len(payload["roster"]) == 4
    assert len(payload["series"]) == 12
    assert [row["rank"] for row in payload["leaderboard"]] == [1, 2, 3, 4]


def test_simulate_table(capsys) -> None:
    assert main(["simulate", "--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert "Season 1" in out
    assert "Aureus Alpha" in out
    assert "120 samples" in out


def test_chat_filter(capsys) -> None:
    assert main(["chat", "--bot", "bullion"]) == 0

    out = capsys.readouterr().out
    assert "Closed short -$127" in out
    assert "Midas Touch" not in out


def test_chat_unknown_bot_fails() -> None:
    assert main(["chat", "--bot", "silver"]) == 1


def test_copy_trade(capsys) -> None:
    assert main(["copy-trade", "GoldFish AI"]) == 0
    assert "Copied GoldFish AI trade settings" in capsys.readouterr().out


def test_no_command_prints_help() -> None:
    assert main([]) == 1
