"""Unit tests for leaderboard derivation."""

import random
from datetime import datetime, timezone

import pytest

from goldarena.exceptions import InsufficientDataError
from goldarena.roster import BOTS
from goldarena.simulation import (
    EquitySample,
    derive_leaderboard,
    derive_leaderboard_from_series,
    generate_equity_series,
)


def make_sample(values: dict[str, float]) -> EquitySample:
    return EquitySample(
        timestamp=datetime(2025, 12, 19, 18, tzinfo=timezone.utc),
        label="12/19",
        values=values,
    )


FIXED = make_sample(
    {"aureus": 11234.56, "midas": 10500.0, "bullion": 9400.25, "goldfish": 10800.0}
)


def test_one_entry_per_agent_with_ranks() -> None:
    board = derive_leaderboard(FIXED, rng=random.Random(1))

    assert len(board) == len(BOTS) == 4
    assert sum(entry.rank for entry in board) == 1 + 2 + 3 + 4
    assert [entry.rank for entry in board] == [1, 2, 3, 4]


def test_sorted_descending_by_account_value() -> None:
    board = derive_leaderboard(FIXED, rng=random.Random(1))

    assert [entry.id for entry in board] == ["aureus", "goldfish", "midas", "bullion"]
    values = [entry.account_value for entry in board]
    assert values == sorted(values, reverse=True)


def test_ties_keep_roster_order() -> None:
    tied = make_sample({agent.id: 10000.0 for agent in BOTS})

    board = derive_leaderboard(tied, rng=random.Random(4))

    assert [entry.id for entry in board] == [agent.id for agent in BOTS]


def test_return_and_pnl_are_exact() -> None:
    board = {e.id: e for e in derive_leaderboard(FIXED, rng=random.Random(2))}

    aureus = board["aureus"]
    assert aureus.account_value == 11234.56
    assert aureus.return_pct == pytest.approx((11234.56 - 10000) / 10000 * 100)
    assert aureus.total_pnl == pytest.approx(1234.56)

    bullion = board["bullion"]
    assert bullion.return_pct == pytest.approx(-5.9975)
    assert bullion.total_pnl == pytest.approx(-599.75)


def test_random_stats_within_ranges() -> None:
    for seed in range(25):
        for entry in derive_leaderboard(FIXED, rng=random.Random(seed)):
            assert isinstance(entry.trades, int)
            assert 50 <= entry.trades < 200
            assert 30 <= entry.win_rate < 50
            assert entry.biggest_loss <= 0
            assert entry.biggest_win >= abs(entry.return_pct) * 50 - 0.01
            assert entry.trades * 0.5 - 0.01 <= entry.fees < entry.trades * 0.5 + 50.01
            assert entry.return_pct / 10 - 0.001 <= entry.sharpe <= entry.return_pct / 10 + 0.501


def test_stats_are_rounded() -> None:
    for entry in derive_leaderboard(FIXED, rng=random.Random(9)):
        assert round(entry.sharpe, 3) == entry.sharpe
        assert round(entry.fees, 2) == entry.fees
        assert round(entry.biggest_win, 2) == entry.biggest_win
        assert round(entry.biggest_loss, 2) == entry.biggest_loss


def test_rederiving_keeps_deterministic_fields() -> None:
    first = {e.id: e for e in derive_leaderboard(FIXED, rng=random.Random(1))}
    second = {e.id: e for e in derive_leaderboard(FIXED, rng=random.Random(2))}

    for agent_id in first:
        assert first[agent_id].account_value == second[agent_id].account_value
        assert first[agent_id].return_pct == second[agent_id].return_pct
        assert first[agent_id].total_pnl == second[agent_id].total_pnl


def test_derive_from_series_uses_last_sample() -> None:
    series = generate_equity_series(rng=random.Random(8))

    board = derive_leaderboard_from_series(series, rng=random.Random(8))

    for entry in board:
        assert entry.account_value == series[-1].values[entry.id]


def test_empty_series_raises() -> None:
    with pytest.raises(InsufficientDataError):
        derive_leaderboard_from_series([])


def test_missing_sample_raises() -> None:
    with pytest.raises(InsufficientDataError):
        derive_leaderboard(None)

    with pytest.raises(InsufficientDataError):
        derive_leaderboard(make_sample({}))


def test_sample_missing_an_agent_raises() -> None:
    partial = make_sample({"aureus": 10000.0, "midas": 10000.0})

    with pytest.raises(InsufficientDataError, match="bullion"):
        derive_leaderboard(partial)


def test_record_uses_presentation_keys() -> None:
    record = derive_leaderboard(FIXED, rng=random.Random(3))[0].to_record()

    for key in (
        "id",
        "name",
        "color",
        "avatar",
        "config",
        "rank",
        "accountValue",
        "returnPct",
        "totalPnL",
        "winRate",
        "trades",
        "sharpe",
        "fees",
        "biggestWin",
        "biggestLoss",
    ):
        assert key in record
