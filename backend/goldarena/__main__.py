"""GoldArena CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

env_file = Path(__file__).parent.parent / ".env"
load_dotenv(env_file)

from goldarena import __version__
from goldarena.chat import ALL_BOTS, get_chat_feed
from goldarena.config import get_settings
from goldarena.dashboard import DashboardSession
from goldarena.notifications import copy_trade
from goldarena.roster import get_agent
from goldarena.simulation import LeaderboardEntry, create_random_source

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def _load_session(seed: int | None) -> DashboardSession:
    settings = get_settings()
    if seed is None:
        seed = settings.simulation.seed
    return DashboardSession.load(settings, rng=create_random_source(seed))


def _print_leaderboard(entries: list[LeaderboardEntry]) -> None:
    print(
        f"{'#':>2}  {'Bot':<15} {'Account':>12} {'Return':>9} {'P&L':>9} "
        f"{'Win':>6} {'Trades':>6} {'Sharpe':>7}"
    )
    for entry in entries:
        print(
            f"{entry.rank:>2}  {entry.avatar} {entry.name:<13} "
            f"${entry.account_value:>11,.2f} {entry.return_pct:>+8.2f}% "
            f"{entry.total_pnl:>+9.0f} {entry.win_rate:>5.1f}% "
            f"{entry.trades:>6} {entry.sharpe:>7.3f}"
        )


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()

        print("\n=== GoldArena Configuration ===\n")
        print(f"Data Directory: {settings.data_dir}\n")

        sim = settings.simulation
        print("Simulation:")
        print(f"  Starting Balance: ${sim.starting_balance:,.2f}")
        print(f"  Steps: {sim.steps} x {sim.interval_hours}h")
        print(f"  Start Date: {sim.start_date.isoformat()}")
        print(f"  Balance Floor: {sim.balance_floor}")
        print(f"  Seed: {sim.seed if sim.seed is not None else 'unseeded'}\n")

        board = settings.leaderboard
        print("Leaderboard:")
        print(f"  Trades: [{board.min_trades}, {board.max_trades})")
        print(f"  Win Rate: [{board.min_win_rate}, {board.max_win_rate})\n")

        print("Notifications:")
        print(f"  Dismiss After: {settings.notifications.dismiss_after_ms} ms\n")

        print("API:")
        print(f"  Bind: {settings.api.host}:{settings.api.port}")
        print(f"  CORS Origins: {', '.join(settings.api.cors_origins)}\n")

        print(f"Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")

        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        print(f"\n❌ Failed to load configuration: {e}\n")
        return 1


def cmd_simulate(args: argparse.Namespace) -> int:
    """Generate one load and show the leaderboard and chart window."""
    try:
        session = _load_session(args.seed)
        window = session.window(args.window)

        if args.json:
            payload = {
                "roster": [agent.to_record() for agent in session.roster],
                "series": [sample.to_record() for sample in window],
                "leaderboard": [entry.to_record() for entry in session.leaderboard],
            }
            print(json.dumps(payload, indent=2, ensure_ascii=False))
            return 0

        summary = session.summary()
        print(f"\n=== {summary.season} • {summary.instrument} ===\n")
        print(
            f"{summary.bot_count} bots • ${summary.total_capital:,.0f} total capital"
        )
        if window:
            print(
                f"Window '{args.window}': {len(window)} samples "
                f"({window[0].label} → {window[-1].label})\n"
            )
        else:
            print(f"Window '{args.window}': no samples\n")

        _print_leaderboard(session.leaderboard)
        print()
        return 0

    except Exception as e:
        logger.error(f"Simulation failed: {e}", exc_info=True)
        print(f"\n❌ Simulation failed: {e}\n")
        return 1


def cmd_leaderboard(args: argparse.Namespace) -> int:
    """Print only the leaderboard."""
    try:
        session = _load_session(args.seed)
        print()
        _print_leaderboard(session.leaderboard)
        print()
        return 0

    except Exception as e:
        logger.error(f"Leaderboard failed: {e}", exc_info=True)
        print(f"\n❌ Leaderboard failed: {e}\n")
        return 1


def cmd_chat(args: argparse.Namespace) -> int:
    """Print the model chat feed."""
    try:
        for msg in get_chat_feed(args.bot):
            agent = get_agent(msg.bot)
            print(f"{agent.avatar} {agent.name:<14} {msg.time}  {msg.message}")
        return 0

    except Exception as e:
        logger.error(f"Chat failed: {e}")
        print(f"\n❌ Chat failed: {e}\n")
        return 1


def cmd_copy_trade(args: argparse.Namespace) -> int:
    """Print the copy-trade notification."""
    try:
        settings = get_settings()
        notification = copy_trade(
            args.name,
            dismiss_after_ms=settings.notifications.dismiss_after_ms,
        )
        print(f"\n✓ {notification.message} (dismisses in {notification.dismiss_after_ms} ms)\n")
        return 0

    except Exception as e:
        logger.error(f"Copy trade failed: {e}")
        print(f"\n❌ Copy trade failed: {e}\n")
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the dashboard API server."""
    try:
        import uvicorn

        from goldarena.api.server import app
        from goldarena.observability import initialize_logfire

        settings = get_settings()
        initialize_logfire(settings, app)

        host = args.host or settings.api.host
        port = args.port or settings.api.port
        print(f"\n=== GoldArena Dashboard API v{__version__} ===\n")
        print(f"Listening on http://{host}:{port}\n")

        uvicorn.run(app, host=host, port=port)
        return 0

    except KeyboardInterrupt:
        print("\n\nReceived interrupt signal. Shutting down...\n")
        return 0
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        print(f"\nFailed to start: {e}\n")
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goldarena",
        description="GoldArena: simulated AI trading competition dashboard data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"GoldArena {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_config = subparsers.add_parser(
        "config",
        help="Display merged configuration",
    )
    parser_config.set_defaults(func=cmd_config)

    parser_simulate = subparsers.add_parser(
        "simulate",
        help="Generate equity curves and the leaderboard",
    )
    parser_simulate.add_argument("--seed", type=int, default=None, help="Random seed")
    parser_simulate.add_argument(
        "--window",
        default="all",
        help="Chart window: 24h, 3d, 7d or all",
    )
    parser_simulate.add_argument(
        "--json",
        action="store_true",
        help="Dump roster, series and leaderboard as JSON",
    )
    parser_simulate.set_defaults(func=cmd_simulate)

    parser_leaderboard = subparsers.add_parser(
        "leaderboard",
        help="Print the leaderboard for a fresh load",
    )
    parser_leaderboard.add_argument("--seed", type=int, default=None, help="Random seed")
    parser_leaderboard.set_defaults(func=cmd_leaderboard)

    parser_chat = subparsers.add_parser(
        "chat",
        help="Print the model chat feed",
    )
    parser_chat.add_argument("--bot", default=ALL_BOTS, help="Bot id or 'all'")
    parser_chat.set_defaults(func=cmd_chat)

    parser_copy = subparsers.add_parser(
        "copy-trade",
        help="Show the copy-trade notification for a bot",
    )
    parser_copy.add_argument("name", help="Bot display name")
    parser_copy.set_defaults(func=cmd_copy_trade)

    parser_serve = subparsers.add_parser(
        "serve",
        help="Run the dashboard API server",
    )
    parser_serve.add_argument("--host", default=None)
    parser_serve.add_argument("--port", type=int, default=None)
    parser_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
