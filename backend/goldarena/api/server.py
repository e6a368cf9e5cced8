"""FastAPI dashboard server for the GoldArena competition."""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from goldarena import __version__
from goldarena.chat import ALL_BOTS, get_chat_feed
from goldarena.config import get_settings
from goldarena.dashboard import DashboardSession
from goldarena.exceptions import InsufficientDataError, UnknownAgentError
from goldarena.notifications import copy_trade
from goldarena.roster import BOTS, get_agent

logger = logging.getLogger(__name__)

app = FastAPI(title="GoldArena Dashboard API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_session: DashboardSession | None = None


def get_session() -> DashboardSession:
    """Return the cached session, loading it on first use."""
    global _session
    if _session is None:
        _session = DashboardSession.load(get_settings())
    return _session


def reset_session() -> DashboardSession:
    """Discard the current load and generate a new one."""
    global _session
    _session = DashboardSession.load(get_settings())
    return _session


@app.exception_handler(InsufficientDataError)
async def insufficient_data_handler(request: Request, exc: InsufficientDataError):
    logger.error(f"Insufficient data for {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": "insufficient data"})


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.get("/api/roster")
async def get_roster() -> list[dict[str, str]]:
    """Return the static competitor roster."""
    return [agent.to_record() for agent in BOTS]


@app.get("/api/series")
async def get_series(window: str = "all") -> list[dict[str, Any]]:
    """Return the equity series sliced to the requested window."""
    return [sample.to_record() for sample in get_session().window(window)]


@app.get("/api/leaderboard")
async def get_leaderboard() -> list[dict[str, Any]]:
    """Return the pre-sorted leaderboard."""
    return [entry.to_record() for entry in get_session().leaderboard]


@app.get("/api/legend")
async def get_legend():
    return get_session().legend()


@app.get("/api/summary")
async def get_summary():
    return get_session().summary().model_dump(mode="json")


@app.get("/api/chat")
async def get_chat(bot: str = ALL_BOTS):
    """Return the chat feed, optionally for a single bot."""
    try:
        return [msg.model_dump() for msg in get_chat_feed(bot)]
    except UnknownAgentError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post("/api/copy-trade/{agent_id}")
async def post_copy_trade(agent_id: str):
    """Return the toast shown after copying an agent's settings."""
    try:
        agent = get_agent(agent_id)
    except UnknownAgentError as e:
        raise HTTPException(status_code=404, detail=str(e))

    notification = copy_trade(
        agent.name,
        dismiss_after_ms=get_settings().notifications.dismiss_after_ms,
    )
    return notification.model_dump(mode="json")


@app.post("/api/reload")
async def reload_session():
    """Start a new load with a fresh walk and fresh stats."""
    session = reset_session()
    return {"samples": len(session.series), "leader": session.leaderboard[0].id}
