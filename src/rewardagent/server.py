"""
Keep-alive HTTP listener.

Some hosting platforms stop processes that do not hold an open port. This
FastAPI app answers every request with a fixed plaintext body; it carries no
event traffic.
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .config import AgentSettings

logger = logging.getLogger(__name__)

_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(settings: AgentSettings) -> FastAPI:
    """Build the keep-alive app for *settings*."""
    app = FastAPI(title=f"{settings.identity.name} reward agent", docs_url=None, redoc_url=None, openapi_url=None)
    body = f"{settings.identity.name} is running"

    @app.api_route("/{path:path}", methods=_METHODS)
    async def alive(path: str) -> PlainTextResponse:
        return PlainTextResponse(body)

    return app


def create_server(settings: AgentSettings) -> uvicorn.Server:
    """Build a uvicorn server for the keep-alive app, not yet started."""
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    return uvicorn.Server(config)


async def serve(settings: AgentSettings) -> None:
    server = create_server(settings)
    logger.info("HTTP keepalive listening on port %d", settings.port)
    await server.serve()
