"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.routes import router
from src.config import get_settings
from src.heuristics import SpeedHeuristicsChecker
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting speed heuristics service")

    app.state.checker = SpeedHeuristicsChecker.from_settings(settings)

    logger.info(
        "speed heuristics service ready",
        extra={
            "fetch_timeout_seconds": settings.fetch_timeout_seconds,
            "auth_enabled": bool(settings.tool_bearer_token),
        },
    )

    yield

    logger.info("shutting down speed heuristics service")


app = FastAPI(title="Speed Heuristics Service", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    port = settings.port
    logger.info("discovery endpoint: http://localhost:%d/discovery", port)
    uvicorn.run(app, host="0.0.0.0", port=port, log_config=None)
