"""FastAPI application for the OS update advisor."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from advisor.utils.config import load_config
from advisor.utils.logging import setup_logger
from advisor.api.routes import router

DEFAULT_CONFIG_PATH = "./config/advisor.json"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown hooks.

    Startup:
    - Initialize logger
    - Load configuration (ADVISOR_CONFIG or ./config/advisor.json)

    Shutdown:
    - Log shutdown message
    """
    logger = setup_logger("advisor", "./logs/advisor.log", level=logging.INFO)
    logger.info("OS update advisor starting up...")

    config_path = os.environ.get("ADVISOR_CONFIG", DEFAULT_CONFIG_PATH)
    app.state.config = load_config(config_path)
    logger.info(
        f"Minimum supportable version {app.state.config.minimum_supportable_version}, "
        f"upgrade path feature {app.state.config.upgrade_path_feature}"
    )

    yield

    logger.info("OS update advisor shutting down...")


app = FastAPI(
    title="OS Update Advisor",
    description="Decides which OS update action a device should be offered",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "os-update-advisor", "version": "1.0.0"}


def main():
    """Main entry point for running the server."""
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=12316,
        log_level="info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
