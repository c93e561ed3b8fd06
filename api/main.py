import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from core import db, errors, logging_setup, settings
from odometer import router as odometer_router
from vehicles import router as vehicles_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings.load_env_file()
    logging_setup.configure_logging()
    # Initialize the DB pool once per process. Failing here aborts startup.
    try:
        await db.init_pool()
    except Exception:
        logger.critical("db_connect_failed", exc_info=True)
        raise
    logger.info("server_started")
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.register_error_handlers(app)

app.include_router(vehicles_router.router, tags=["vehicles"])
app.include_router(odometer_router.router, tags=["odometer"])


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Hello, World!"


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    """
    Console entry point: load `.env`, validate configuration, then serve with uvicorn.
    """
    settings.load_env_file()
    logging_setup.configure_logging()
    try:
        settings.database_url()
        port = settings.http_port()
    except settings.ConfigError as exc:
        logger.critical("invalid_configuration: %s", exc)
        raise SystemExit(1) from exc

    uvicorn.run(app, host=settings.http_host(), port=port)


if __name__ == "__main__":
    run()
