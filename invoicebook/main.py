# invoicebook/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.engine import Engine

from invoicebook.api.activities import router as activities_router
from invoicebook.api.error_handlers import register_error_handlers
from invoicebook.api.invoices import router as invoices_router
from invoicebook.api.users import router as users_router
from invoicebook.config import get_settings
from invoicebook.db.engine import get_engine, ping
from invoicebook.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Invoicebook API started (%s)", settings.environment)
    yield
    # Only dispose a pool that was actually built
    if get_engine.cache_info().currsize:
        get_engine().dispose()
    logger.info("Invoicebook API shutting down")


app = FastAPI(
    title="Invoicebook API",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/health/ready")
def readiness_check(engine: Engine = Depends(get_engine)):
    if not ping(engine):
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready"}


@app.get("/v1/hello-world", response_class=PlainTextResponse)
def hello_world() -> str:
    return "Hello from Invoicebook"


app.include_router(users_router)
app.include_router(invoices_router)
app.include_router(activities_router)
