import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from registry.api.deps import get_settings
from registry.api.routes import admin, public
from registry.rules.loader import load_rules

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load rules on startup; refuse to start if they are invalid."""
    settings = get_settings()
    try:
        rules = load_rules(settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    logger.info(
        "Rules %s loaded from %s; data dir %s",
        rules.project.rules_version,
        settings.rules_path,
        settings.data_dir,
    )
    yield


app = FastAPI(
    title="Owners Registry API",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(public.router, prefix="/api/public", tags=["Public"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
