import structlog
import uvicorn
from fastapi import FastAPI

from .logging import configure_logging
from .schemas import HealthInfo, HelloInfo, RootInfo
from .settings import HOST, get_settings
from .utils import now_iso, uptime_seconds

app = FastAPI(title="Hello REST API", version="1.0.0")


# === Informational endpoints ===


@app.get("/", response_model=RootInfo)
def root() -> RootInfo:
    return RootInfo()


@app.get("/hello", response_model=HelloInfo)
def hello() -> HelloInfo:
    return HelloInfo(timestamp=now_iso())


@app.get("/health", response_model=HealthInfo)
def health() -> HealthInfo:
    """Liveness probe: reads the clock only, never blocks."""
    return HealthInfo(uptime=uptime_seconds(), timestamp=now_iso())


# === Server bootstrap ===


def run() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    logger = structlog.get_logger(__name__)
    logger.info(f"Server starting on port {settings.PORT}", port=settings.PORT)
    # uvicorn exits non-zero if the port cannot be bound
    uvicorn.run(app, host=HOST, port=settings.PORT)
