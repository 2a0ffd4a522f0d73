# app/main.py
from dotenv import load_dotenv

load_dotenv()

import logging
import logging.config
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.appconfig import settings

# Apply logging configuration
logging.config.dictConfig(settings.LOGGING_CONFIG)

# Import routers
from app.dashboards.routes import patient_router
from app.dashboards.routes import router as dashboard_router
from app.users.auth_routers import router as auth_router
from app.users.dependencies import get_api_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("===============================================================")
    logger.info(f" 🚀 Starting {settings.APP_NAME} web layer")
    logger.info(f" ✅ Clinic API: {settings.API_BASE_URL}")
    logger.info(f" ✅ Request timeout: {settings.API_TIMEOUT_SECONDS}s")
    logger.info("===============================================================")
    yield
    # Shutdown
    get_api_client().close()
    logger.info("👋 Shutting down")


app = FastAPI(
    title=f"{settings.APP_NAME} Web",
    description="Browser-facing layer of the clinic management application",
    version="1.0.0",
    lifespan=lifespan,
)

# Include routers with prefixes
app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
app.include_router(dashboard_router, prefix="/api", tags=["Dashboard"])
app.include_router(patient_router, prefix="/api/patient", tags=["Patient Dashboard"])


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
