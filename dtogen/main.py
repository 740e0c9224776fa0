import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dtogen.core.config import settings
from dtogen.core.logging import configure_logging
from dtogen.api.routes import router as api_router

configure_logging(settings.log_level)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    log.info("API server running (%s) on %s:%d", settings.app_env, settings.api_host, settings.api_port)
    yield
    log.info("Shutting down API server...")


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    lifespan=lifespan
)
# Only the configured client may call a production deployment
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.client_url] if settings.app_env == "production" else ["*"],
    allow_credentials=settings.app_env == "production",
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["Authorization"],
)
app.include_router(api_router, prefix="/v1")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
