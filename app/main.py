"""
Pomotimer API - FastAPI Application

Provides authentication and per-user Pomodoro settings APIs.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pomotimer_core.db import init_db
from pomotimer_core.exceptions import PomotimerError
from pomotimer_core.utils import error_response

from app.config import get_settings
from app.routes import auth, pomodoro_settings

settings_config = get_settings()

# Configure logging
logging.basicConfig(
    level=settings_config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    log.info(f"Starting {settings_config.SERVICE_NAME} service on port {settings_config.SERVICE_PORT}")

    try:
        init_db()
        log.info("Database initialized")
    except Exception as e:
        log.error(f"Database initialization failed: {e}")
        raise

    yield

    # Shutdown
    log.info(f"Shutting down {settings_config.SERVICE_NAME} service")


# Create FastAPI application
app = FastAPI(
    title="Pomotimer API",
    description="Authentication and Pomodoro settings API",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
origins = settings_config.CORS_ORIGINS.split(',') if settings_config.CORS_ORIGINS != '*' else ['*']
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PomotimerError)
async def pomotimer_error_handler(request: Request, exc: PomotimerError):
    """Render service errors with their status code"""
    return JSONResponse(status_code=exc.status_code, content=error_response(exc.message))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render framework and auth errors in the same envelope as service errors"""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(pomodoro_settings.router, prefix="/api/pomodoro-settings", tags=["Pomodoro Settings"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": settings_config.SERVICE_NAME}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Pomotimer API",
        "version": "1.0.0",
        "endpoints": [
            "/api/auth",
            "/api/pomodoro-settings",
        ]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings_config.SERVICE_PORT)
