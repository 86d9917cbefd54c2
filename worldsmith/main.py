# worldsmith/main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
import logging

import worldsmith.models  # noqa: F401  registers every table on Base.metadata
from worldsmith.api.routes.router import api_router
from worldsmith.database import engine, Base
from worldsmith.config import get_settings
from worldsmith.database_seeder import seed_database

# Get settings
settings = get_settings()

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables in the database
    Base.metadata.create_all(bind=engine)

    # Seed the database with a sample campaign
    if settings.SEED_DATABASE:
        seed_database()

    yield


# Initialize app
app = FastAPI(
    title="Worldsmith API",
    description="Campaign management API for tabletop game masters: worlds, regions, locations, characters, creatures, spells and lore",
    version=APP_VERSION,
    lifespan=lifespan
)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Welcome message"""
    return {
        "message": "Welcome to the Worldsmith API",
        "status": "online",
        "version": APP_VERSION
    }


@app.get("/health")
async def health():
    """Health check including a round trip to the database"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "ok"
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        db_status = "error"

    return {
        "status": "ok" if db_status == "ok" else "degraded",
        "version": APP_VERSION,
        "db": db_status
    }


@app.exception_handler(IntegrityError)
async def integrity_exception_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {str(exc.orig)}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "error": "Conflict",
            "detail": "The request conflicts with existing data"
        }
    )


# Error handler for global exceptions
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc) if not isinstance(exc, HTTPException) else exc.detail
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("worldsmith.main:app", host="0.0.0.0", port=8000, reload=True)
