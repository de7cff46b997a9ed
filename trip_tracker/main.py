"""
FastAPI entrypoint for Trip Tracker backend application.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from trip_tracker.core.config import settings
from trip_tracker.core.errors import TripTrackerError, StorageError, UnauthenticatedError
from trip_tracker.api.router import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Trip Tracker API",
    description="Backend API for trips, ownership and RSVPs",
    version="1.0.0",
    debug=settings.DEBUG
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TripTrackerError)
async def trip_tracker_error_handler(request: Request, exc: TripTrackerError):
    """Translate application errors to their HTTP status."""
    headers = None
    if isinstance(exc, UnauthenticatedError):
        headers = {"WWW-Authenticate": "Bearer"}
    if isinstance(exc, StorageError):
        logger.error(
            f"Storage failure on {request.method} {request.url.path}",
            exc_info=exc.__cause__ or exc
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers
    )


# Routes are mounted at the root: /trips, /auth, /users
app.include_router(api_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Trip Tracker API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
