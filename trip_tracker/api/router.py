"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from trip_tracker.api.routes import auth, users, trips

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(trips.router)
