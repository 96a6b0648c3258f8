# app/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from app.adapters.inbound.api.v1.endpoints import user_endpoint, group_endpoint, health_endpoint

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(user_endpoint.router, prefix="/users", tags=["Users"])
api_router.include_router(group_endpoint.router, prefix="/groups", tags=["Groups"])
api_router.include_router(health_endpoint.router, tags=["Health"])
