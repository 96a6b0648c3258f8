# app/adapters/inbound/api/v1/endpoints/health_endpoint.py

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Health Check")
async def health_check():
    return {"status": "ok"}
