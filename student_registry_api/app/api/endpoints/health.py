"""Liveness endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Report that the service is up, with its name and version."""
    return {
        "status": "ok",
        "service": request.app.title,
        "version": request.app.version,
    }
