"""Health Probe — liveness endpoint for the hosting platform.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - Does not touch Gemini or the credential
"""

from fastapi import APIRouter, status

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "gemini-relay",
        "version": "1.0.0",
    }
