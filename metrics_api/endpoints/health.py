"""Health endpoint."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Liveness probe — always returns ok if process is running."""
    return {"status": "ok"}
