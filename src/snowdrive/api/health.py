# src/snowdrive/api/health.py
from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness only; upstream providers are not probed."""
    return {"status": "ok"}
