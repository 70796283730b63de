"""Health check endpoint for monitoring."""
from typing import Dict, Any
from fastapi import APIRouter, Depends

from receipt_points.api.dependencies import get_score_store
from receipt_points.core.config import settings
from receipt_points.services.score_store import ScoreStore

router = APIRouter()

@router.get("/health")
def health_check(store: ScoreStore = Depends(get_score_store)) -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "version": settings.VERSION,
        "receipts": len(store),
    }
