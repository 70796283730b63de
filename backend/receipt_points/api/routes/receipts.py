"""API routes for receipt scoring and points retrieval."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from receipt_points.api.dependencies import IdFactory, get_id_factory, get_score_store
from receipt_points.core.errors import NotFound, ParseError
from receipt_points.core.observability import sentry_breadcrumb, sentry_set_tags
from receipt_points.models.schemas import Receipt, ReceiptPoints, ReceiptProcessed
from receipt_points.services.rule_engine import score_breakdown
from receipt_points.services.score_store import ScoreStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


# Handlers are plain ``def`` so Starlette runs them on its worker threads.
@router.post("/process", response_model=ReceiptProcessed)
def process_receipt(
    receipt: Receipt,
    store: ScoreStore = Depends(get_score_store),
    new_id: IdFactory = Depends(get_id_factory),
) -> ReceiptProcessed:
    """Score a receipt and return the id its points are stored under."""
    try:
        breakdown = score_breakdown(receipt)
    except ParseError as exc:
        logger.warning("Rejected receipt from %r: %s", receipt.retailer, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot compute points: {exc}",
        )
    points = breakdown.total
    for reason in breakdown.reasons():
        logger.debug("[score] %s", reason)

    receipt_id = new_id()
    store.put(receipt_id, points)
    sentry_set_tags({"receipt_id": receipt_id})
    sentry_breadcrumb("receipts", "receipt scored", data={"points": points, "items": len(receipt.items)})
    logger.info("Processed receipt %s from %r: %d points", receipt_id, receipt.retailer, points)
    return ReceiptProcessed(id=receipt_id)


@router.get("/{receipt_id}/points", response_model=ReceiptPoints)
def get_receipt_points(
    receipt_id: str,
    store: ScoreStore = Depends(get_score_store),
) -> ReceiptPoints:
    """Return the points previously computed for ``receipt_id``."""
    try:
        points = store.get(receipt_id)
    except NotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Receipt not found")
    return ReceiptPoints(points=points)
