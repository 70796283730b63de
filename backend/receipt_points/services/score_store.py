"""In-memory store of computed receipt points.

Usage guidelines:
- One store per application, created by ``create_app`` and reached via
  the ``get_score_store`` dependency; there is no module-level instance.
- Entries are write-once and live for the lifetime of the process.
- Request handlers run on Starlette's worker threads, so every access
  goes through the store's lock.
"""
from __future__ import annotations

import threading
from typing import Dict

from receipt_points.core.errors import NotFound


class ScoreStore:
    """Thread-safe mapping of receipt id to points."""

    def __init__(self) -> None:
        self._scores: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        """Record ``points`` for a freshly minted ``receipt_id``.

        Raises ``ValueError`` if the id already has a score; recorded
        scores are never replaced.
        """
        with self._lock:
            if receipt_id in self._scores:
                raise ValueError(f"points already recorded for receipt {receipt_id!r}")
            self._scores[receipt_id] = points

    def get(self, receipt_id: str) -> int:
        with self._lock:
            try:
                return self._scores[receipt_id]
            except KeyError:
                raise NotFound(receipt_id) from None

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._scores

    def __len__(self) -> int:
        with self._lock:
            return len(self._scores)
