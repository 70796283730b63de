"""Common dependencies for FastAPI routes.

Routers never reach for module-level state: the score store lives on
``app.state`` and the receipt id factory is its own dependency so tests
can swap either through ``app.dependency_overrides``.
"""

from __future__ import annotations

import uuid
from typing import Callable

from fastapi import Request

from receipt_points.services.score_store import ScoreStore

IdFactory = Callable[[], str]


def get_score_store(request: Request) -> ScoreStore:
    """Return the score store owned by the running application."""
    return request.app.state.score_store


def new_receipt_id() -> str:
    return str(uuid.uuid4())


def get_id_factory() -> IdFactory:
    """Return the callable used to mint receipt ids."""
    return new_receipt_id
