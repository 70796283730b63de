"""Core application infrastructure.

Exports configuration settings and the domain errors so that tests and
routers can use short import paths (e.g. `from receipt_points.core import settings`).
"""

from .config import settings  # noqa: F401
from .errors import NotFound, ParseError  # noqa: F401
