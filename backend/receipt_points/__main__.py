"""Run the API with uvicorn: ``python -m receipt_points``."""

import uvicorn

from receipt_points.core.config import settings


def main() -> None:
    uvicorn.run(
        "receipt_points.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":  # pragma: no cover
    main()
