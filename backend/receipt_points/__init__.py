"""Top-level package for the receipt points API.

This package contains everything required to run the FastAPI service
that scores purchase receipts: field parsers, the fixed points rule
engine, an in-memory score store and the HTTP routers that tie them
together.

To run the API locally you can execute:

```bash
python -m receipt_points
```

or, with auto reload:

```bash
uvicorn receipt_points.api.main:app --reload --port 8080
```

Scores live in process memory only and are lost on restart. You can
override configuration values using environment variables or a ``.env``
file at the project root.
"""

__version__ = "1.0.0"

__all__: list[str] = ["__version__"]
