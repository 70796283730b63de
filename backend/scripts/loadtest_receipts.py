"""Load test: concurrent receipt submissions against a running API.

Submits the same sample receipt from a pool of threads, then fetches the
points for every returned id and checks that each one resolves to the
expected score and that no id was handed out twice.

Safeguards:
  - Requires env var ALLOW_DEV_LOADTEST=1 to run.
  - Refuses base URLs that look like production.

Usage:
  ALLOW_DEV_LOADTEST=1 python scripts/loadtest_receipts.py [base_url] [count] [workers]

Example:
  ALLOW_DEV_LOADTEST=1 python scripts/loadtest_receipts.py http://localhost:8080 500 16
"""
from __future__ import annotations

import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List

import httpx

SAMPLE_RECEIPT: Dict[str, Any] = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}
SAMPLE_POINTS = 109


def guard(base_url: str) -> None:
    if os.environ.get("ALLOW_DEV_LOADTEST") != "1":
        print("Refusing to run. Set ALLOW_DEV_LOADTEST=1 to proceed.", file=sys.stderr)
        sys.exit(2)
    if any(token in base_url.lower() for token in ("prod", "production", "live")):
        print(f"Base URL '{base_url}' looks like production; aborting.", file=sys.stderr)
        sys.exit(3)


def run_load(client: httpx.Client, receipt: Dict[str, Any], count: int, workers: int) -> Dict[str, Any]:
    """Submit ``count`` receipts over ``workers`` threads and verify every stored score.

    ``client`` may be any httpx-compatible client, including FastAPI's
    ``TestClient``.
    """

    def submit(_: int) -> str:
        resp = client.post("/receipts/process", json=receipt)
        resp.raise_for_status()
        return resp.json()["id"]

    def fetch(receipt_id: str) -> int:
        resp = client.get(f"/receipts/{receipt_id}/points")
        resp.raise_for_status()
        return resp.json()["points"]

    started = time.perf_counter()
    with ThreadPoolExecutor(max_workers=workers) as pool:
        ids: List[str] = list(pool.map(submit, range(count)))
        points: List[int] = list(pool.map(fetch, ids))
    elapsed = time.perf_counter() - started

    distinct = set(points)
    return {
        "submitted": len(ids),
        "duplicate_ids": len(ids) - len(set(ids)),
        "distinct_points": sorted(distinct),
        "elapsed_s": elapsed,
    }


def main() -> int:
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8080"
    count = int(sys.argv[2]) if len(sys.argv) > 2 else 200
    workers = int(sys.argv[3]) if len(sys.argv) > 3 else 8
    guard(base_url)
    with httpx.Client(base_url=base_url, timeout=10) as client:
        summary = run_load(client, SAMPLE_RECEIPT, count, workers)
    print(f"Load test summary base_url={base_url} workers={workers}")
    print(
        f"submitted={summary['submitted']} duplicate_ids={summary['duplicate_ids']} "
        f"points={summary['distinct_points']} time_s={summary['elapsed_s']:.2f}"
    )
    ok = summary["duplicate_ids"] == 0 and summary["distinct_points"] == [SAMPLE_POINTS]
    return 0 if ok else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
