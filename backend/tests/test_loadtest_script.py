from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "loadtest_receipts.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("loadtest_receipts", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_concurrent_load_keeps_every_score(client, store):
    loadtest = _load_script()
    summary = loadtest.run_load(client, loadtest.SAMPLE_RECEIPT, count=60, workers=6)
    assert summary["submitted"] == 60
    assert summary["duplicate_ids"] == 0
    assert summary["distinct_points"] == [loadtest.SAMPLE_POINTS]
    assert len(store) == 60


def test_guard_refuses_without_opt_in(monkeypatch):
    loadtest = _load_script()
    monkeypatch.delenv("ALLOW_DEV_LOADTEST", raising=False)
    with pytest.raises(SystemExit) as excinfo:
        loadtest.guard("http://localhost:8080")
    assert excinfo.value.code == 2


def test_guard_refuses_production_urls(monkeypatch):
    loadtest = _load_script()
    monkeypatch.setenv("ALLOW_DEV_LOADTEST", "1")
    with pytest.raises(SystemExit) as excinfo:
        loadtest.guard("https://points.prod.example.com")
    assert excinfo.value.code == 3
