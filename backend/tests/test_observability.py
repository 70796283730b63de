from __future__ import annotations

from receipt_points.core import observability
from receipt_points.core.config import Settings


def test_before_send_scrubs_secrets_and_body():
    event = {
        "request": {
            "method": "POST",
            "headers": {"Authorization": "Bearer x", "Cookie": "a=b", "Content-Type": "application/json"},
            "data": {"retailer": "Target"},
        }
    }
    scrubbed = observability._before_send(event)
    assert scrubbed["request"]["headers"] == {"Content-Type": "application/json"}
    assert "data" not in scrubbed["request"]
    assert scrubbed["request"]["method"] == "POST"


def test_sentry_helpers_are_noops_without_dsn(monkeypatch):
    monkeypatch.setattr(observability.settings, "SENTRY_DSN", None)
    assert observability.init_sentry("api") is False
    observability.sentry_set_tags({"receipt_id": "r1"})
    observability.sentry_breadcrumb("receipts", "receipt scored")
    observability.sentry_capture(RuntimeError("boom"))


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.PORT == 9090
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.HOST == "0.0.0.0"
