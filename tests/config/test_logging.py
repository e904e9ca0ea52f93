"""Tests for the logging context processor."""

from dsvflow.config.logging import add_app_context


def test_app_context_names_storage_and_shop():
    event = add_app_context(None, "info", {"event": "order_created"})

    assert event["storage_backend"] == "memory"
    assert event["shop"] == "DSV Enterprise"
    assert event["app"]
    assert event["event"] == "order_created"


def test_app_context_keeps_explicit_values():
    event = add_app_context(None, "info", {"event": "x", "storage_backend": "sqlite"})
    assert event["storage_backend"] == "sqlite"
