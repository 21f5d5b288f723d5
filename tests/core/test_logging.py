import logging

from glowboard.core.logging import REDACTED, RedactingFilter, sanitize_for_log


def test_sanitize_for_log_masks_sensitive_keys():
    """Test that secrets are masked and other values kept"""
    data = {"email": "owner@glowboard.test", "password": "hunter2", "token": "abc", "location": "UWS"}

    sanitized = sanitize_for_log(data)

    assert sanitized["password"] == REDACTED
    assert sanitized["token"] == REDACTED
    assert sanitized["email"] == "owner@glowboard.test"
    assert sanitized["location"] == "UWS"
    # Input is left untouched
    assert data["password"] == "hunter2"


def test_sanitize_for_log_passes_through_non_mappings():
    """Test that non-mapping values are returned unchanged"""
    assert sanitize_for_log("plain message") == "plain message"
    assert sanitize_for_log(42) == 42


def test_redacting_filter_masks_record_args():
    """Test that the filter rewrites mapping arguments of a log record"""
    record = logging.LogRecord(
        "glowboard", logging.INFO, __file__, 1,
        "payload %s", ({"api_key": "k-123", "location": "Midtown"},), None,
    )

    assert RedactingFilter().filter(record) is True
    assert record.getMessage() == "payload {'api_key': '[REDACTED]', 'location': 'Midtown'}"
