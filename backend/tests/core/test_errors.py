"""Error Hierarchy — codes, statuses and the REST envelope.

Invariants:
    - ResourceNotFoundError → 404 NOT_FOUND, "<resource> '<id>' not found"
    - DocumentUnreadableError → 500 INTERNAL_ERROR, reason kept off the envelope
    - to_response() exposes only code and message
"""

from tos_api.core.errors import (
    DocumentUnreadableError, ErrorCategory, ErrorSeverity,
    ResourceNotFoundError, TosApiError,
)


def test_not_found_error_fields():
    err = ResourceNotFoundError("File", "tos.txt")
    assert isinstance(err, TosApiError)
    assert err.http_status == 404
    assert err.code == "NOT_FOUND"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.message == "File 'tos.txt' not found"
    assert str(err) == err.message


def test_not_found_response_envelope():
    err = ResourceNotFoundError("File", "../../etc/passwd")
    assert err.to_response() == {
        "error": {
            "code": "NOT_FOUND",
            "message": "File '../../etc/passwd' not found",
        },
    }


def test_unreadable_error_keeps_reason_in_context_only():
    err = DocumentUnreadableError("tos.txt", "Permission denied")
    assert err.http_status == 500
    assert err.code == "INTERNAL_ERROR"
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.context.requested_file == "tos.txt"
    assert err.context.debug_info == {"reason": "Permission denied"}
    assert "Permission denied" not in str(err.to_response())


def test_context_timestamp_is_timezone_aware():
    err = ResourceNotFoundError("File", "x")
    assert err.context.timestamp.tzinfo is not None
