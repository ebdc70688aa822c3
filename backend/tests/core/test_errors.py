"""Tests for the error hierarchy — status codes, body flags, response envelope."""

from blog.core.errors import (
    BlogError, ErrorCategory, InvalidPageError, InvalidPostIdError,
    NotAuthenticatedError, PostNotFoundError, StoreError,
)


def test_status_codes():
    assert InvalidPostIdError("x").http_status == 400
    assert InvalidPageError(0).http_status == 400
    assert NotAuthenticatedError().http_status == 401
    assert PostNotFoundError("a" * 24).http_status == 404
    assert StoreError("boom", "find").http_status == 500


def test_all_errors_share_base():
    for err in (
        InvalidPostIdError("x"), InvalidPageError(0), NotAuthenticatedError(),
        PostNotFoundError("a" * 24), StoreError("boom", "find"),
    ):
        assert isinstance(err, BlogError)


def test_auth_and_not_found_have_no_body():
    assert NotAuthenticatedError.has_body is False
    assert PostNotFoundError.has_body is False
    assert InvalidPostIdError.has_body is True


def test_not_found_records_post_id():
    err = PostNotFoundError("a" * 24)
    assert err.context.post_id == "a" * 24
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND


def test_store_error_response_carries_detail():
    response = StoreError("disk full", "insert").to_response()
    error = response["error"]
    assert error["code"] == "STORE_ERROR"
    assert error["detail"] == "disk full"
    assert error["operation"] == "insert"
    assert error["category"] == "store"


def test_invalid_id_response_envelope():
    error = InvalidPostIdError("nope").to_response()["error"]
    assert error["code"] == "INVALID_POST_ID"
    assert "nope" in error["message"]
    assert error["severity"] == "error"
