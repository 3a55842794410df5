"""Assertion helper utilities for tests."""

from __future__ import annotations

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def assert_json_keys(data: dict, required: set[str]) -> None:
    """Ensure that all required keys are present in ``data``.

    Parameters
    ----------
    data:
        JSON object under test.
    required:
        Set of required keys that must exist in ``data``.

    Raises
    ------
    AssertionError
        If any required key is missing.
    """

    missing = required - data.keys()
    assert not missing, f"Missing keys: {', '.join(sorted(missing))}"


def assert_json_error(resp, status: int, message: str) -> None:
    """Check the status, content type and ``{"error": ...}`` body of ``resp``."""

    assert resp.status_code == status
    assert resp.headers["Content-Type"] == JSON_CONTENT_TYPE
    assert resp.get_json() == {"error": message}
