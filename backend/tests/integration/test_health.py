"""Tests for the health endpoint."""

from __future__ import annotations

from tests.helpers.assertions import JSON_CONTENT_TYPE, assert_json_error, assert_json_keys


def test_health_reports_status(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.headers["Content-Type"] == JSON_CONTENT_TYPE
    body = resp.get_json()
    assert_json_keys(body, {"status", "db", "version", "commit"})
    assert body["status"] == "ok"
    assert body["db"] == "ok"


def test_health_sets_request_id(client):
    resp = client.get("/health")

    assert resp.headers.get("X-Request-ID")


def test_unknown_route_is_json(client):
    assert_json_error(client.get("/nope"), 404, "not found")
