"""JSON provider that keeps credential values out of HTTP payloads."""

from __future__ import annotations

from typing import Any

from flask import Flask
from flask.json.provider import DefaultJSONProvider

from signup_api.core.secret import REDACTED_JSON, Secret


class RedactingJSONProvider(DefaultJSONProvider):
    """Flask JSON provider rendering :class:`Secret` values as a placeholder."""

    @staticmethod
    def default(o: Any) -> Any:
        if isinstance(o, Secret):
            return REDACTED_JSON
        return DefaultJSONProvider.default(o)


def init_app(app: Flask) -> None:
    """Install :class:`RedactingJSONProvider` on ``app``."""

    app.json = RedactingJSONProvider(app)
    app.json.sort_keys = bool(app.config.get("JSON_SORT_KEYS", False))
