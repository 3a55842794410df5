"""WSGI entrypoint for ``gunicorn signup_api.wsgi:app``."""

from __future__ import annotations

from signup_api import create_app

app = create_app()
