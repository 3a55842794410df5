"""Flask CLI commands for operator-driven account management."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from signup_api.core.extensions import db
from signup_api.core.secret import Secret
from signup_api.core.security import DEFAULT_HASH_METHOD
from signup_api.repositories import UserRepository
from signup_api.services import (
    Deadline,
    RegistrationService,
    ServiceContext,
    SignUpRequest,
    validate_signup_request,
)
from signup_api.services._shared.errors import (
    InfrastructureError,
    InvalidRegistrationError,
    UserAlreadyExistsError,
)

LOGGER = logging.getLogger(__name__)


@click.group("accounts")
def accounts_cli() -> None:
    """Account management commands."""


@accounts_cli.command("create")
@click.argument("username")
@click.option("--email", default="", help="Optional contact email.")
@click.option("--first-name", default="", help="Optional given name.")
@click.option("--last-name", default="", help="Optional family name.")
@click.password_option("--password", help="Prompted (hidden) when omitted.")
@with_appcontext
def create_command(
    username: str,
    email: str,
    first_name: str,
    last_name: str,
    password: str,
) -> None:
    """Register USERNAME through the same pipeline as ``POST /signup``."""
    if not password:
        raise click.BadParameter("password must not be empty", param_hint="--password")

    payload = SignUpRequest(
        username=username,
        password=Secret(password),
        email=email,
        first_name=first_name,
        last_name=last_name,
    )
    payload.normalize()

    timeout = float(current_app.config.get("REGISTRATION_TIMEOUT_SECONDS", 5.0))
    service = RegistrationService(
        ctx=ServiceContext(deadline=Deadline.after(timeout)),
        timeout=timeout,
        hash_method=current_app.config.get("PASSWORD_HASH_METHOD", DEFAULT_HASH_METHOD),
    )
    try:
        validate_signup_request(payload)
        service.register_user(payload)
    except InvalidRegistrationError as exc:
        raise click.BadParameter(exc.message) from exc
    except UserAlreadyExistsError as exc:
        raise click.ClickException(f"account {payload.username!r} already exists") from exc
    except InfrastructureError as exc:
        db.session.rollback()
        LOGGER.error("accounts.create failed operation=%s", exc.operation, exc_info=exc)
        raise click.ClickException(f"account creation failed: {exc.operation}") from exc

    user = UserRepository().get_by_username(payload.username)
    click.echo(f"Created account {payload.username!r} (id {user.id}).")
