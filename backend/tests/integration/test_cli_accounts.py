"""Tests for the ``flask accounts create`` command."""

from __future__ import annotations

from signup_api.repositories.user import UserRepository
from sqlalchemy.exc import OperationalError
from werkzeug.security import check_password_hash

from tests.factories.user import UserFactory

PASSWORD = "supersecretpw"


def _create(cli_runner, *args: str):
    return cli_runner.invoke(args=["accounts", "create", *args])


def test_create_account(cli_runner, session):
    result = _create(cli_runner, "  Operator_1 ", "--password", PASSWORD, "--email", "Ops@Example.com")

    assert result.exit_code == 0, result.output
    user = UserRepository(session=session).get_by_username("operator_1")
    assert f"Created account 'operator_1' (id {user.id})." in result.output
    assert user.email == "ops@example.com"
    assert check_password_hash(user.password_hash, PASSWORD)


def test_prompts_for_password(cli_runner, session):
    result = cli_runner.invoke(
        args=["accounts", "create", "prompted"],
        input=f"{PASSWORD}\n{PASSWORD}\n",
    )

    assert result.exit_code == 0, result.output
    assert UserRepository(session=session).exists_by_username("prompted")


def test_rejects_invalid_fields(cli_runner, session):
    result = _create(cli_runner, "shorty", "--password", "short")

    assert result.exit_code == 2
    assert "password must be at least 12 characters" in result.output
    assert not UserRepository(session=session).exists_by_username("shorty")


def test_rejects_existing_username(cli_runner, session):
    UserFactory(username="taken_name")

    result = _create(cli_runner, "taken_name", "--password", PASSWORD)

    assert result.exit_code == 1
    assert "account 'taken_name' already exists" in result.output


def test_reports_infrastructure_failure(cli_runner, session, monkeypatch):
    def _boom(self, username):
        raise OperationalError("SELECT", {}, Exception("db down"))

    monkeypatch.setattr(UserRepository, "exists_by_username", _boom)

    result = _create(cli_runner, "operator_2", "--password", PASSWORD)

    assert result.exit_code == 1
    assert "account creation failed: lookup existing user" in result.output
    assert PASSWORD not in result.output
