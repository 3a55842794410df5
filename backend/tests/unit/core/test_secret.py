"""Unit tests for the redacting credential wrapper."""

from __future__ import annotations

import copy
import json
import logging
import pickle

import pytest
from signup_api.core.logger import JSONFormatter
from signup_api.core.secret import REDACTED, REDACTED_JSON, Secret
from signup_api.schemas import SecretField

RAW = "hunter2hunter2"


class TestSecret:
    def test_reveal_returns_raw_value(self):
        assert Secret(RAW).reveal() == RAW

    @pytest.mark.parametrize(
        "render",
        [
            str,
            repr,
            lambda s: f"{s}",
            lambda s: f"{s!r}",
            lambda s: "%s" % s,
            lambda s: "{:>30}".format(s),
            lambda s: str([s]),
            lambda s: str({"password": s}),
        ],
    )
    def test_string_conversions_redact(self, render):
        rendered = render(Secret(RAW))
        assert RAW not in rendered
        assert REDACTED in rendered

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            Secret(12345)  # type: ignore[arg-type]

    def test_pickling_is_refused(self):
        with pytest.raises(TypeError):
            pickle.dumps(Secret(RAW))

    def test_copies_share_the_value(self):
        secret = Secret(RAW)
        assert copy.copy(secret).reveal() == RAW
        assert copy.deepcopy({"p": secret})["p"].reveal() == RAW

    def test_flask_json_redacts(self, app):
        with app.app_context():
            body = app.json.dumps({"password": Secret(RAW)})
        assert json.loads(body) == {"password": REDACTED_JSON}

    def test_log_records_redact(self, caplog):
        logger = logging.getLogger("tests.secret")
        with caplog.at_level(logging.INFO, logger="tests.secret"):
            logger.info("credential=%s", Secret(RAW), extra={"username": Secret(RAW)})

        record = caplog.records[-1]
        assert RAW not in record.getMessage()
        assert RAW not in JSONFormatter().format(record)


class TestSecretField:
    def test_loads_into_secret(self):
        value = SecretField().deserialize(RAW)
        assert isinstance(value, Secret)
        assert value.reveal() == RAW

    @pytest.mark.parametrize("raw", ["", 123, ["x"]])
    def test_rejects_empty_or_non_string(self, raw):
        from marshmallow import ValidationError

        with pytest.raises(ValidationError):
            SecretField().deserialize(raw)

    def test_dumps_placeholder(self):
        assert SecretField().serialize("password", {"password": Secret(RAW)}) == REDACTED_JSON
