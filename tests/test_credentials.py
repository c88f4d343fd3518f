"""
Test credential handling.

Only the secret id may ever show up in diagnostics.
"""

import logging

import pytest
from pydantic import ValidationError

from tcloud_sdk import Client, Credentials


class TestRedaction:
    """Secret key never rendered."""

    def test_repr_shows_only_secret_id(self, credentials: Credentials) -> None:
        text = repr(credentials)
        assert "AKIDEXAMPLE" in text
        assert "example-secret-key" not in text
        assert "secret_key" not in text

    def test_str_shows_only_secret_id(self, credentials: Credentials) -> None:
        text = str(credentials)
        assert "AKIDEXAMPLE" in text
        assert "example-secret-key" not in text

    def test_json_dump_masks_secret(self, credentials: Credentials) -> None:
        assert "example-secret-key" not in credentials.model_dump_json()

    def test_secret_value_available_explicitly(self, credentials: Credentials) -> None:
        assert credentials.secret_key.get_secret_value() == "example-secret-key"

    async def test_logs_never_contain_secret_key(
        self,
        credentials: Credentials,
        foo_api,
        make_transport,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        transport = make_transport(
            body=b'{"Response": {"RequestId": "r-1", "Foo": "bar"}}'
        )
        client = Client(region="ap-guangzhou", credentials=credentials, transport=transport)

        with caplog.at_level(logging.DEBUG, logger="tcloud_sdk"):
            await client.send(foo_api, foo_api.request_model(name="x"))

        assert caplog.records
        assert "example-secret-key" not in caplog.text


class TestValidation:
    """Both parts required, immutable once built."""

    def test_empty_secret_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Credentials(secret_id="", secret_key="key")

    def test_empty_secret_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Credentials(secret_id="AKID", secret_key="")

    def test_missing_secret_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Credentials(secret_id="AKID")  # type: ignore[call-arg]

    def test_frozen(self, credentials: Credentials) -> None:
        with pytest.raises(ValidationError):
            credentials.secret_id = "AKIDOTHER"  # type: ignore[misc]
