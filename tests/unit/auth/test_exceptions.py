"""Tests for key configuration exceptions."""

import pytest

from transport_chain.auth.exceptions import KeyConfigError, KeyFileError, KeyNotFoundError


class TestKeyNotFoundError:
    """Test KeyNotFoundError exception."""

    def test_is_key_config_error(self):
        with pytest.raises(KeyConfigError):
            raise KeyNotFoundError("Test error")

    def test_env_var_name_attribute(self):
        error = KeyNotFoundError("missing", env_var_name="TRANSPORT_CHAIN_API_KEY")

        assert error.env_var_name == "TRANSPORT_CHAIN_API_KEY"
        assert str(error) == "missing"

    def test_env_var_name_defaults_to_none(self):
        assert KeyNotFoundError("missing").env_var_name is None


class TestKeyFileError:
    """Test KeyFileError exception."""

    def test_is_key_config_error(self):
        with pytest.raises(KeyConfigError):
            raise KeyFileError("unreadable")

    def test_exception_message(self):
        assert str(KeyFileError("Custom error message")) == "Custom error message"
