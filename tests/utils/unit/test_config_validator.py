"""
Unit Tests: utils/config_validator.py
"""

from types import SimpleNamespace

import pytest

from enums.runtime_environment import RuntimeEnvironment
from utils.config_validator import (
    ConfigValidationError,
    validate_jwt_secret,
    validate_body_limit,
    validate_log_level,
    validate_startup_config,
    validate_or_exit,
)


def make_config(**overrides):
    values = dict(
        JWT_SECRET="x" * 64,
        RUNTIME_ENVIRONMENT=RuntimeEnvironment.PROD,
        MAX_BODY_SIZE_MB=10,
        LOG_LEVEL="INFO",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class TestJwtSecret:

    @pytest.mark.parametrize("secret", [None, "", "   "])
    def test_empty_secret(self, secret):
        with pytest.raises(ConfigValidationError, match="JWT_SECRET is required"):
            validate_jwt_secret(secret, RuntimeEnvironment.DEV)

    def test_weak_secret_rejected_in_prod(self):
        with pytest.raises(ConfigValidationError, match="too weak"):
            validate_jwt_secret("changeme", RuntimeEnvironment.PROD)

    def test_weak_secret_tolerated_in_dev(self):
        validate_jwt_secret("changeme", RuntimeEnvironment.DEV)


class TestOtherSettings:

    def test_body_limit(self):
        validate_body_limit(10)
        with pytest.raises(ConfigValidationError):
            validate_body_limit(0)

    def test_log_level(self):
        validate_log_level("debug")
        with pytest.raises(ConfigValidationError, match="LOG_LEVEL"):
            validate_log_level("VERBOSE")


class TestStartupConfig:

    def test_valid(self):
        validate_startup_config(make_config())

    def test_exit_on_invalid(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            validate_or_exit(make_config(JWT_SECRET="short"))

        assert exc_info.value.code == 1
        assert "CONFIGURATION ERROR" in capsys.readouterr().err
