"""
Configuration Validation Module

Validates critical configuration values at startup to fail-fast
with clear error messages instead of runtime failures.
"""

import logging
import sys

from enums.runtime_environment import RuntimeEnvironment

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def validate_jwt_secret(secret: str | None, runtime_environment: RuntimeEnvironment) -> None:
    """
    Validate the token signing secret.

    Args:
        secret: The JWT_SECRET value from config
        runtime_environment: Current environment; weak secrets are only tolerated outside PROD

    Raises:
        ConfigValidationError: If secret is missing, or too weak in PROD
    """
    if not secret or len(secret.strip()) == 0:
        raise ConfigValidationError(
            "JWT_SECRET is required and must not be empty!\n"
            "Generate a secure secret with: openssl rand -hex 32\n"
            "Add to .env: JWT_SECRET=<your-generated-secret>"
        )

    if runtime_environment == RuntimeEnvironment.PROD and len(secret) < 32:
        raise ConfigValidationError(
            f"JWT_SECRET is too weak for production (length: {len(secret)}, minimum: 32)!\n"
            "Generate a secure secret with: openssl rand -hex 32"
        )


def validate_body_limit(max_body_size_mb: int) -> None:
    if max_body_size_mb <= 0:
        raise ConfigValidationError(
            f"MAX_BODY_SIZE_MB must be positive (currently: {max_body_size_mb})"
        )


def validate_log_level(log_level: str) -> None:
    if log_level.upper() not in VALID_LOG_LEVELS:
        raise ConfigValidationError(
            f"LOG_LEVEL '{log_level}' is invalid. Valid values: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )


def validate_startup_config(config) -> None:
    """
    Validate all critical configuration at startup.

    Args:
        config: The config module

    Raises:
        ConfigValidationError: On the first invalid value
    """
    validate_jwt_secret(config.JWT_SECRET, config.RUNTIME_ENVIRONMENT)
    validate_body_limit(config.MAX_BODY_SIZE_MB)
    validate_log_level(config.LOG_LEVEL)
    logging.info("Configuration validated")


def validate_or_exit(config) -> None:
    """Validate configuration and exit with a readable message if anything is wrong."""
    try:
        validate_startup_config(config)
    except ConfigValidationError as e:
        print(f"\n CONFIGURATION ERROR\n\n{e}\n", file=sys.stderr)
        sys.exit(1)
