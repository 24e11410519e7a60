"""
Configuration validation for Quill application.

This module provides validation functions to ensure the application
is properly configured before startup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .config import settings
from .database.connection import check_database_connection
from .logging import get_logger

logger = get_logger(__name__)

MIN_SECRET_LENGTH = 32
MIN_PRODUCTION_HASH_ROUNDS = 10


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


def is_production() -> bool:
    return settings.environment.lower() in ("production", "prod")


async def validate_database_connection() -> dict[str, Any]:
    """
    Validate that the database is accessible and responsive.

    Returns a dictionary with validation results and connection details.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await check_database_connection()

    if success:
        results["connection_info"] = {
            "status": "connected",
            "message": "Database connection successful",
        }
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


def validate_auth_configuration() -> dict[str, Any]:
    """
    Validate token signing and password hashing configuration.

    A missing signing secret is an error: login cannot issue tokens and every
    request is treated as anonymous.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "auth_info": {
            "algorithm": settings.jwt_algorithm,
            "token_expiry_hours": settings.jwt_expiry_hours,
            "password_hash_rounds": settings.password_hash_rounds,
        },
    }

    if not settings.jwt_secret:
        error = "JWT secret not configured (set QUILL_JWT_SECRET)"
        results["errors"].append(error)
        results["valid"] = False
        logger.error(error)
    elif len(settings.jwt_secret) < MIN_SECRET_LENGTH:
        warning = f"JWT secret is shorter than {MIN_SECRET_LENGTH} characters"
        results["warnings"].append(warning)
        logger.warning(warning)
    else:
        logger.info("Auth validation: JWT signing configured")

    if is_production() and settings.password_hash_rounds < MIN_PRODUCTION_HASH_ROUNDS:
        warning = (
            f"Password hash cost {settings.password_hash_rounds} is below "
            f"{MIN_PRODUCTION_HASH_ROUNDS} in production"
        )
        results["warnings"].append(warning)
        logger.warning(warning)

    return results


def validate_storage_configuration() -> dict[str, Any]:
    """Check that the image directory exists; removals silently miss otherwise."""
    base_path = Path(settings.image_base_path)
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "storage_info": {"image_base_path": str(base_path.resolve())},
    }

    if not base_path.is_dir():
        warning = f"Image base path does not exist: {base_path}"
        results["warnings"].append(warning)
        logger.warning(warning)

    return results


async def validate_startup_configuration() -> dict[str, Any]:
    """
    Comprehensive startup validation.

    This function should be called during application startup to ensure
    all critical configuration is valid.
    """
    logger.info("Starting application configuration validation")

    db_results = await validate_database_connection()
    auth_results = validate_auth_configuration()
    storage_results = validate_storage_configuration()

    sections = (db_results, auth_results, storage_results)

    combined_results = {
        "overall_valid": all(section["valid"] for section in sections),
        "database": db_results,
        "auth": auth_results,
        "storage": storage_results,
        "environment": {
            "environment": settings.environment,
            "debug": settings.debug,
        },
    }

    if combined_results["overall_valid"]:
        logger.info("Application configuration validation completed successfully")
    else:
        all_errors = [error for section in sections for error in section["errors"]]
        logger.error("Application configuration validation failed", errors=all_errors)

    all_warnings = [warning for section in sections for warning in section["warnings"]]
    if all_warnings:
        logger.warning("Configuration warnings detected", warnings=all_warnings)

    return combined_results


def get_startup_recommendations(validation_results: dict[str, Any]) -> list[str]:
    """
    Generate startup recommendations based on validation results.
    """
    recommendations = []

    if not validation_results.get("database", {}).get("valid", False):
        recommendations.append(
            "Database connection failed - check that PostgreSQL is running and accessible"
        )
        return recommendations

    if not validation_results["auth"]["valid"]:
        recommendations.append("Set QUILL_JWT_SECRET so that login can issue tokens")

    if validation_results["storage"]["warnings"]:
        recommendations.append("Create the image directory or point QUILL_IMAGE_BASE_PATH at it")

    if not validation_results["overall_valid"]:
        recommendations.append("Fix configuration errors before deploying to production")

    return recommendations
