"""Configuration lookup from the environment with an optional SSM fallback."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import boto3

__all__ = [
    "get_values_from_ssm",
    "get_ssm_prefix",
    "get_config",
    "get_bool_config",
]

logger = logging.getLogger(__name__)

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}

# Environment variable naming the SSM path holding status_logger parameters.
# SSM is never consulted while it is unset.
SSM_PREFIX_ENV = "STATUS_SSM_PREFIX"

_ssm_client: Any = None

# Simple in-memory cache so repeated lookups don't hit SSM again
_SSM_CACHE: dict[str, str] = {}


def _get_ssm_client() -> Any:
    global _ssm_client
    if _ssm_client is None:
        _ssm_client = boto3.client("ssm")
    return _ssm_client


def get_values_from_ssm(name: str, decrypt: bool = False) -> Optional[str]:
    """Retrieve a parameter value from SSM with optional decryption."""
    if name in _SSM_CACHE:
        return _SSM_CACHE[name]
    try:
        resp = _get_ssm_client().get_parameter(Name=name, WithDecryption=decrypt)
        value = resp["Parameter"]["Value"]
        _SSM_CACHE[name] = value
        logger.debug("Parameter value for %s: %s", name, value)
        return value
    except Exception as exc:
        logger.error("Error retrieving parameter %s: %s", name, exc)
        raise


def get_ssm_prefix() -> Optional[str]:
    """Return the configured SSM prefix without a trailing slash."""
    prefix = os.getenv(SSM_PREFIX_ENV)
    if not prefix:
        return None
    return prefix.rstrip("/")


def get_config(name: str, decrypt: bool = False) -> Optional[str]:
    """Return configuration ``name`` from the environment or SSM.

    The environment always wins.  When ``STATUS_SSM_PREFIX`` is set the
    parameter ``{prefix}/{name}`` is read from SSM; lookup failures are
    treated as a missing value so callers fall back to their defaults.
    """

    value = os.getenv(name)
    if value is not None:
        return value

    prefix = get_ssm_prefix()
    if prefix is None:
        return None
    try:
        return get_values_from_ssm(f"{prefix}/{name}", decrypt)
    except Exception:
        logger.warning("Falling back to default for %s", name)
        return None


def get_bool_config(name: str, default: bool = False) -> bool:
    """Return ``name`` parsed as a boolean flag."""
    value = get_config(name)
    if value is None:
        return default
    return str(value).strip().lower() in ENV_BOOL_TRUE
