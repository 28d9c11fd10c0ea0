"""Helpers for consistent error logging and responses."""

from __future__ import annotations

from typing import Any, Dict
import logging

from .lambda_response import envelope_response
from .models import ApiResponse, stringify_error
from .reporter import StatusReporter
from .schema import StatusSchemaRegistry

__all__ = ["error_response", "log_exception"]


def log_exception(message: str, exc: BaseException, logger: logging.Logger) -> None:
    """Log ``exc`` with ``message`` using ``logger``."""

    logger.error("%s: %s", message, stringify_error(exc))


def error_response(
    status: int,
    message: str | None = None,
    exc: BaseException | None = None,
    registry: StatusSchemaRegistry | None = None,
    logger: logging.Logger | None = None,
) -> Dict[str, Any]:
    """Report ``status`` as an error and return it as a Lambda response.

    ``message`` overrides the registered text for ``status``; ``exc``, when
    given, becomes the envelope's ``error``.  The body always carries an
    ``error``: a code registered as SUCCESS or WARN is still reported with
    its own class, but the envelope's ``data`` is replaced by the error
    detail and ``exc`` is logged separately.
    """

    reporter = StatusReporter(registry, logger)
    envelope = reporter.report({"code": status, "message": message}, error=exc)
    if not envelope.is_error:
        if exc is not None:
            log_exception(envelope.status.message, exc, reporter.logger)
            detail = stringify_error(exc)
        else:
            detail = envelope.status.message
        envelope = ApiResponse.with_error(envelope.status, detail)
    return envelope_response(envelope)
