"""Log a status code and shape the matching API response envelope."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .logging_utils import configure_logger
from .models import ApiResponse, Severity, Status, stringify_error
from .schema import StatusSchemaRegistry, get_default_registry

__all__ = ["StatusReporter", "log_status"]

logger = configure_logger(__name__)

FALLBACK_MESSAGES: Dict[Optional[Severity], str] = {
    Severity.SUCCESS: "Success",
    Severity.WARN: "Warning",
    Severity.ERROR: "Error",
    None: "Unknown status",
}

INVALID_STATUS_ERROR = "Internal Server Error"

_MISSING = object()


class StatusReporter:
    """Classify status codes against a registry and report them.

    ``registry`` defaults to the process-wide instance, resolved on every
    call so that :func:`~status_logger.schema.reset_default_registry` is
    honoured.
    """

    def __init__(
        self,
        registry: StatusSchemaRegistry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._registry = registry
        self._logger = logger

    @property
    def registry(self) -> StatusSchemaRegistry:
        return self._registry if self._registry is not None else get_default_registry()

    @property
    def logger(self) -> logging.Logger:
        return self._logger if self._logger is not None else logger

    def report(
        self,
        status: Any,
        payload: Any = _MISSING,
        error: Any = None,
        silent: bool | None = None,
    ) -> ApiResponse:
        """Log ``status`` and return the response envelope.

        Parameters
        ----------
        status : Status | Mapping | int
            Descriptor with a ``code`` and an optional ``message`` override.
        payload : Any
            Data returned for SUCCESS and WARN codes.  Defaults to a new ``{}``;
            an explicit ``None`` is kept.
        error : Any
            Error detail for ERROR codes.  Exceptions contribute their message.
        silent : bool | None
            Overrides the registry's silent flag for this call only.
        """
        registry = self.registry
        status = Status.from_value(status)
        if payload is _MISSING:
            payload = {}

        severity = registry.classify(status.code)
        message = self._resolve_message(registry, status, severity)
        resolved = Status(code=status.code, message=message)

        quiet = registry.get_silent_mode() if silent is None else bool(silent)
        if not quiet:
            self._emit(severity, resolved, payload, error)

        if severity in (Severity.SUCCESS, Severity.WARN):
            return ApiResponse.with_data(resolved, payload)
        if severity is Severity.ERROR:
            if error is not None:
                return ApiResponse.with_error(resolved, stringify_error(error))
            return ApiResponse.with_error(resolved, message)
        return ApiResponse.with_error(resolved, INVALID_STATUS_ERROR)

    @staticmethod
    def _resolve_message(
        registry: StatusSchemaRegistry, status: Status, severity: Optional[Severity]
    ) -> str:
        if status.message is not None:
            return status.message
        if severity is not None:
            registered = registry.get_status_message(severity, status.code)
            if registered is not None:
                return registered
        return FALLBACK_MESSAGES[severity]

    def _emit(
        self, severity: Optional[Severity], status: Status, payload: Any, error: Any
    ) -> None:
        log = self.logger
        if severity is Severity.SUCCESS:
            log.info("[SUCCESS] %s", status.message)
            log.info("  payload: %s", payload)
        elif severity is Severity.WARN:
            log.warning("[WARN] %s", status.message)
            log.warning("  payload: %s", payload)
        elif severity is Severity.ERROR:
            log.error("[ERROR] %s", status.message)
            log.error("  payload: %s", payload)
            if error is not None:
                log.error("  └─ %s", stringify_error(error))
        else:
            log.error("[ERROR] Invalid status code: %s", status.code)


def log_status(
    status: Any,
    payload: Any = _MISSING,
    error: Any = None,
    silent: bool | None = None,
    registry: StatusSchemaRegistry | None = None,
) -> Dict[str, Any]:
    """Report ``status`` and return the envelope as a plain dictionary.

    >>> log_status({"code": 404}, {}, "Not Found", silent=True)
    {'status': {'code': 404, 'message': 'Not Found'}, 'error': 'Not Found'}
    """
    return StatusReporter(registry).report(status, payload, error, silent).to_dict()
