"""Registry of status codes grouped by severity class."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .config import get_bool_config
from .models import Severity

__all__ = [
    "DEFAULT_SCHEMA",
    "StatusSchemaRegistry",
    "get_default_registry",
    "reset_default_registry",
]

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA: Mapping[Severity, Mapping[int, str]] = MappingProxyType({
    Severity.SUCCESS: MappingProxyType({
        200: "Success",
    }),
    Severity.WARN: MappingProxyType({
        300: "Warning",
        301: "Redirect",
        302: "Found",
        304: "Not Modified",
    }),
    Severity.ERROR: MappingProxyType({
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        500: "Internal Server Error",
    }),
})

# Classification scans the classes in this order; the first match wins.
SCAN_ORDER: Tuple[Severity, ...] = (Severity.SUCCESS, Severity.WARN, Severity.ERROR)


class StatusSchemaRegistry:
    """Mapping of severity class -> status code -> message plus a silent flag.

    A numeric code lives in at most one class: :meth:`update_status` moves a
    code that is already registered elsewhere.  Instances are independent, so
    tests and per-request configurations can hold their own registry.
    """

    def __init__(self, silent_mode: bool = False) -> None:
        self._schema: Dict[Severity, Dict[int, str]] = {}
        self._silent_mode = bool(silent_mode)
        self.reset()

    def reset(self) -> None:
        """Restore the seeded default codes.  The silent flag is left alone."""
        self._schema = {severity: dict(codes) for severity, codes in DEFAULT_SCHEMA.items()}

    def get_schema(self) -> Mapping[Severity, Mapping[int, str]]:
        """Return a read-only snapshot of the current schema."""
        return MappingProxyType({
            severity: MappingProxyType(dict(codes))
            for severity, codes in self._schema.items()
        })

    def get_status_message(self, severity: Severity | str, code: int) -> Optional[str]:
        """Return the message for ``(severity, code)`` or ``None``."""
        try:
            bucket = self._schema.get(Severity.coerce(severity))
            if bucket is None:
                return None
            return bucket.get(code)
        except (ValueError, TypeError):
            return None

    def update_status(self, severity: Severity | str, code: int, message: str) -> None:
        """Insert or overwrite the entry for ``(severity, code)``."""
        target = Severity.coerce(severity)
        for other in SCAN_ORDER:
            if other is not target and code in self._schema.get(other, {}):
                logger.debug("Moving status %s from %s to %s", code, other.value, target.value)
                self.remove_status(other, code)
        self._schema.setdefault(target, {})[code] = message

    def remove_status(self, severity: Severity | str, code: int) -> None:
        """Delete ``(severity, code)``; drop the class bucket once it is empty."""
        try:
            target = Severity.coerce(severity)
        except ValueError:
            return
        bucket = self._schema.get(target)
        if bucket is None:
            return
        try:
            bucket.pop(code, None)
        except TypeError:
            return
        if not bucket:
            del self._schema[target]

    def set_silent_mode(self, silent: bool) -> None:
        self._silent_mode = bool(silent)

    def get_silent_mode(self) -> bool:
        return self._silent_mode

    def classify(self, code: object) -> Optional[Severity]:
        """Return the first severity whose bucket holds ``code``."""
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        for severity in SCAN_ORDER:
            if code in self._schema.get(severity, {}):
                return severity
        return None

    def entries(self) -> Iterator[Tuple[Severity, int, str]]:
        """Yield ``(severity, code, message)`` in scan order."""
        for severity in SCAN_ORDER:
            for code, message in self._schema.get(severity, {}).items():
                yield severity, code, message


_default_registry: Optional[StatusSchemaRegistry] = None


def get_default_registry() -> StatusSchemaRegistry:
    """Return the process-wide registry, creating it on first use.

    Its initial silent flag comes from the ``STATUS_SILENT_MODE`` setting.
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = StatusSchemaRegistry(
            silent_mode=get_bool_config("STATUS_SILENT_MODE", False)
        )
    return _default_registry


def reset_default_registry() -> None:
    """Forget the process-wide registry; the next lookup rebuilds it."""
    global _default_registry
    _default_registry = None
