"""Value types shared by the schema registry and the status reporter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Severity(str, Enum):
    """Severity class grouping status codes by outcome."""

    SUCCESS = "SUCCESS"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def coerce(cls, value: "Severity | str") -> "Severity":
        """Return the member for ``value``; raise ``ValueError`` if unknown."""
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())


@dataclass(frozen=True)
class Status:
    """Status descriptor supplied at call time."""

    code: Any
    message: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> "Status":
        """Build a :class:`Status` from a descriptor, a mapping or a bare code.

        Never raises; anything without a usable code yields ``code=None``
        which no severity class contains.
        """
        if isinstance(value, Status):
            return value
        try:
            if isinstance(value, Mapping):
                return cls(code=value.get("code"), message=value.get("message"))
            if hasattr(value, "code"):
                return cls(code=getattr(value, "code", None), message=getattr(value, "message", None))
        except Exception:
            return cls(code=None)
        return cls(code=value)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class ApiResponse:
    """Normalized response envelope.

    Carries either ``data`` (SUCCESS/WARN) or ``error`` (ERROR and
    unclassified codes), never both.
    """

    status: Status
    data: Any = None
    error: Any = None

    @classmethod
    def with_data(cls, status: Status, data: Any) -> "ApiResponse":
        return cls(status=status, data=data)

    @classmethod
    def with_error(cls, status: Status, error: Any) -> "ApiResponse":
        return cls(status=status, error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"status": self.status.to_dict()}
        if self.is_error:
            body["error"] = self.error
        else:
            body["data"] = self.data
        return body


def stringify_error(error: Any) -> Any:
    """Return the text carried by ``error``.

    Exceptions contribute their message; any other value is returned as-is.
    An exception that cannot be rendered falls back to its type name.
    """
    if isinstance(error, BaseException):
        try:
            return str(error)
        except Exception:
            return type(error).__name__
    return error


__all__ = ["Severity", "Status", "ApiResponse", "stringify_error"]
