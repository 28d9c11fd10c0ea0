"""Utilities for building Lambda-style HTTP responses."""

from typing import Any, Dict

from .models import ApiResponse

__all__ = ["lambda_response", "envelope_response"]


def lambda_response(status: int, body: Any) -> Dict[str, Any]:
    """Return a standard Lambda response dictionary."""
    return {"statusCode": status, "body": body}


def envelope_response(envelope: ApiResponse) -> Dict[str, Any]:
    """Wrap ``envelope`` in a Lambda response.

    The envelope's code becomes ``statusCode`` when it is a valid HTTP
    status; anything else is reported as ``500``.
    """
    code = envelope.status.code
    if isinstance(code, bool) or not isinstance(code, int) or not 100 <= code <= 599:
        code = 500
    return lambda_response(code, envelope.to_dict())
