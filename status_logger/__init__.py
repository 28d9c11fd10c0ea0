"""Status code logging and API response shaping."""

__version__ = "1.0.0"

from .config import get_config, get_values_from_ssm
from .logging_utils import configure_logger
from .models import ApiResponse, Severity, Status, stringify_error
from .schema import (
    DEFAULT_SCHEMA,
    StatusSchemaRegistry,
    get_default_registry,
    reset_default_registry,
)
from .reporter import StatusReporter, log_status
from .lambda_response import lambda_response, envelope_response
from .error_utils import log_exception, error_response

__all__ = [
    "get_config",
    "get_values_from_ssm",
    "configure_logger",
    "ApiResponse",
    "Severity",
    "Status",
    "stringify_error",
    "DEFAULT_SCHEMA",
    "StatusSchemaRegistry",
    "get_default_registry",
    "reset_default_registry",
    "StatusReporter",
    "log_status",
    "lambda_response",
    "envelope_response",
    "log_exception",
    "error_response",
]
