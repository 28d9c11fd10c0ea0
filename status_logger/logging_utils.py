import logging
import json

__all__ = ["configure_logger"]


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(payload)


def configure_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Return a logger configured with a standard formatter.

    The log level can be overridden via the ``LOG_LEVEL`` setting.  When
    ``LOG_JSON`` is ``true`` logs are formatted as JSON.  Both are resolved
    through :func:`status_logger.config.get_config`, so they may come from
    the environment or from SSM.
    """
    from status_logger.config import get_config  # late import, avoids a cycle

    logger = logging.getLogger(name)

    log_level = get_config("LOG_LEVEL") or level
    level_const = getattr(logging, str(log_level).upper(), logging.INFO)
    logger.setLevel(level_const)

    json_flag = get_config("LOG_JSON") or "false"
    if str(json_flag).lower() == "true":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            "%Y-%m-%dT%H:%M:%S%z",
        )
    if not logger.handlers:
        handler = logging.StreamHandler()
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setFormatter(formatter)
    return logger
