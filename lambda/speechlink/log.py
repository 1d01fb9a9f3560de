"""
JSON line logging for the Lambda runtime.

Every record is written to stdout as one JSON object so CloudWatch Logs
Insights can query the fields directly:

    {"ts": "2024-03-05T10:15:00+00:00", "level": "INFO", "logger": "speechlink.pipeline",
     "message": "uploaded", "request_id": "c6af9ac6-...", "extra": {"location": "https://..."}}

Usage:
    from speechlink.log import get_logger, configure_logging, set_request_id

    configure_logging("INFO")
    log = get_logger(__name__)
    log.info("uploaded", extra={"extra_data": {"location": url}})
"""
import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone

_request_id = ContextVar("request_id", default="-")
_configured = False


def get_request_id():
    return _request_id.get()


def set_request_id(request_id):
    _request_id.set(request_id or "-")


class JsonFormatter(logging.Formatter):

    def format(self, record):
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None) or get_request_id(),
        }

        extra = getattr(record, "extra_data", None)
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level="INFO", force=False):
    global _configured

    if _configured and not force:
        return

    root = logging.getLogger()
    # The Lambda runtime installs its own handler on the root logger
    root.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    root.setLevel(level)

    # botocore is chatty at DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _configured = True


def get_logger(name="speechlink"):
    return logging.getLogger(name)
