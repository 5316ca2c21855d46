"""Structured Logging — JSON log lines for the catalog API.

Invariants:
    - Every line has timestamp, level, logger and message
    - Request fields (path, method, status_code, error_code) and the catalog ids
      in the matched route (track_id, release_id) appear only when set
    - setup_logging replaces its own handler on repeated calls, never stacks a second one

Design Decisions:
    - request_extra builds the `extra=` dict from the request so handlers log ids
      without knowing which route raised
"""

import json
import logging
from datetime import datetime, timezone

from starlette.requests import Request

REQUEST_FIELDS = ("path", "method", "status_code", "error_code")
CATALOG_ID_FIELDS = ("track_id", "release_id")
_HANDLER_NAME = "catalog_api"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in REQUEST_FIELDS + CATALOG_ID_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def request_extra(request: Request, **fields) -> dict:
    """Log `extra` for a request: path, method, route ids, plus any given fields."""
    extra = {"path": request.url.path, "method": request.method}
    for key in CATALOG_ID_FIELDS:
        if key in request.path_params:
            extra[key] = request.path_params[key]
    extra.update({k: v for k, v in fields.items() if v is not None})
    return extra


def setup_logging(level: str = "INFO", fmt: str = "json"):
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
