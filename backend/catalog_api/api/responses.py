"""Response Builders — uniform JSON success/error envelopes.

Invariants:
    - Error envelope: {"success": false, "message": ...}, status defaults to 400
    - Success envelope: {"success": true, **data, "message": ...}; message omitted when None
    - Every response is application/json
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class PrettyJSONResponse(JSONResponse):
    """JSON response indented by two spaces (exports and listings)."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def error_response(
    message: str, status_code: int = 400, headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


def success_response(
    data: dict[str, Any] | None = None,
    message: str | None = None,
    response_class: type[JSONResponse] = JSONResponse,
) -> JSONResponse:
    content = {"success": True, **(data or {})}
    if message is not None:
        content["message"] = message
    return response_class(content=content)
