"""CORS Middleware — preflight short-circuit and permissive headers on every response.

Invariants:
    - OPTIONS never reaches routing or the database: empty 200 with CORS headers
    - Every other response leaving the app carries the same three headers
"""

from fastapi import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_middleware(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
