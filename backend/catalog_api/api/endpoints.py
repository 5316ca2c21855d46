"""Endpoint Listing — static help document returned for unmatched paths."""

API_TITLE = "Music Management API v1.0.0"

ENDPOINTS = [
    "GET /api/v1/health",
    "GET /api/v1/version",
    "GET /api/v1/tracks",
    "GET /api/v1/tracks/search",
    "GET /api/v1/tracks/{id}",
    "POST /api/v1/tracks",
    "PUT /api/v1/tracks/{id}",
    "GET /api/v1/releases",
    "GET /api/v1/releases/{id}",
    "GET /api/v1/releases/{id}/tracks",
    "POST /api/v1/releases",
    "PUT /api/v1/releases/{id}",
    "POST /api/v1/releases/{id}/tracks",
    "POST /api/v1/query",
    "GET /api/v1/export",
    "GET /api/v1/linked-data",
]


def endpoint_listing() -> dict:
    return {"message": API_TITLE, "endpoints": list(ENDPOINTS)}
