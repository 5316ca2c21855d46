"""API Layer — FastAPI routes, response envelopes, CORS and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON with CORS headers attached
"""
