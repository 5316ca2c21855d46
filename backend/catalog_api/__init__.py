"""Music Catalog API — tracks, releases and their track listings over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
