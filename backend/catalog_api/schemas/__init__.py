"""Request Schemas — pydantic models for API request bodies.

Invariants:
    - Every field is optional; required-field checks live in the catalog service
      so clients get the catalog's own 400 messages
"""
