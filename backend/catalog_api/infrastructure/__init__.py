"""Infrastructure Layer — database engine and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All SQLAlchemy exceptions are mapped to DatabaseError before leaving this layer
"""
