"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All SQLAlchemy exceptions mapped to core/errors.py types before leaving this package
"""
