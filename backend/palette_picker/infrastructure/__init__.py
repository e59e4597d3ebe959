"""Infrastructure Layer: database wiring and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All datastore failures mapped to DatabaseError (core/errors.py)
"""
