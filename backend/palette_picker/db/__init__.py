"""Database Package: declarative Base, standalone session factory, seed data.

Invariants:
    - All sessions are async (AsyncSession)
"""
