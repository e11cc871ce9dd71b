"""Database Infrastructure — SQLAlchemy Base and standalone session factory.

Invariants:
    - All sessions are async (AsyncSession)
"""
