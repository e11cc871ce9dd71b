"""Infrastructure Layer — database sessions, entity store, logging, background jobs.

Invariants:
    - Only layer that touches SQLAlchemy engines directly
"""
