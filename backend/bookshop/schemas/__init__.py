"""Schemas — Pydantic models for API boundaries and service view shapes.

Invariants:
    - Prices serialize as two-decimal strings, timestamps as yyyy-MM-ddTHH:mm:ss
"""
