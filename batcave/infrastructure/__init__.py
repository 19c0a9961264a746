"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from schemas/
    - All database failures mapped to typed errors from core/errors.py
"""
