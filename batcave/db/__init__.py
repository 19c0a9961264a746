"""Database Package — the SQLAlchemy declarative Base shared by all models.

Invariants:
    - Engines and sessions live in infrastructure/database.py, not here
"""
