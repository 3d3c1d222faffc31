"""Database Metadata — SQLAlchemy declarative Base.

Invariants:
    - Integer auto-increment primary keys on every table
    - Engines and sessions live in infrastructure/database.py
"""
