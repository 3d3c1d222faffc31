"""Infrastructure Layer — database session management, storage, seeding, logging.

Invariants:
    - Infrastructure implements the Protocols declared in core/repository_protocols.py
    - All SQLAlchemy exceptions mapped to DatabaseError before leaving this layer
"""
