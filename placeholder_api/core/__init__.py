"""Core Layer — errors, domain types, storage contracts and pure mapping helpers.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
