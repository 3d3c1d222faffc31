"""Services Layer — one resource service per entity type.

Invariants:
    - Services receive a Storage at construction (no ambient DB access)
    - Precondition checks (parents exist, unique keys free) run before any mutation
    - Services commit once per write operation; failures leave nothing persisted
"""
