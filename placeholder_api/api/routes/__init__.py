"""Route Modules — one file per resource plus health.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services)
    - Literal sub-paths (/completed, /by-user/...) declared before /{id}
"""
