"""API Layer — FastAPI routes, service dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate "absent" service results into ResourceNotFoundError;
      everything else is raised by services and mapped by error_handlers.py
"""
