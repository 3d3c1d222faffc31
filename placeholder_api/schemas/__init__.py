"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, response shapes)
    - JSON keys are camelCase; Python attributes are snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - *Update schemas leave every field optional; services call
      supplied_fields() (unset and null both mean "not supplied")
"""
