"""Pydantic Schemas: request/response shapes for API endpoints.

Invariants:
    - Request schemas only shape the payload; field rules live in core/enforce_employee
    - Schemas are API contracts, models are persistence
"""
