"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; business rules stay in services/
    - Responses are built from models, never the models themselves (no password_hash leak)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
