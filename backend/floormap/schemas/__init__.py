"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Response models never expose password digests or editor tokens
      (registration response excepted)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
