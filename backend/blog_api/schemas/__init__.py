"""Pydantic Schemas - request/response validation for API endpoints and stores.

Invariants:
    - Schemas validate at the system boundary (request bodies, store inputs)
    - Schemas never touch storage

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
