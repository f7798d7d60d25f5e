"""Pydantic Schemas: request/response contracts for the HTTP API.

Invariants:
    - Schemas validate at the system boundary; ORM models never leave the API layer
    - JSON keys are camelCase where the wire format says so (orderId, lineItemId, ...)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Update schemas are presence maps: changes() returns only fields the client sent
"""
