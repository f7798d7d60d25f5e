"""orders-api: CRUD HTTP service for users and orders with line items.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
