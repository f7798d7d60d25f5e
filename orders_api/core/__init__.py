"""Core: pure helpers with no IO (errors, id parsing, partial updates, domain types).

Invariants:
    - Nothing in core/ touches the database or the HTTP layer
"""
