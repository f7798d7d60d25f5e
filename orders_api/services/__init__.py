"""Services: persistence units behind the route handlers.

Invariants:
    - One public function per (resource, verb); routes stay thin
    - Functions receive the request AsyncSession and own its commit/rollback
"""
