"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes parse input and shape output; persistence lives in services/
    - `{id}` path segments are parsed by core.identifiers before the database is touched
"""
