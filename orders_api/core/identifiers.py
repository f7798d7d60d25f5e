"""Path Identifier Parsing: turns raw `{id}` path segments into typed ids.

Invariants:
    - Accepts only ASCII base-10 integers in 1..INT32_MAX, with an optional leading sign
    - Anything the Integer key columns cannot hold is a 400, never a driver error
    - Raises InvalidIdentifierError before any database access happens
    - Pure: no IO
"""

from orders_api.core.domain_types import INT32_MAX, Resource
from orders_api.core.errors import InvalidIdentifierError

_MAX_DIGITS = len(str(INT32_MAX))


def parse_resource_id(raw: str, resource: Resource) -> int:
    """Parse a path id, raising InvalidIdentifierError unless it is a positive integer in range."""
    digits = raw[1:] if raw[:1] in ("+", "-") else raw
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidIdentifierError(resource.value, raw)
    if len(digits.lstrip("0")) > _MAX_DIGITS:
        raise InvalidIdentifierError(resource.value, raw)
    value = int(raw)
    if not 0 < value <= INT32_MAX:
        raise InvalidIdentifierError(resource.value, raw)
    return value
