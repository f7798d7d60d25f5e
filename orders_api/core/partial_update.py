"""Partial Update: explicit field-presence merge for PUT bodies.

Invariants:
    - Only keys present in `changes` are written; absent keys are untouched
    - Zero and empty values are written like any other value
    - Keys outside `allowed` raise ValueError (caller bug, never user input)

Design Decisions:
    - Presence map comes from Pydantic `model_dump(exclude_unset=True)` so an
      omitted field and `quantity: 0` are distinguishable
"""

from typing import Any, Iterable, Mapping


def apply_changes(
    target: Any, changes: Mapping[str, Any], allowed: Iterable[str],
) -> list[str]:
    """Assign every present field onto target. Returns names whose value changed."""
    allowed_fields = set(allowed)
    unknown = set(changes) - allowed_fields
    if unknown:
        raise ValueError(f"fields not updatable: {', '.join(sorted(unknown))}")

    changed = []
    for name, value in changes.items():
        if getattr(target, name) != value:
            setattr(target, name, value)
            changed.append(name)
    return changed
