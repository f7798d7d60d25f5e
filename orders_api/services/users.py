"""User Persistence: one unit of database work per user operation.

Invariants:
    - Every function receives the request's AsyncSession; commits are explicit
    - SQLAlchemy failures surface as DatabaseError with a step-specific message
    - Missing rows raise ResourceNotFoundError (except delete, which reports a count)

Design Decisions:
    - Email filter uses LIKE '%term%' with autoescape: % and _ typed by the
      client match literally instead of acting as wildcards
    - Case sensitivity is the engine's LIKE: exact on PostgreSQL, folded on SQLite
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.core.domain_types import Resource, UserId
from orders_api.core.errors import ResourceNotFoundError
from orders_api.core.partial_update import apply_changes
from orders_api.infrastructure.database import database_operation
from orders_api.models.user import User

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("username", "email")


def email_contains_clause(term: str):
    """Case-sensitive LIKE '%term%' on User.email (no lower(), no ILIKE)."""
    return User.email.contains(term, autoescape=True)


async def list_users(
    db: AsyncSession, email_contains: str | None = None,
) -> list[User]:
    """All users by id, optionally only those whose email contains a substring."""
    query = select(User).order_by(User.id)
    if email_contains:
        query = query.where(email_contains_clause(email_contains))
    async with database_operation(db, "failed to get users", "select"):
        result = await db.execute(query)
    return list(result.scalars().all())


async def create_user(db: AsyncSession, username: str, email: str) -> User:
    user = User(username=username, email=email)
    async with database_operation(db, "failed to create user", "insert"):
        db.add(user)
        await db.commit()
    logger.info(
        "User created",
        extra={"resource": Resource.USER.value, "resource_id": user.id},
    )
    return user


async def get_user(db: AsyncSession, user_id: UserId) -> User:
    """Fetch one user or raise ResourceNotFoundError."""
    async with database_operation(db, "failed to get user", "select"):
        user = await db.get(User, user_id)
    if user is None:
        raise ResourceNotFoundError(Resource.USER.value, user_id)
    return user


async def update_user(
    db: AsyncSession, user_id: UserId, changes: dict,
) -> list[str]:
    """Write the present fields onto the user. Returns the fields that changed."""
    user = await get_user(db, user_id)
    changed = apply_changes(user, changes, UPDATABLE_FIELDS)
    async with database_operation(db, "failed to update user", "update"):
        await db.commit()
    logger.info(
        f"User updated ({', '.join(changed) or 'no changes'})",
        extra={"resource": Resource.USER.value, "resource_id": user_id},
    )
    return changed


async def delete_user(db: AsyncSession, user_id: UserId) -> int:
    """Delete by id. Returns the number of rows removed (0 or 1)."""
    async with database_operation(db, "failed to delete user", "delete"):
        result = await db.execute(delete(User).where(User.id == user_id))
        await db.commit()
    logger.info(
        "User delete executed",
        extra={
            "resource": Resource.USER.value, "resource_id": user_id,
            "affected_rows": result.rowcount,
        },
    )
    return result.rowcount
