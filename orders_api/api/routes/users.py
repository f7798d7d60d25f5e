"""User Routes: CRUD over /api/v1/users.

Invariants:
    - Invalid ids answer 400 before any query runs
    - GET/PUT on a missing user answer 404; DELETE answers 200 either way
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.core.domain_types import Resource, UserId
from orders_api.core.identifiers import parse_resource_id
from orders_api.infrastructure.database import get_db
from orders_api.schemas.common import MessageResponse
from orders_api.schemas.user import UserCreate, UserResponse, UserUpdate
from orders_api.services import users as user_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    email: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List users; `email` keeps only those whose email contains the value."""
    return await user_service.list_users(db, email_contains=email)


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, db: AsyncSession = Depends(get_db),
):
    return await user_service.create_user(db, body.username, body.email)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    uid = UserId(parse_resource_id(user_id, Resource.USER))
    return await user_service.get_user(db, uid)


@router.put("/{user_id}", response_model=MessageResponse)
async def update_user(
    user_id: str, body: UserUpdate, db: AsyncSession = Depends(get_db),
):
    """Overwrite the fields present in the body."""
    uid = UserId(parse_resource_id(user_id, Resource.USER))
    await user_service.update_user(db, uid, body.changes())
    return MessageResponse(message="user updated")


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, db: AsyncSession = Depends(get_db)):
    uid = UserId(parse_resource_id(user_id, Resource.USER))
    deleted = await user_service.delete_user(db, uid)
    if not deleted:
        logger.warning(
            f"Delete matched no user {uid}",
            extra={"resource": Resource.USER.value, "resource_id": uid},
        )
    return MessageResponse(message="user deleted")
