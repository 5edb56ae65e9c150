from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional, Union
from uuid import UUID

from loanlink.core.database import get_db
from loanlink.core.dependencies import get_token_email
from loanlink.core.documents import InsertAck, UpdateAck
from loanlink.modules.users import schemas
from loanlink.modules.users.services import UserService

router = APIRouter(tags=["users"])


@router.get("/users", response_model=List[schemas.UserResponse])
async def read_users(db: AsyncSession = Depends(get_db)):
    service = UserService(db)
    return await service.get_users()


@router.post("/users", response_model=Union[InsertAck, UpdateAck])
async def save_user(
    user_data: schemas.UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """
    Save a user on login.

    - First login inserts the user with the default role
    - Later logins only refresh last_loggedIn
    """
    service = UserService(db)
    return await service.record_login(user_data)


@router.get("/user/role", response_model=schemas.UserRoleResponse)
async def read_user_role(
    db: AsyncSession = Depends(get_db),
    token_email: Optional[str] = Depends(get_token_email)
):
    """Role of the authenticated user; null when the user is not stored"""
    service = UserService(db)
    role = await service.get_role(token_email)
    return {"role": role}


@router.patch("/user/{user_id}", response_model=UpdateAck)
async def update_user(
    user_id: UUID,
    data: schemas.UserUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Merge fields into a user record, role included"""
    service = UserService(db)
    return await service.update_user(user_id, data)
