from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from uuid import UUID

from loanlink.core.documents import DocumentModel


class UserBase(DocumentModel):
    email: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    role: Optional[str] = None
    created_at: Optional[datetime] = None
    last_logged_in: Optional[datetime] = Field(None, alias="last_loggedIn")


class UserLogin(UserBase):
    """Body of POST /users; role and timestamps are assigned by the server"""
    email: str


class UserUpdate(UserBase):
    pass


class UserResponse(UserBase):
    id: UUID = Field(..., alias="_id")


class UserRoleResponse(BaseModel):
    role: Optional[str] = None
