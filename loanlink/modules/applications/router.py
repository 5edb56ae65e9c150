from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from uuid import UUID

from loanlink.core.database import get_db
from loanlink.core.dependencies import get_token_email
from loanlink.core.documents import InsertAck, UpdateAck, DeleteAck
from loanlink.modules.applications import schemas
from loanlink.modules.applications.services import ApplicationService

router = APIRouter(tags=["applications"])


@router.get("/applications", response_model=List[schemas.ApplicationResponse])
async def read_applications(
    email: Optional[str] = Query(None, description="Filter by borrower email"),
    updated_by: Optional[str] = Query(None, alias="updatedBy", description="Filter by last updater"),
    status: Optional[str] = Query(None, description="Filter by application status"),
    db: AsyncSession = Depends(get_db),
    token_email: Optional[str] = Depends(get_token_email)
):
    """
    List loan applications.

    - Requires a valid bearer token
    - Filters combine; omitted filters match everything
    """
    service = ApplicationService(db)
    return await service.get_applications(email=email, updated_by=updated_by, status=status)


@router.get("/application-details/{application_id}", response_model=Optional[schemas.ApplicationResponse])
async def read_application(
    application_id: UUID,
    db: AsyncSession = Depends(get_db),
    token_email: Optional[str] = Depends(get_token_email)
):
    """Get application details; responds with null when it does not exist"""
    service = ApplicationService(db)
    return await service.get_application(application_id)


@router.post("/applications", response_model=InsertAck)
async def submit_application(
    application: schemas.ApplicationCreate,
    db: AsyncSession = Depends(get_db)
):
    service = ApplicationService(db)
    return await service.submit_application(application)


@router.patch("/applications/{application_id}", response_model=UpdateAck)
async def update_application(
    application_id: UUID,
    data: schemas.ApplicationUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Merge fields into an application and stamp updatedAt"""
    service = ApplicationService(db)
    return await service.update_application(application_id, data)


@router.delete("/my-applications/{application_id}", response_model=DeleteAck)
async def delete_application(
    application_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    service = ApplicationService(db)
    return await service.delete_one(application_id)
