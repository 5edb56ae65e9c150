from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from uuid import UUID

from loanlink.core.database import get_db
from loanlink.core.documents import InsertAck, UpdateAck, DeleteAck
from loanlink.modules.loans.schemas import LoanCreate, LoanUpdate, LoanResponse
from loanlink.modules.loans.services import LoanService

router = APIRouter(tags=["loans"])


@router.get("/all-loans", response_model=List[LoanResponse])
async def read_loans(
    email: Optional[str] = Query(None, description="Only loans created by this email"),
    db: AsyncSession = Depends(get_db)
):
    service = LoanService(db)
    return await service.get_loans(email=email)


@router.get("/loan/{loan_id}", response_model=Optional[LoanResponse])
async def read_loan(
    loan_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    """Get loan details; responds with null when the loan does not exist"""
    service = LoanService(db)
    return await service.get_loan(loan_id)


@router.post("/add-loan", response_model=InsertAck)
async def add_loan(
    loan: LoanCreate,
    db: AsyncSession = Depends(get_db)
):
    service = LoanService(db)
    return await service.add_loan(loan)


@router.patch("/update-loan/{loan_id}", response_model=UpdateAck)
async def update_loan(
    loan_id: UUID,
    loan_in: LoanUpdate,
    db: AsyncSession = Depends(get_db)
):
    service = LoanService(db)
    return await service.update_loan(loan_id, loan_in)


@router.delete("/delete-loan/{loan_id}", response_model=DeleteAck)
async def delete_loan(
    loan_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    service = LoanService(db)
    return await service.delete_one(loan_id)
