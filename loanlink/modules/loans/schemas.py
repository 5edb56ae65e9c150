from pydantic import Field
from datetime import datetime
from typing import Optional
from uuid import UUID

from loanlink.core.documents import DocumentModel, Number


class LoanBase(DocumentModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    interest_rate: Optional[Number] = Field(None, alias="interestRate")
    max_loan_limit: Optional[Number] = Field(None, alias="maxLoanLimit")
    amount: Optional[Number] = None
    show_on_home: Optional[bool] = Field(None, alias="showOnHome")
    created_by: Optional[str] = Field(None, alias="createdBy")
    created_at: Optional[datetime] = Field(None, alias="createdAt")


class LoanCreate(LoanBase):
    pass


class LoanUpdate(LoanBase):
    """Merge patch; every field, including createdBy and createdAt, may be overwritten"""
    pass


class LoanResponse(LoanBase):
    id: UUID = Field(..., alias="_id")
