from pydantic import Field
from datetime import datetime
from typing import Optional
from uuid import UUID

from loanlink.core.documents import DocumentModel, Number


class ApplicationBase(DocumentModel):
    loan_id: Optional[str] = Field(None, alias="loanId")
    loan_title: Optional[str] = Field(None, alias="loanTitle")
    borrower_email: Optional[str] = Field(None, alias="borrowerEmail")
    borrower_name: Optional[str] = Field(None, alias="borrowerName")
    loan_amount: Optional[Number] = Field(None, alias="loanAmount")
    status: Optional[str] = None
    updated_by: Optional[str] = Field(None, alias="updatedBy")
    applied_at: Optional[datetime] = Field(None, alias="appliedAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class ApplicationCreate(ApplicationBase):
    pass


class ApplicationUpdate(ApplicationBase):
    pass


class ApplicationResponse(ApplicationBase):
    id: UUID = Field(..., alias="_id")
