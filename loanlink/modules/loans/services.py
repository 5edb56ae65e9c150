from typing import List, Optional
from uuid import UUID

from loanlink.core.documents import CollectionService, InsertAck, UpdateAck, utcnow
from loanlink.modules.loans.models import Loan
from loanlink.modules.loans.schemas import LoanCreate, LoanUpdate


class LoanService(CollectionService):
    model = Loan

    async def get_loans(self, email: Optional[str] = None) -> List[Loan]:
        return await self.find(created_by=email)

    async def get_loan(self, loan_id: UUID) -> Optional[Loan]:
        return await self.find_one(loan_id)

    async def add_loan(self, loan: LoanCreate) -> InsertAck:
        fields, extra = loan.split()
        fields["created_at"] = utcnow()
        return await self.insert_one(fields, extra)

    async def update_loan(self, loan_id: UUID, loan_in: LoanUpdate) -> UpdateAck:
        fields, extra = loan_in.split()
        return await self.update_one(loan_id, fields, extra)
