from typing import List, Optional
from uuid import UUID

from loanlink.core.documents import CollectionService, InsertAck, UpdateAck, utcnow
from loanlink.modules.applications.models import LoanApplication
from loanlink.modules.applications.schemas import ApplicationCreate, ApplicationUpdate


class ApplicationService(CollectionService):
    model = LoanApplication

    async def get_applications(
        self,
        email: Optional[str] = None,
        updated_by: Optional[str] = None,
        status: Optional[str] = None
    ) -> List[LoanApplication]:
        """Applications matching every given filter"""
        return await self.find(borrower_email=email, updated_by=updated_by, status=status)

    async def get_application(self, application_id: UUID) -> Optional[LoanApplication]:
        return await self.find_one(application_id)

    async def submit_application(self, application: ApplicationCreate) -> InsertAck:
        fields, extra = application.split()
        fields["applied_at"] = utcnow()
        return await self.insert_one(fields, extra)

    async def update_application(self, application_id: UUID, data: ApplicationUpdate) -> UpdateAck:
        fields, extra = data.split()
        fields["updated_at"] = utcnow()
        return await self.update_one(application_id, fields, extra)
