import uuid
from sqlalchemy import Column, String, DateTime, Text, JSON, Uuid
from loanlink.core.database import Base


class LoanApplication(Base):
    """A borrower's application for a loan"""
    __tablename__ = "loan_applications"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Stored as given; no foreign key so deleting a loan leaves its applications
    loan_id = Column(Text, nullable=True)
    loan_title = Column(Text, nullable=True)

    borrower_email = Column(String(255), nullable=True, index=True)
    borrower_name = Column(Text, nullable=True)
    loan_amount = Column(JSON, nullable=True)

    status = Column(Text, nullable=True, index=True)  # pending, approved, rejected, cancelled
    updated_by = Column(String(255), nullable=True, index=True)

    applied_at = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    extra = Column(JSON, nullable=False, default=dict)

    def __repr__(self):
        return f"<LoanApplication(id={self.id}, borrower={self.borrower_email}, status={self.status})>"
