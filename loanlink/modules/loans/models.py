import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Text, JSON, Uuid
from loanlink.core.database import Base


class Loan(Base):
    """Loan offer published by a manager"""
    __tablename__ = "loans"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    title = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    category = Column(Text, nullable=True)
    image = Column(Text, nullable=True)  # URL or data URL

    # JSON keeps numbers as sent: 500 stays an integer, 7.5 a float
    interest_rate = Column(JSON, nullable=True)
    max_loan_limit = Column(JSON, nullable=True)
    amount = Column(JSON, nullable=True)

    show_on_home = Column(Boolean, nullable=True)

    created_by = Column(String(255), nullable=True, index=True)  # creator email
    created_at = Column(DateTime(timezone=True), nullable=True)

    # Caller-supplied attributes without a column
    extra = Column(JSON, nullable=False, default=dict)

    def __repr__(self):
        return f"<Loan(id={self.id}, title={self.title}, created_by={self.created_by})>"
