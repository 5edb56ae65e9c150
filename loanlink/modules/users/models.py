import uuid
from sqlalchemy import Column, String, DateTime, Text, JSON, Uuid
from loanlink.core.database import Base

DEFAULT_ROLE = "borrower"


class User(Base):
    """Registered user, one row per email"""
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(Text, nullable=True)
    image = Column(Text, nullable=True)

    # Plain string so a PATCH can store any value
    role = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=True)
    last_logged_in = Column(DateTime(timezone=True), nullable=True)

    extra = Column(JSON, nullable=False, default=dict)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
