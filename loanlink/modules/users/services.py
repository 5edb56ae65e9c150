from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from typing import List, Optional, Union
from uuid import UUID, uuid4
import logging

from loanlink.core.documents import CollectionService, InsertAck, UpdateAck, utcnow
from loanlink.modules.users.models import User, DEFAULT_ROLE
from loanlink.modules.users.schemas import UserLogin, UserUpdate

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class UserService(CollectionService):
    """Service layer for user records"""

    model = User

    async def get_users(self) -> List[User]:
        return await self.find()

    async def get_user_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_role(self, email: Optional[str]) -> Optional[str]:
        """Stored role for an email, or None when no such user exists"""
        if not email:
            return None
        user = await self.get_user_by_email(email)
        return user.role if user else None

    async def record_login(self, user_data: UserLogin) -> Union[InsertAck, UpdateAck]:
        """
        Create the user on first login, otherwise refresh last_loggedIn.

        Runs as one INSERT ... ON CONFLICT (email) DO UPDATE statement, so
        concurrent first logins for the same email still produce one row.
        A returning user keeps role, created_at and every other field.
        """
        dialect = self.db.bind.dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"User upsert is not supported on {dialect}")

        fields, extra = user_data.split()
        now = utcnow()
        new_id = uuid4()
        fields.update(
            id=new_id,
            role=DEFAULT_ROLE,
            created_at=now,
            last_logged_in=now,
        )

        stmt = insert(User).values(**fields, extra=extra)
        stmt = stmt.on_conflict_do_update(
            index_elements=[User.email],
            set_={"last_logged_in": stmt.excluded.last_logged_in},
        ).returning(User.id)

        result = await self.db.execute(stmt)
        user_id = result.scalar_one()
        await self.db.commit()

        if user_id == new_id:
            logger.info(f"Created user {user_id} on first login")
            return InsertAck(inserted_id=user_id)

        logger.info(f"Refreshed last login for user {user_id}")
        return UpdateAck(matched_count=1, modified_count=1)

    async def update_user(self, user_id: UUID, data: UserUpdate) -> UpdateAck:
        fields, extra = data.split()
        return await self.update_one(user_id, fields, extra)
