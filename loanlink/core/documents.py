"""
Document helpers shared by the loan, application and user modules.

Every stored entity is a table row with named columns plus an ``extra``
JSON column. On the wire a row is rendered as one flat JSON object: the
named columns under their camelCase aliases, the extra attributes next
to them, and the generated id under ``_id``.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Type, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from loanlink.core.database import Base

ID_KEY = "_id"

# JSON number; smart union keeps integers as integers
Number = Union[int, float]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentModel(BaseModel):
    """
    Base schema for stored documents.

    Declared fields map to table columns. Any other key is kept in
    ``model_extra`` and ends up in the row's ``extra`` column.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _flatten_row(cls, data: Any) -> Any:
        if isinstance(data, Base):
            values = {
                attr.key: getattr(data, attr.key)
                for attr in sa_inspect(data).mapper.column_attrs
                if attr.key != "extra"
            }
            return {**(data.extra or {}), **values}
        return data

    def split(self) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Return (column values, extra attributes) for the keys the client sent"""
        extra = {
            key: value
            for key, value in (self.model_extra or {}).items()
            if key != ID_KEY
        }
        declared = type(self).model_fields
        fields = {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name in declared
        }
        return fields, extra


class Acknowledgment(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = True


class InsertAck(Acknowledgment):
    inserted_id: UUID


class UpdateAck(Acknowledgment):
    matched_count: int
    modified_count: int
    upserted_count: int = 0
    upserted_id: Optional[UUID] = None


class DeleteAck(Acknowledgment):
    deleted_count: int


def apply_patch(row: Base, fields: Dict[str, Any], extra: Dict[str, Any]) -> bool:
    """Merge column values and extra attributes into a row; return True if anything changed"""
    changed = False
    for field, value in fields.items():
        if getattr(row, field) != value:
            setattr(row, field, value)
            changed = True

    if extra:
        current = row.extra or {}
        merged = {**current, **extra}
        if merged != current:
            # reassign so the JSON column is flagged dirty
            row.extra = merged
            changed = True

    return changed


class CollectionService:
    """Generic find/insert/update/delete over one document table"""

    model: Type[Base]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(self, **filters: Any) -> List[Base]:
        """Rows whose columns equal every non-empty filter value"""
        query = select(self.model)
        for field, value in filters.items():
            if value:
                query = query.where(getattr(self.model, field) == value)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def find_one(self, document_id: UUID) -> Optional[Base]:
        return await self.db.get(self.model, document_id)

    async def insert_one(self, fields: Dict[str, Any], extra: Dict[str, Any]) -> InsertAck:
        row = self.model(**fields, extra=extra)
        self.db.add(row)
        await self.db.commit()
        return InsertAck(inserted_id=row.id)

    async def update_one(self, document_id: UUID, fields: Dict[str, Any], extra: Dict[str, Any]) -> UpdateAck:
        row = await self.find_one(document_id)
        if row is None:
            return UpdateAck(matched_count=0, modified_count=0)

        modified = apply_patch(row, fields, extra)
        await self.db.commit()
        return UpdateAck(matched_count=1, modified_count=int(modified))

    async def delete_one(self, document_id: UUID) -> DeleteAck:
        row = await self.find_one(document_id)
        if row is None:
            return DeleteAck(deleted_count=0)

        await self.db.delete(row)
        await self.db.commit()
        return DeleteAck(deleted_count=1)
