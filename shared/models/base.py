import uuid
from datetime import datetime, timezone

from sqlalchemy import TIMESTAMP, Column, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Session


class UUIDModel:
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())


class SoftDeleteModel(UUIDModel):
    # Soft delete field: rows with a value here are hidden from every query
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    @classmethod
    def not_deleted(cls):
        return cls.deleted_at.is_(None)

    @classmethod
    def active_query(cls, db: Session):
        return db.query(cls).filter(cls.not_deleted())

    def soft_delete(self):
        self.deleted_at = datetime.now(timezone.utc)
