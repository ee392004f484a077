from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..utils.ids import new_object_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentMixin:
    """Identifier, timestamps and the create/find/save/delete operations shared by models"""

    id = Column(String(24), primary_key=True, index=True, default=new_object_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    @classmethod
    def find_by_id(cls, db: Session, obj_id: str, reload: bool = False):
        # reload bypasses the identity map and always queries the database
        return db.get(cls, obj_id, populate_existing=reload)

    @classmethod
    def create(cls, db: Session, **fields):
        obj = cls(**fields)
        db.add(obj)
        obj._commit(db)
        return obj

    def save(self, db: Session):
        self._commit(db)
        return self

    def delete(self, db: Session) -> None:
        db.delete(self)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

    def _commit(self, db: Session) -> None:
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(self)
