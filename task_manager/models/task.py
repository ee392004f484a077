from typing import List, Optional
from sqlalchemy import Column, String, Text, Boolean, ForeignKey, and_, desc
from sqlalchemy.orm import Session
from ..core.database import Base
from .base import DocumentMixin


class Task(DocumentMixin, Base):
    """Task model for database"""
    __tablename__ = "tasks"

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)

    # Owner reference, set once at creation
    user_id = Column(String(24), ForeignKey("users.id"), nullable=False, index=True)

    @classmethod
    def find_all(cls, db: Session, owner_id: str) -> List["Task"]:
        return (
            db.query(cls)
            .filter(cls.user_id == owner_id)
            .order_by(desc(cls.created_at), desc(cls.id))
            .all()
        )

    @classmethod
    def find_one(cls, db: Session, task_id: str, owner_id: str) -> Optional["Task"]:
        return db.query(cls).filter(
            and_(cls.id == task_id, cls.user_id == owner_id)
        ).first()

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def apply_update(
        self,
        db: Session,
        title: str,
        description: str,
        completed: Optional[bool] = None,
    ) -> "Task":
        """Update the editable fields; the owner reference is never touched."""
        self.title = title
        self.description = description
        if completed is not None:
            self.completed = completed
        return self.save(db)

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', completed={self.completed})>"
