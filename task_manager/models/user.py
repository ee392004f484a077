from sqlalchemy import Column, String
from sqlalchemy.orm import Session
from ..core.database import Base
from .base import DocumentMixin


class User(DocumentMixin, Base):
    __tablename__ = "users"

    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    # bcrypt hash, never the plain password
    password = Column(String(255), nullable=False)

    @classmethod
    def find_by_email(cls, db: Session, email: str):
        return db.query(cls).filter(cls.email == email).first()

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
