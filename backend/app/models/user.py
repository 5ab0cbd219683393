"""
Project Backend — User SQLAlchemy Model
=========================================

What:  ORM model representing the `users` collection.
Why:   Maps Python objects to stored records for type-safe store operations.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by UserRepository for every read and write.

Lifecycle:
    1. Created on registration (is_deleted = ACTIVE)
    2. Mutated on profile update
    3. Soft-deleted: is_deleted flips to DELETED, the record is never removed

Query Patterns:
    - Find by id + flag:    WHERE id = :id AND is_deleted = :flag
    - Find by email + flag: WHERE email = :email AND is_deleted = :flag
    - List by flag:         WHERE is_deleted = :flag
"""

import enum

from sqlalchemy import Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from app.database import Base


class DeletionStatus(enum.IntEnum):
    """Soft-delete flag carried on a user record (persisted as 0/1)."""

    ACTIVE = 0
    DELETED = 1


class DeletionFlag(TypeDecorator):
    """Stores DeletionStatus as a plain integer column and loads it back as the enum."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return int(DeletionStatus(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return DeletionStatus(value)


class User(Base):
    """A registered user. `password` always holds a bcrypt hash."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    # email-validator rejects addresses over 254 characters
    email: Mapped[str] = mapped_column(String(320), nullable=False)

    phone_number: Mapped[str] = mapped_column(Text, nullable=False)

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash of the user's password",
    )

    role_id: Mapped[int] = mapped_column(Integer, nullable=False)

    is_deleted: Mapped[DeletionStatus] = mapped_column(
        DeletionFlag(),
        nullable=False,
        default=DeletionStatus.ACTIVE,
        server_default=text("0"),
        comment="Soft-delete flag: 0 = active, 1 = deleted",
    )

    # Every lookup filters on the flag; email lookups back the duplicate check
    __table_args__ = (
        Index("idx_users_email_is_deleted", "email", "is_deleted"),
        Index("idx_users_is_deleted", "is_deleted"),
    )

    def __repr__(self) -> str:
        return (
            f"<User(id={self.id}, email='{self.email}', "
            f"is_deleted={self.is_deleted!r})>"
        )
