"""
Project Backend — Package SQLAlchemy Model
============================================

What:  ORM model representing the `packages` collection.
Who:   Used by PackageRepository.

Packages have no soft-delete flag: a delete removes the record.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Package(Base):
    """A purchasable package with a whole-number price."""

    __tablename__ = "packages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    price: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Package(id={self.id}, name='{self.name}', price={self.price})>"
