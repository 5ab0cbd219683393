"""
Project Backend — Base Repository
===================================

What:  Generic query interface over one collection of the entity store.
Why:   Repositories keep SQL out of the services; services only ask for
       records by field equality and hand back entities to save.
How:   Each operation opens its own session from the factory it was built
       with, runs one statement, commits writes, and closes the session.
Who:   Subclassed by UserRepository and PackageRepository.

Usage:
    class PackageRepository(BaseRepository[Package]):
        def __init__(self, session_factory) -> None:
            super().__init__(Package, session_factory)
"""

import logging
from typing import Any, Generic, List, Optional, TypeVar

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import Base
from app.exceptions import DatabaseError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic CRUD repository bound to a model class and a session factory.

    Attributes:
        model: SQLAlchemy model class this repository manages
    """

    def __init__(
        self,
        model: type[ModelType],
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self.model: type[ModelType] = model
        self._session_factory = session_factory

    def _select_by(self, criteria: dict[str, Any]) -> Select:
        """Build a SELECT matching every criterion by equality."""
        query: Select = select(self.model)
        for column_name, value in criteria.items():
            query = query.where(getattr(self.model, column_name) == value)
        return query

    async def find_one_by(self, **criteria: Any) -> Optional[ModelType]:
        """
        Return the first record whose fields equal the given values.

        Args:
            **criteria: column name → expected value

        Returns:
            The matching record, or None if nothing matches.

        Raises:
            DatabaseError: The query failed.
        """
        query = self._select_by(criteria).order_by(self.model.id).limit(1)
        try:
            async with self._session_factory() as session:
                result = await session.execute(query)
                return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Query on %s failed: %s", self.model.__tablename__, str(e))
            raise DatabaseError(
                context={"collection": self.model.__tablename__, "criteria": criteria}
            ) from e

    async def find_all_by(self, **criteria: Any) -> List[ModelType]:
        """Return every record whose fields equal the given values, ordered by id."""
        query = self._select_by(criteria).order_by(self.model.id)
        try:
            async with self._session_factory() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Query on %s failed: %s", self.model.__tablename__, str(e))
            raise DatabaseError(
                context={"collection": self.model.__tablename__, "criteria": criteria}
            ) from e

    async def save(self, entity: ModelType) -> ModelType:
        """
        Insert or replace a record.

        An entity without an id is inserted and receives a generated id.
        An entity with an id replaces the stored record with that id, or is
        inserted under that id when no such record exists.

        Returns:
            The persisted entity (a new instance, detached from any session).

        Raises:
            DatabaseError: The write failed; nothing was committed.
        """
        try:
            async with self._session_factory() as session:
                merged = await session.merge(entity)
                await session.commit()
                return merged
        except SQLAlchemyError as e:
            logger.error("Save on %s failed: %s", self.model.__tablename__, str(e))
            raise DatabaseError(
                context={"collection": self.model.__tablename__}
            ) from e

    async def delete_by_id(self, record_id: int) -> bool:
        """
        Physically remove the record with the given id.

        Returns:
            True if a record was removed, False if none had that id.

        Raises:
            DatabaseError: The delete failed; nothing was committed.
        """
        statement = delete(self.model).where(self.model.id == record_id)
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                await session.commit()
                return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error("Delete on %s failed: %s", self.model.__tablename__, str(e))
            raise DatabaseError(
                context={"collection": self.model.__tablename__, "id": record_id}
            ) from e
