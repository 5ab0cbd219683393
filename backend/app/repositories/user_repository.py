"""User repository: lookups always name the soft-delete flag explicitly."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.user import DeletionStatus, User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Query interface over the `users` collection."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(User, session_factory)

    async def find_by_id_and_is_deleted(
        self, user_id: int, is_deleted: DeletionStatus
    ) -> Optional[User]:
        return await self.find_one_by(id=user_id, is_deleted=is_deleted)

    async def find_by_email_and_is_deleted(
        self, email: str, is_deleted: DeletionStatus
    ) -> Optional[User]:
        return await self.find_one_by(email=email, is_deleted=is_deleted)

    async def find_by_is_deleted(self, is_deleted: DeletionStatus) -> List[User]:
        return await self.find_all_by(is_deleted=is_deleted)
