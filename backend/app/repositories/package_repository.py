"""Package repository: plain id lookups, no deletion flag."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.package import Package
from app.repositories.base import BaseRepository


class PackageRepository(BaseRepository[Package]):
    """Query interface over the `packages` collection."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(Package, session_factory)

    async def find_by_id(self, package_id: int) -> Optional[Package]:
        return await self.find_one_by(id=package_id)
