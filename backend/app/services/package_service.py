"""
Project Backend — Package Service
===================================

What:  Create, replace, delete and read packages.
Who:   Built by app.assembly; called by the /package route handlers.

Unlike users, packages have no soft delete and no validation beyond the
types FastAPI already enforces. A delete that removes nothing raises
PackageDeletionError, which the global handler turns into HTTP 500.
"""

import logging
from typing import Optional

from app.exceptions import PackageDeletionError
from app.models.package import Package
from app.repositories.package_repository import PackageRepository
from app.schemas.package import PackageResponse

logger = logging.getLogger(__name__)


class PackageService:
    """Business logic layer for package operations."""

    def __init__(self, package_repository: PackageRepository) -> None:
        self._packages = package_repository

    async def save_package(self, name: str, price: int) -> PackageResponse:
        saved = await self._packages.save(Package(name=name, price=price))
        logger.info("Package %s created", saved.id)
        return PackageResponse.model_validate(saved)

    async def update_package(self, package_id: int, name: str, price: int) -> PackageResponse:
        """
        Replace the package with this id.

        An unknown id is never stored as given: the package is created under a
        store-generated id instead.
        """
        existing = await self._packages.find_by_id(package_id)
        if existing is None:
            logger.info("Package %s not found; creating it instead", package_id)
            return await self.save_package(name, price)

        existing.name = name
        existing.price = price
        saved = await self._packages.save(existing)
        logger.info("Package %s replaced", saved.id)
        return PackageResponse.model_validate(saved)

    async def delete_package(self, package_id: int) -> bool:
        """
        Physically delete a package.

        Raises:
            PackageDeletionError: No package was removed.
            DatabaseError: The store rejected the delete.
        """
        if not await self._packages.delete_by_id(package_id):
            logger.warning("Package %s could not be deleted", package_id)
            raise PackageDeletionError(package_id=package_id)
        logger.info("Package %s deleted", package_id)
        return True

    async def find_by_id(self, package_id: int) -> Optional[PackageResponse]:
        """The package with this id, or None when it does not exist."""
        package = await self._packages.find_by_id(package_id)
        if package is None:
            return None
        return PackageResponse.model_validate(package)
