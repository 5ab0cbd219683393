"""
Project Backend — Package Route Handlers
==========================================

What:  Handles the /package endpoints. All inputs are query parameters.
Who:   Mounted by create_app() with the application's PackageService.

Missing or non-integer parameters are rejected by FastAPI with 422.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query

from app.routes.paths import CREATE, DELETE, FIND_BY_ID, PACKAGE, UPDATE
from app.schemas.common import ErrorResponse
from app.schemas.package import PackageResponse
from app.services.package_service import PackageService

logger = logging.getLogger(__name__)


def build_package_router(package_service: PackageService) -> APIRouter:
    """Create the /package router bound to the given service."""
    router = APIRouter(prefix=PACKAGE, tags=["Packages"])

    @router.post(CREATE, response_model=PackageResponse, summary="Create a package")
    async def save_package(
        name: str = Query(description="Package name"),
        price: int = Query(description="Whole-number price"),
    ) -> PackageResponse:
        return await package_service.save_package(name, price)

    @router.post(UPDATE, response_model=PackageResponse, summary="Replace a package")
    async def update_package(
        package_id: int = Query(alias="id", description="Package id"),
        name: str = Query(description="Package name"),
        price: int = Query(description="Whole-number price"),
    ) -> PackageResponse:
        return await package_service.update_package(package_id, name, price)

    @router.delete(
        DELETE,
        response_model=bool,
        responses={
            200: {"description": "The package was deleted"},
            500: {"description": "The package could not be deleted", "model": ErrorResponse},
        },
        summary="Delete a package",
    )
    async def delete_package(
        package_id: int = Query(alias="id", description="Package id"),
    ) -> bool:
        return await package_service.delete_package(package_id)

    @router.get(
        FIND_BY_ID,
        response_model=Optional[PackageResponse],
        summary="Get a package by id",
        description="Returns null when no package has that id.",
    )
    async def find_by_id(
        package_id: int = Query(alias="id", description="Package id"),
    ) -> Optional[PackageResponse]:
        return await package_service.find_by_id(package_id)

    return router
