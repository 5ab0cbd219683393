"""
Project Backend — User Route Handlers
=======================================

What:  Handles the /user endpoints (create, find-all, find-by-id, update, delete).
How:   Extracts the body / query parameters and delegates to UserService.
Who:   Mounted by create_app() with the application's UserService.

Every endpoint answers HTTP 200 when the service ran: validation and lookup
failures travel inside the UserResponse (statusCode + description), so
clients must check statusCode rather than the HTTP status.
"""

import logging
from typing import List

from fastapi import APIRouter, Query

from app.routes.paths import CREATE, DELETE, FIND_ALL, FIND_BY_ID, UPDATE, USER
from app.schemas.common import ErrorResponse
from app.schemas.user import UserRequest, UserResponse
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


def build_user_router(user_service: UserService) -> APIRouter:
    """Create the /user router bound to the given service."""
    router = APIRouter(prefix=USER, tags=["Users"])

    @router.post(
        CREATE,
        response_model=UserResponse,
        responses={
            200: {"description": "Created user, or an in-band error (statusCode set)"},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary="Register a user",
    )
    async def create_user(request: UserRequest) -> UserResponse:
        """
        Register a new user.

        Example in-band error:
            {"id": null, ..., "statusCode": 401,
             "description": "password must contain uppercase"}
        """
        return await user_service.create_user(request)

    @router.get(
        FIND_ALL,
        response_model=List[UserResponse],
        summary="List active users",
    )
    async def find_all_users() -> List[UserResponse]:
        return await user_service.find_all_users()

    @router.get(
        FIND_BY_ID,
        response_model=UserResponse,
        summary="Get an active user by id",
    )
    async def find_user(
        user_id: int = Query(alias="id", description="User id"),
    ) -> UserResponse:
        return await user_service.find_user(user_id)

    @router.post(
        UPDATE,
        response_model=UserResponse,
        summary="Update a user's profile",
    )
    async def update_user(
        request: UserRequest,
        user_id: int = Query(alias="id", description="User id"),
    ) -> UserResponse:
        return await user_service.update_user(user_id, request)

    @router.delete(
        DELETE,
        response_model=UserResponse,
        summary="Soft-delete a user",
        description="Marks the user as deleted; the record stays in the store.",
    )
    async def delete_user(
        user_id: int = Query(alias="id", description="User id"),
    ) -> UserResponse:
        return await user_service.delete_user(user_id)

    return router
