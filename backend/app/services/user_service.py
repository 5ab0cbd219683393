"""
Project Backend — User Service
================================

What:  Registration, profile update, soft deletion and listing of users.
Why:   Keeps the business rules (validation, email uniqueness, soft delete)
       out of the route handlers and away from the store.
How:   Validates with app.validation, hashes passwords with app.security,
       reads/writes through UserRepository, maps entities to UserResponse.
Who:   Built by app.assembly; called by the /user route handlers.

Failure semantics:
    Validation and lookup failures are NOT exceptions. They come back as a
    UserResponse carrying statusCode and description, and the route still
    answers HTTP 200:

        invalid field        → statusCode 401, catalog description
        unknown/deleted user → statusCode 404, USER_NOT_FOUND
        email already active → statusCode 409, EMAIL_ALREADY_USED

    Store failures propagate as DatabaseError (HTTP 500).

Soft delete:
    Users are never removed. Deleting flips is_deleted to DELETED, which hides
    the user from every lookup that asks for ACTIVE records.
"""

import logging
from typing import List

from app.models.user import DeletionStatus, User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserRequest, UserResponse
from app.security import hash_password
from app.validation import ErrorMessage, normalize_email, validate_user_request

logger = logging.getLogger(__name__)

INVALID_REQUEST_STATUS = 401
NOT_FOUND_STATUS = 404
CONFLICT_STATUS = 409


class UserService:
    """
    Business logic layer for user operations.

    Responsibilities:
        - create_user(): validate, check email, persist with ACTIVE flag
        - find_all_users(): every ACTIVE user
        - find_user(): one ACTIVE user by id
        - update_user(): validate and replace profile fields
        - delete_user(): soft delete
    """

    def __init__(self, user_repository: UserRepository, bcrypt_rounds: int = 12) -> None:
        self._users = user_repository
        self._bcrypt_rounds = bcrypt_rounds

    @staticmethod
    def _to_response(user: User) -> UserResponse:
        """Map a stored user to its response DTO (never includes the password)."""
        return UserResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            phone_number=user.phone_number,
            role_id=user.role_id,
        )

    @staticmethod
    def _reject(status_code: int, reason: ErrorMessage) -> UserResponse:
        return UserResponse.error(status_code, reason.value)

    async def _email_taken(self, email: str, user_id: int | None = None) -> bool:
        """True if an ACTIVE user other than `user_id` already uses the normalized `email`."""
        owner = await self._users.find_by_email_and_is_deleted(email, DeletionStatus.ACTIVE)
        return owner is not None and owner.id != user_id

    async def create_user(self, request: UserRequest) -> UserResponse:
        """
        Register a new user.

        Returns:
            The created user (status_code null), or an in-band error:
            401 for an invalid field, 409 for an email already in use.
        """
        result = validate_user_request(request)
        if not result.ok:
            logger.info("User creation rejected: %s", result.error.name)
            return self._reject(INVALID_REQUEST_STATUS, result.error)

        email = normalize_email(request.email)
        if await self._email_taken(email):
            logger.info("User creation rejected: email already registered")
            return self._reject(CONFLICT_STATUS, ErrorMessage.EMAIL_ALREADY_USED)

        user = User(
            name=request.name,
            email=email,
            phone_number=request.phone_number,
            password=hash_password(request.password, rounds=self._bcrypt_rounds),
            role_id=request.role_id,
            is_deleted=DeletionStatus.ACTIVE,
        )
        saved = await self._users.save(user)
        logger.info("User %s created", saved.id)
        return self._to_response(saved)

    async def find_all_users(self) -> List[UserResponse]:
        """Every ACTIVE user; soft-deleted users are never listed."""
        users = await self._users.find_by_is_deleted(DeletionStatus.ACTIVE)
        return [self._to_response(u) for u in users]

    async def find_user(self, user_id: int) -> UserResponse:
        user = await self._users.find_by_id_and_is_deleted(user_id, DeletionStatus.ACTIVE)
        if user is None:
            return self._reject(NOT_FOUND_STATUS, ErrorMessage.USER_NOT_FOUND)
        return self._to_response(user)

    async def update_user(self, user_id: int, request: UserRequest) -> UserResponse:
        """
        Replace the profile fields of an ACTIVE user.

        The request is validated exactly like a registration, so the password
        is always re-submitted and re-hashed.

        Returns:
            The updated user, or an in-band error:
            401 invalid field, 404 unknown/deleted user, 409 email in use.
        """
        result = validate_user_request(request)
        if not result.ok:
            logger.info("Update of user %s rejected: %s", user_id, result.error.name)
            return self._reject(INVALID_REQUEST_STATUS, result.error)

        user = await self._users.find_by_id_and_is_deleted(user_id, DeletionStatus.ACTIVE)
        if user is None:
            return self._reject(NOT_FOUND_STATUS, ErrorMessage.USER_NOT_FOUND)

        email = normalize_email(request.email)
        if await self._email_taken(email, user_id=user_id):
            logger.info("Update of user %s rejected: email already registered", user_id)
            return self._reject(CONFLICT_STATUS, ErrorMessage.EMAIL_ALREADY_USED)

        user.name = request.name
        user.email = email
        user.phone_number = request.phone_number
        user.role_id = request.role_id
        user.password = hash_password(request.password, rounds=self._bcrypt_rounds)
        saved = await self._users.save(user)
        logger.info("User %s updated", saved.id)
        return self._to_response(saved)

    async def delete_user(self, user_id: int) -> UserResponse:
        """
        Soft-delete an ACTIVE user.

        Returns:
            The user as it was deleted, or 404 in-band when no ACTIVE user
            has that id (deleting twice reports 404 the second time).
        """
        user = await self._users.find_by_id_and_is_deleted(user_id, DeletionStatus.ACTIVE)
        if user is None:
            return self._reject(NOT_FOUND_STATUS, ErrorMessage.USER_NOT_FOUND)

        user.is_deleted = DeletionStatus.DELETED
        saved = await self._users.save(user)
        logger.info("User %s soft-deleted", saved.id)
        return self._to_response(saved)
