"""
Project Backend — Component Assembly
======================================

What:  Builds every long-lived component of the application in one place.
Why:   Dependencies are wired by hand instead of by framework injection:
       store client → repositories → services → route handlers.
How:   build_components() creates the engine and session factory, wraps the
       factory in repositories, and passes the repositories into services.
       create_app() then passes the services into the router factories.

    Settings
       │
       ▼
    AsyncEngine ──► async_sessionmaker
                          │
            ┌─────────────┴──────────────┐
            ▼                            ▼
     UserRepository              PackageRepository
            │                            │
            ▼                            ▼
       UserService                 PackageService
            │                            │
            ▼                            ▼
    build_user_router()       build_package_router()
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.config import Settings
from app.database import create_engine, create_session_factory
from app.repositories.package_repository import PackageRepository
from app.repositories.user_repository import UserRepository
from app.services.package_service import PackageService
from app.services.user_service import UserService


@dataclass
class Components:
    """Everything the application shares across requests."""

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    user_repository: UserRepository
    package_repository: PackageRepository
    user_service: UserService
    package_service: PackageService


def build_components(settings: Settings) -> Components:
    """Create the store client and every repository and service built on it."""
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    user_repository = UserRepository(session_factory)
    package_repository = PackageRepository(session_factory)

    return Components(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        user_repository=user_repository,
        package_repository=package_repository,
        user_service=UserService(user_repository, bcrypt_rounds=settings.bcrypt_rounds),
        package_service=PackageService(package_repository),
    )
