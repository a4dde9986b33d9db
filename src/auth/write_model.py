"""Write model for host accounts.

Registers hosts and checks their credentials. Returns DTOs instead of ORM models.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.dtos import AuthTokenDTO, HostAlreadyExistsError, HostDTO, InvalidCredentialsError
from src.auth.security import create_access_token, hash_password, verify_password
from src.config.database import async_session_manager
from src.models.host import Host

logger = logging.getLogger(__name__)


class HostAuthWriteModel(ABC):
    """Abstract base class for host registration and login."""

    @abstractmethod
    async def register(self, email: str, password: str, name: str) -> AuthTokenDTO:
        """Create a host account and issue a token.

        Raises:
            HostAlreadyExistsError: the email is already registered.
        """
        raise NotImplementedError

    @abstractmethod
    async def authenticate(self, email: str, password: str) -> AuthTokenDTO:
        """Check credentials and issue a token.

        Raises:
            InvalidCredentialsError: unknown email or wrong password.
        """
        raise NotImplementedError


class SqlHostAuthWriteModel(HostAuthWriteModel):
    """SQL implementation of host registration and login."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def register(self, email: str, password: str, name: str) -> AuthTokenDTO:
        email = email.strip().lower()
        hashed_password = await asyncio.to_thread(hash_password, password)
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                if await self._get_host_by_email(session, email) is not None:
                    raise HostAlreadyExistsError(email)

                host = Host(email=email, hashed_password=hashed_password, name=name.strip())
                session.add(host)
                await session.flush()
                host_dto = HostDTO(id=host.uuid, email=host.email, name=host.name)
        except IntegrityError as e:
            raise HostAlreadyExistsError(email) from e

        logger.info(f"Registered host {host_dto.id}")
        return AuthTokenDTO(token=create_access_token(host_dto), host=host_dto)

    async def authenticate(self, email: str, password: str) -> AuthTokenDTO:
        email = email.strip().lower()
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            host = await self._get_host_by_email(session, email)

        if host is None:
            raise InvalidCredentialsError()
        if not await asyncio.to_thread(verify_password, password, host.hashed_password):
            raise InvalidCredentialsError()

        host_dto = HostDTO(id=host.uuid, email=host.email, name=host.name)
        return AuthTokenDTO(token=create_access_token(host_dto), host=host_dto)

    async def _get_host_by_email(self, session, email: str) -> Host | None:
        result = await session.execute(select(Host).where(Host.email == email))
        return result.scalar_one_or_none()
