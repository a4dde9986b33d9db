from dataclasses import dataclass
from uuid import UUID


class HostAlreadyExistsError(Exception):
    """Raised when registering an email that already has a host account."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("User already exists")


class InvalidCredentialsError(Exception):
    """Raised when an email/password pair does not match a host."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be verified."""


@dataclass(frozen=True)
class HostDTO:
    """DTO for an authenticated host."""

    id: UUID
    email: str
    name: str


@dataclass(frozen=True)
class AuthTokenDTO:
    """Access token issued on register or login."""

    token: str
    host: HostDTO
