from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr, Field, field_validator

from src.auth.dtos import AuthTokenDTO, HostAlreadyExistsError, InvalidCredentialsError
from src.auth.write_model import HostAuthWriteModel, SqlHostAuthWriteModel

router = APIRouter()

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value.strip()


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class HostResponse(BaseModel):
    id: UUID
    email: str
    name: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: HostResponse


def get_host_auth_write_model() -> HostAuthWriteModel:
    """Dependency to get host auth write model instance."""
    return SqlHostAuthWriteModel()


def _auth_response(message: str, auth: AuthTokenDTO) -> AuthResponse:
    return AuthResponse(
        message=message,
        token=auth.token,
        user=HostResponse(id=auth.host.id, email=auth.host.email, name=auth.host.name),
    )


@router.post(REGISTER_URL, response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    write_model: HostAuthWriteModel = Depends(get_host_auth_write_model),
) -> AuthResponse:
    """Register a new host account."""
    try:
        auth = await write_model.register(
            email=request.email,
            password=request.password,
            name=request.name,
        )
    except HostAlreadyExistsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _auth_response("User created successfully", auth)


@router.post(LOGIN_URL, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    write_model: HostAuthWriteModel = Depends(get_host_auth_write_model),
) -> AuthResponse:
    """Log a host in and return a bearer token."""
    try:
        auth = await write_model.authenticate(email=request.email, password=request.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return _auth_response("Login successful", auth)
