from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.auth.dtos import HostDTO, InvalidTokenError
from src.auth.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_host(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> HostDTO:
    """Dependency resolving the host behind the Authorization header."""
    if credentials is None:
        raise HTTPException(status_code=401, detail="Access token required")
    try:
        return decode_access_token(credentials.credentials)
    except InvalidTokenError:
        raise HTTPException(status_code=403, detail="Invalid or expired token")
