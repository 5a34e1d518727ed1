from datetime import datetime, timedelta, timezone
from typing import List, Optional, Callable

from beanie import PydanticObjectId as OID
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError
from passlib.context import CryptContext

from healthhub.config import get_settings
from healthhub.constants import Role
from healthhub.exceptions import AuthenticationError, AuthorizationError
from healthhub.models import Admin

settings = get_settings()

bearer_scheme = HTTPBearer(auto_error=False)

# ------------------------ Password hashing helpers ------------------------

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """One-way bcrypt hash of a plaintext secret."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify by recompute; False when no hash is stored."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


# ------------------------ JWT helpers ------------------------


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def create_admin_token(admin: Admin) -> str:
    role = admin.role.value if isinstance(admin.role, Role) else admin.role
    return create_access_token({"sub": str(admin.id), "role": role})


def decode_token(token: str) -> dict:
    """Decode an access token; 401 on bad signature, expiry or wrong type."""
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        raise AuthenticationError("Invalid or expired token")
    if payload.get("type") != "access":
        raise AuthenticationError("Invalid token type")
    return payload


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Admin:
    """Resolve the caller from the bearer token.

    Raises 401 if the token is missing, invalid, expired or the admin no longer
    exists, 403 if the account has been deactivated.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authorization token is required")

    payload = decode_token(credentials.credentials)
    admin_id: str | None = payload.get("sub")
    if not admin_id or not OID.is_valid(admin_id):
        raise AuthenticationError()

    admin = await Admin.get(OID(admin_id))
    if not admin:
        raise AuthenticationError()
    if not admin.isActive:
        raise AuthorizationError("Admin account is disabled")
    return admin


# ------------------------ RBAC helpers ------------------------


def require_roles(allowed: List[Role]) -> Callable:
    """FastAPI dependency factory to enforce role-based access.
    Usage: Depends(require_roles([Role.SUPERADMIN]))
    """

    async def checker(current_admin: Admin = Depends(get_current_admin)) -> Admin:
        if current_admin.role not in allowed:
            raise AuthorizationError()
        return current_admin

    return checker


require_superadmin = require_roles([Role.SUPERADMIN])
