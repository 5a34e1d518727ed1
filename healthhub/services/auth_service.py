from healthhub.exceptions import AuthenticationError, AuthorizationError, ValidationError
from healthhub.models import Admin
from healthhub.schemas import AdminProfileUpdate
from healthhub.security import create_admin_token, hash_password, verify_password
from healthhub.utils.logger import get_logger

logger = get_logger("auth_service")


async def admin_login(email: str, password: str) -> tuple[str, Admin]:
    """Email + password login for every admin role; returns (token, admin)."""
    admin = await Admin.find_one(Admin.email == email)
    if not admin or not verify_password(password, admin.password):
        logger.warning(f"Failed admin login for {email}")
        raise AuthenticationError("Invalid email or password")
    if not admin.isActive:
        raise AuthorizationError("Admin account is disabled")
    return create_admin_token(admin), admin


async def change_password(admin: Admin, old_password: str, new_password: str) -> None:
    if not verify_password(old_password, admin.password):
        raise ValidationError("Old password is incorrect")
    if old_password == new_password:
        raise ValidationError("New password must differ from the old one")
    admin.password = hash_password(new_password)
    admin.touch()
    await admin.save()


async def update_profile(admin: Admin, payload: AdminProfileUpdate) -> Admin:
    changes = {k: v for k, v in payload.model_dump(exclude_none=True).items() if v != ""}
    if not changes:
        raise ValidationError("No fields provided for update")
    for key, value in changes.items():
        setattr(admin, key, value)
    admin.touch()
    await admin.save()
    return admin
