from fastapi import APIRouter, Depends, Request

from healthhub.models import Admin
from healthhub.rate_limit import limiter
from healthhub.responses import success_response
from healthhub.schemas import AdminLoginIn, AdminProfileUpdate, ChangePasswordIn
from healthhub.security import get_current_admin
from healthhub.services import auth_service

router = APIRouter(prefix="/admin", tags=["admin-auth"])


@router.post("/admin-login")
@limiter.limit("10/minute")
async def admin_login(request: Request, payload: AdminLoginIn):
    """Email/password login for superadmins and partner admins."""
    token, admin = await auth_service.admin_login(payload.email, payload.password)
    return success_response(200, True, "Login successful", {
        "token": token,
        "admin": admin.to_public(),
    })


@router.get("/get-admin-details")
async def get_admin_details(current: Admin = Depends(get_current_admin)):
    return success_response(200, True, "Admin details fetched successfully", current.to_public())


@router.post("/changed-password")
async def changed_password(payload: ChangePasswordIn, current: Admin = Depends(get_current_admin)):
    await auth_service.change_password(current, payload.oldPassword, payload.newPassword)
    return success_response(200, True, "Password changed successfully")


@router.patch("/update-admin-profile")
async def update_admin_profile(
    payload: AdminProfileUpdate, current: Admin = Depends(get_current_admin)
):
    admin = await auth_service.update_profile(current, payload)
    return success_response(200, True, "Profile updated successfully", admin.to_public())
