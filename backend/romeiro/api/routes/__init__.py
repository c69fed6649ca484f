"""API route modules."""

from fastapi import APIRouter

from . import (
    accommodations,
    admin_accommodations,
    admin_businesses,
    admin_content,
    admin_notifications,
    admin_users,
    auth,
    businesses,
    content,
    directory,
    health,
    inbox,
    push,
    settings,
    updates,
    users,
)

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(
    accommodations.router, prefix="/accommodations", tags=["accommodations"]
)
router.include_router(businesses.router, prefix="/businesses", tags=["businesses"])
router.include_router(content.router)
router.include_router(directory.router)
router.include_router(settings.router, prefix="/settings", tags=["settings"])
router.include_router(push.router, prefix="/push", tags=["push"])
router.include_router(updates.router, prefix="/updates", tags=["updates"])
router.include_router(inbox.router, prefix="/user/notifications", tags=["inbox"])
# Admin
router.include_router(admin_users.router, prefix="/admin", tags=["admin"])
router.include_router(
    admin_accommodations.router, prefix="/admin", tags=["admin-accommodations"]
)
router.include_router(
    admin_businesses.router, prefix="/admin/businesses", tags=["admin-businesses"]
)
router.include_router(
    admin_notifications.router,
    prefix="/admin/notifications",
    tags=["admin-notifications"],
)
router.include_router(admin_content.router, prefix="/admin")

__all__ = ["router"]
