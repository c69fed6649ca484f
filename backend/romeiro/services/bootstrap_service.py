"""Bootstrap helpers for default data."""

from __future__ import annotations

import logging

from romeiro.core.config import get_settings
from romeiro.db.session import get_sessionmaker
from romeiro.models import UserRole
from romeiro.services.user_service import create_user, get_user_by_email

logger = logging.getLogger(__name__)


async def ensure_default_admin() -> None:
    """Create the configured admin user if one does not yet exist."""

    settings = get_settings()
    if not settings.admin_configured:
        logger.debug("ADMIN_EMAIL/ADMIN_PASSWORD not set; skipping admin bootstrap")
        return
    sessionmaker = get_sessionmaker(settings.database_url)
    async with sessionmaker() as session:
        existing = await get_user_by_email(session, settings.admin_email)
        if existing is not None:
            if existing.role != UserRole.ADMIN:
                existing.role = UserRole.ADMIN
                await session.commit()
                logger.info("Promoted %s to admin", existing.email)
            return
        await create_user(
            session,
            name=settings.admin_name,
            email=settings.admin_email,
            password=settings.admin_password,
            role=UserRole.ADMIN,
            accepted_terms=True,
        )
        logger.info("Created default admin %s", settings.admin_email.lower())
