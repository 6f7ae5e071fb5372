from fastapi import Depends, Header
from typing import Optional

from ..core.security import AdminCredentials
from ..services.auth_service import AdminAuthService
from ..services.asset_store import CloudinaryAssetStore

def get_admin_credentials() -> AdminCredentials:
    """Admin identity and signing parameters from the process settings."""
    return AdminCredentials.from_settings()

def get_auth_service(
    credentials: AdminCredentials = Depends(get_admin_credentials)
) -> AdminAuthService:
    return AdminAuthService(credentials)

def get_asset_store() -> CloudinaryAssetStore:
    return CloudinaryAssetStore.from_settings()

async def require_admin(
    atoken: Optional[str] = Header(None),
    auth_service: AdminAuthService = Depends(get_auth_service)
) -> str:
    """Require a valid admin token in the ``atoken`` header."""
    return auth_service.verify(atoken)
