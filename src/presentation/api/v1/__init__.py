"""API v1 routers.

Resources:
    /api/v1/sessions/current                 - Login, status, logout
    /api/v1/clouds                           - Clouds
    /api/v1/folders                          - Folders of a cloud
    /api/v1/kms/keys                         - KMS keys of a folder
    /api/v1/secrets                          - Secrets
    /api/v1/secrets/{id}/versions            - Versions and destruction
    /api/v1/secrets/{id}/rollbacks           - Rollbacks
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.api.v1.clouds import clouds_router, folders_router, kms_router
from src.presentation.api.v1.secrets import router as secrets_router
from src.presentation.api.v1.sessions import router as sessions_router
from src.presentation.api.v1.versions import router as versions_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)

v1_router.include_router(sessions_router)
v1_router.include_router(clouds_router)
v1_router.include_router(folders_router)
v1_router.include_router(kms_router)
v1_router.include_router(secrets_router)
v1_router.include_router(versions_router)

__all__ = [
    "v1_router",
    "clouds_router",
    "folders_router",
    "kms_router",
    "secrets_router",
    "sessions_router",
    "versions_router",
]
