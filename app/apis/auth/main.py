import shutil
import time
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status

from app.core.config import settings
from app.core.db.schemas.auth import User
from app.core.logging import get_logger
from app.modules.auth import (
    fastapi_users,
    auth_backend,
    current_active_user,
    UserRead,
    UserCreate,
    UserUpdate,
)


router = APIRouter()

logger = get_logger(__name__)

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/jpg", "image/png"}


@router.get("/api/auth/profile", response_model=UserRead, tags=["auth"])
async def get_user_profile(
    user: Annotated[User, Depends(current_active_user)],
) -> UserRead:
    """Profile of the authenticated user"""
    return UserRead.model_validate(user)


@router.post("/api/auth/upload-image", tags=["auth"])
def upload_image(
    request: Request,
    image: UploadFile = File(...),
) -> dict:
    """Store a profile image under the uploads directory and return its URL"""
    if image.content_type not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only .jpeg, .jpg and .png formats are allowed",
        )

    uploads = Path(settings.app.uploads_dir)
    uploads.mkdir(parents=True, exist_ok=True)
    filename = f"{int(time.time() * 1000)}-{Path(image.filename or 'image').name}"
    with open(uploads / filename, "wb") as f:
        shutil.copyfileobj(image.file, f)

    logger.info(f"Stored upload {filename}")
    return {"imageUrl": f"{str(request.base_url).rstrip('/')}/uploads/{filename}"}


# FastAPI Users routers: login/logout, register, user management
router.include_router(
    fastapi_users.get_auth_router(auth_backend),
    prefix="/api/auth",
    tags=["auth"],
)

router.include_router(
    fastapi_users.get_register_router(UserRead, UserCreate),
    prefix="/api/auth",
    tags=["auth"],
)

router.include_router(
    fastapi_users.get_users_router(UserRead, UserUpdate),
    prefix="/api/users",
    tags=["users"],
)
