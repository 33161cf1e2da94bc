"""Auth Routes — issue the session token cookie and clear it on logout.

Invariants:
    - POST /jwt sets cookie `token` (httpOnly, max-age = token TTL) and answers {success: true}
    - POST /logout deletes cookie `token` and answers {success: true}
    - Logout is client-side only: a copied token stays valid until it expires
"""

import logging

from fastapi import APIRouter, Depends, Response

from car_doctor.api.dependencies import get_app_settings, log_request
from car_doctor.config import Settings
from car_doctor.core.session_token import issue_token
from car_doctor.schemas.auth import IdentityClaim

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])

TOKEN_COOKIE = "token"


@router.post("/jwt", dependencies=[Depends(log_request)])
async def create_token(
    body: IdentityClaim,
    response: Response,
    settings: Settings = Depends(get_app_settings),
):
    """Sign the posted identity and store it in the `token` cookie."""
    token = issue_token(
        body.model_dump(),
        settings.access_token_secret,
        ttl_seconds=settings.access_token_ttl_seconds,
    )
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=settings.access_token_ttl_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    logger.info(f"Issued token for {body.email}")
    return {"success": True}


@router.post("/logout")
async def logout(
    response: Response, settings: Settings = Depends(get_app_settings),
):
    response.delete_cookie(
        TOKEN_COOKIE,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return {"success": True}
