"""
Request authentication.

The back-office is guarded by a shared admin key sent as a Bearer token.
"""
import hmac

from fastapi import Header, HTTPException

from medshop import config
from medshop.errors import ERROR_ADMIN_KEY_NOT_CONFIGURED, ERROR_UNAUTHORIZED


async def verify_admin(
    authorization: str = Header(None, alias="Authorization")
):
    """
    Verify ADMIN_API_KEY for back-office endpoints.
    """
    admin_key = config.ADMIN_API_KEY

    if not admin_key:
        raise HTTPException(status_code=500, detail=ERROR_ADMIN_KEY_NOT_CONFIGURED)

    if not authorization or not hmac.compare_digest(authorization, f"Bearer {admin_key}"):
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)

    return True
