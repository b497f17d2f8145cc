from typing import Optional
from fastapi import Header, HTTPException
from app.config import settings

# Identity is established by the gateway in front of this service;
# it forwards the shopper id and the admin key as headers.

def get_current_user_id(x_user_id: Optional[int] = Header(default=None)) -> int:
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Missing user id")
    return x_user_id


def require_admin(x_admin_key: Optional[str] = Header(default=None)):
    if x_admin_key != settings.admin_api_key:
        raise HTTPException(status_code=403, detail="Admin access required")
    return True
