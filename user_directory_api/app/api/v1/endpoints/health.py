"""
Health endpoint for API v1.

Reports that the process is serving requests and that the database is
reachable by counting the stored users.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from user_directory_api.app.api.deps import get_user_service
from user_directory_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=Dict[str, Any])
def health(service: UserService = Depends(get_user_service)) -> Dict[str, Any]:
    return {"status": "ok", "users": service.count_users()}
